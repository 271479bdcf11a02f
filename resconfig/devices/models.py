# Path: resconfig/devices/models.py
"""
Device Profile Model

Pydantic model describing a target device, loaded from YAML. A profile
turns into the reference FolderConfiguration used by the resolver.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..configuration.folder_configuration import FolderConfiguration
from ..constants import (
    Density,
    Keyboard,
    KeyboardState,
    LayoutDirection,
    Navigation,
    NavigationState,
    NightMode,
    ScreenOrientation,
    ScreenRatio,
    ScreenSize,
    TouchScreen,
    UiMode,
)
from ..qualifiers import (
    CountryCodeQualifier,
    DensityQualifier,
    KeyboardStateQualifier,
    LanguageQualifier,
    LayoutDirectionQualifier,
    NavigationMethodQualifier,
    NavigationStateQualifier,
    NetworkCodeQualifier,
    NightModeQualifier,
    RegionQualifier,
    ScreenDimensionQualifier,
    ScreenOrientationQualifier,
    ScreenRatioQualifier,
    ScreenSizeQualifier,
    TextInputMethodQualifier,
    TouchScreenQualifier,
    UiModeQualifier,
    VersionQualifier,
)


class DeviceProfile(BaseModel):
    """
    A device that resources are resolved for.

    Enum fields take folder segment values ("xhdpi", "port", "finger").
    Orientation defaults to the one implied by the pixel dimensions.

    Example:
        profile = DeviceProfile(
            device_id='pixel_7',
            name='Pixel 7',
            screen_width_px=1080,
            screen_height_px=2400,
            density='420dpi',
            api_level=33,
        )
        reference = profile.to_configuration()
    """
    device_id: str = Field(
        min_length=1,
        description="Unique identifier used on the command line"
    )
    name: str = Field(
        description="Human-readable device name"
    )
    screen_width_px: int = Field(
        gt=0,
        description="Screen width in pixels, in the natural orientation"
    )
    screen_height_px: int = Field(
        gt=0,
        description="Screen height in pixels, in the natural orientation"
    )
    density: Density = Field(
        description="Screen density bucket"
    )
    api_level: int = Field(
        ge=1,
        description="Platform API level"
    )
    orientation: Optional[ScreenOrientation] = Field(
        default=None,
        description="Current orientation (derived from pixels if absent)"
    )
    language: Optional[str] = Field(
        default=None,
        pattern=r'^[a-zA-Z]{2}$',
        description="Two-letter language code"
    )
    region: Optional[str] = Field(
        default=None,
        pattern=r'^[a-zA-Z]{2}$',
        description="Two-letter region code"
    )
    mcc: Optional[int] = Field(
        default=None,
        ge=100, le=999,
        description="Mobile country code"
    )
    mnc: Optional[int] = Field(
        default=None,
        ge=1, le=999,
        description="Mobile network code"
    )
    layout_direction: Optional[LayoutDirection] = None
    screen_size: Optional[ScreenSize] = None
    screen_ratio: Optional[ScreenRatio] = None
    ui_mode: UiMode = Field(
        default=UiMode.NORMAL,
        description="UI mode; 'normal' or an empty value for a plain device"
    )
    night_mode: NightMode = NightMode.NOTNIGHT
    touchscreen: TouchScreen = TouchScreen.FINGER
    keyboard_state: KeyboardState = KeyboardState.SOFT
    text_input: Keyboard = Keyboard.NOKEY
    navigation_state: NavigationState = NavigationState.HIDDEN
    navigation_method: Navigation = Navigation.NONAV

    model_config = {
        'frozen': True,
    }

    @field_validator('ui_mode', mode='before')
    @classmethod
    def validate_ui_mode(cls, v):
        """Accept 'normal' for the mode that has no folder segment."""
        if isinstance(v, str) and v.strip().lower() == 'normal':
            return UiMode.NORMAL
        return v

    @model_validator(mode='after')
    def validate_region_has_language(self) -> 'DeviceProfile':
        """A region is only meaningful with a language."""
        if self.region is not None and self.language is None:
            raise ValueError("region requires language")
        return self

    @property
    def effective_orientation(self) -> ScreenOrientation:
        """Configured orientation, or the one implied by the pixel dimensions."""
        if self.orientation is not None:
            return self.orientation
        if self.screen_width_px > self.screen_height_px:
            return ScreenOrientation.LANDSCAPE
        if self.screen_width_px == self.screen_height_px:
            return ScreenOrientation.SQUARE
        return ScreenOrientation.PORTRAIT

    def to_configuration(self) -> FolderConfiguration:
        """
        Build the reference configuration for this device.

        Screen width, height and smallest width in dp are derived from the
        pixel dimensions, the density and the orientation.

        Returns:
            FolderConfiguration describing the device
        """
        config = FolderConfiguration()

        if self.mcc is not None:
            config.country_code = CountryCodeQualifier(self.mcc)
        if self.mnc is not None:
            config.network_code = NetworkCodeQualifier(self.mnc)
        if self.language is not None:
            config.language = LanguageQualifier(self.language)
        if self.region is not None:
            config.region = RegionQualifier(self.region)
        if self.layout_direction is not None:
            config.layout_direction = LayoutDirectionQualifier(self.layout_direction)
        if self.screen_size is not None:
            config.screen_size = ScreenSizeQualifier(self.screen_size)
        if self.screen_ratio is not None:
            config.screen_ratio = ScreenRatioQualifier(self.screen_ratio)

        config.screen_orientation = ScreenOrientationQualifier(self.effective_orientation)
        config.ui_mode = UiModeQualifier(self.ui_mode)
        config.night_mode = NightModeQualifier(self.night_mode)
        config.density = DensityQualifier(self.density)
        config.touch_type = TouchScreenQualifier(self.touchscreen)
        config.keyboard_state = KeyboardStateQualifier(self.keyboard_state)
        config.text_input_method = TextInputMethodQualifier(self.text_input)
        config.navigation_state = NavigationStateQualifier(self.navigation_state)
        config.navigation_method = NavigationMethodQualifier(self.navigation_method)
        config.screen_dimension = ScreenDimensionQualifier(
            self.screen_width_px, self.screen_height_px
        )
        config.version = VersionQualifier(self.api_level)

        config.update_screen_width_and_height()
        return config


__all__ = ['DeviceProfile']
