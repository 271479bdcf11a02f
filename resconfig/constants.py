# Path: resconfig/constants.py
"""
System-Wide Constants for resconfig

Central repository for the resource enums and fixed values used by the
qualifiers, the folder configuration and the resolver.

Constants are organized by category:
- Separators and sentinels
- Qualifier axes
- Resource folder types
- Resource enums (one per enum-based qualifier)
- CLI status markers
"""

from enum import Enum, IntEnum
from typing import Final, Optional


# ==============================================================================
# SEPARATORS AND SENTINELS
# ==============================================================================

RES_QUALIFIER_SEP: Final[str] = '-'
"""Separator between the base folder name and each qualifier segment."""

FAKE_VALUE: Final[str] = '__'
"""Language/region sentinel meaning 'any'. Never produced by parsing."""

DEFAULT_CODE: Final[int] = -1
"""Value of an unset numeric qualifier (codes, dp sizes, versions)."""

DEFAULT_DENSITY: Final[int] = 160
"""Baseline dpi used to convert pixels to density-independent pixels."""


# ==============================================================================
# QUALIFIER AXES
# ==============================================================================

class QualifierAxis(IntEnum):
    """
    Fixed slot index of each qualifier type in a folder configuration.

    The order is the canonical Android folder-name order and also the
    match precedence used by the resolver (lower index = higher priority).
    """
    COUNTRY_CODE = 0
    NETWORK_CODE = 1
    LANGUAGE = 2
    REGION = 3
    LAYOUT_DIRECTION = 4
    SMALLEST_SCREEN_WIDTH = 5
    SCREEN_WIDTH = 6
    SCREEN_HEIGHT = 7
    SCREEN_SIZE = 8
    SCREEN_RATIO = 9
    SCREEN_ORIENTATION = 10
    UI_MODE = 11
    NIGHT_MODE = 12
    DENSITY = 13
    TOUCH_SCREEN = 14
    KEYBOARD_STATE = 15
    TEXT_INPUT_METHOD = 16
    NAVIGATION_STATE = 17
    NAVIGATION_METHOD = 18
    SCREEN_DIMENSION = 19
    VERSION = 20


QUALIFIER_COUNT: Final[int] = len(QualifierAxis)


# ==============================================================================
# RESOURCE FOLDER TYPES
# ==============================================================================

class ResourceFolderType(str, Enum):
    """Base names of Android resource folders."""
    ANIM = 'anim'
    ANIMATOR = 'animator'
    COLOR = 'color'
    DRAWABLE = 'drawable'
    FONT = 'font'
    INTERPOLATOR = 'interpolator'
    LAYOUT = 'layout'
    MENU = 'menu'
    MIPMAP = 'mipmap'
    RAW = 'raw'
    TRANSITION = 'transition'
    VALUES = 'values'
    XML = 'xml'


# ==============================================================================
# RESOURCE ENUMS
# ==============================================================================

class ResourceEnum(Enum):
    """
    Base class for enums whose members are written into folder names.

    The enum value is the folder segment ("hdpi", "land", ...); each member
    also carries short and long display strings.
    """

    def __new__(cls, resource_value: str, *args):
        obj = object.__new__(cls)
        obj._value_ = resource_value
        return obj

    def __init__(self, resource_value: str, short_display: str, long_display: str = ''):
        self.resource_value = resource_value
        self.short_display_value = short_display
        self.long_display_value = long_display or short_display

    @classmethod
    def get_enum(cls, value: str) -> Optional['ResourceEnum']:
        """
        Look up the member serialized as ``value``.

        Args:
            value: Folder segment to look up

        Returns:
            Matching member, or None. Members with an empty resource value
            can never be parsed from a folder name.
        """
        if not value:
            return None
        for member in cls:
            if member.resource_value == value:
                return member
        return None


class LayoutDirection(ResourceEnum):
    """Layout direction qualifier values."""
    LTR = ('ldltr', 'LTR', 'Left To Right')
    RTL = ('ldrtl', 'RTL', 'Right To Left')


class ScreenSize(ResourceEnum):
    """Screen size buckets."""
    SMALL = ('small', 'Small', 'Small Screen')
    NORMAL = ('normal', 'Normal', 'Normal Screen')
    LARGE = ('large', 'Large', 'Large Screen')
    XLARGE = ('xlarge', 'X-Large', 'Extra Large Screen')


class ScreenRatio(ResourceEnum):
    """Screen aspect ratio buckets."""
    LONG = ('long', 'Long', 'Long screen aspect ratio')
    NOTLONG = ('notlong', 'Not Long', 'Not long screen aspect ratio')


class ScreenOrientation(ResourceEnum):
    """Screen orientation values."""
    PORTRAIT = ('port', 'Portrait', 'Portrait Orientation')
    LANDSCAPE = ('land', 'Landscape', 'Landscape Orientation')
    SQUARE = ('square', 'Square', 'Square Orientation')


class UiMode(ResourceEnum):
    """
    UI mode values.

    NORMAL has no folder segment: it describes a device, never a folder.
    """

    def __init__(self, resource_value: str, long_display: str, since: int):
        super().__init__(resource_value, long_display)
        self.since = since

    NORMAL = ('', 'Normal', 1)
    CAR = ('car', 'Car Dock', 8)
    DESK = ('desk', 'Desk Dock', 8)
    TELEVISION = ('television', 'Television', 13)
    APPLIANCE = ('appliance', 'Appliance', 16)
    WATCH = ('watch', 'Watch', 20)
    VR_HEADSET = ('vrheadset', 'VR Headset', 26)


class NightMode(ResourceEnum):
    """Night mode values."""
    NOTNIGHT = ('notnight', 'Not Night', 'Not Night Mode')
    NIGHT = ('night', 'Night', 'Night Mode')


class Density(ResourceEnum):
    """
    Screen pixel densities.

    Each member carries its dpi value and the API level that introduced it.
    """

    def __init__(self, resource_value: str, long_display: str, dpi_value: int, since: int):
        super().__init__(resource_value, long_display)
        self.dpi_value = dpi_value
        self.since = since

    XXXHIGH = ('xxxhdpi', 'XXX-High Density', 640, 18)
    DPI_560 = ('560dpi', '560 DPI Density', 560, 1)
    XXHIGH = ('xxhdpi', 'XX-High Density', 480, 16)
    DPI_420 = ('420dpi', '420 DPI Density', 420, 23)
    DPI_400 = ('400dpi', '400 DPI Density', 400, 1)
    DPI_360 = ('360dpi', '360 DPI Density', 360, 23)
    XHIGH = ('xhdpi', 'X-High Density', 320, 8)
    DPI_280 = ('280dpi', '280 DPI Density', 280, 22)
    HIGH = ('hdpi', 'High Density', 240, 4)
    TV = ('tvdpi', 'TV Density', 213, 13)
    MEDIUM = ('mdpi', 'Medium Density', 160, 4)
    LOW = ('ldpi', 'Low Density', 120, 4)
    ANYDPI = ('anydpi', 'Any Density', 0xFFFE, 21)
    NODPI = ('nodpi', 'No Density', 0xFFFF, 4)

    @classmethod
    def get_enum_by_dpi(cls, dpi: int) -> Optional['Density']:
        """Return the density whose dpi value is ``dpi``, or None."""
        for member in cls:
            if member.dpi_value == dpi:
                return member
        return None


class TouchScreen(ResourceEnum):
    """Touch screen types."""
    NOTOUCH = ('notouch', 'No Touch', 'No-touch screen')
    STYLUS = ('stylus', 'Stylus', 'Stylus-based touchscreen')
    FINGER = ('finger', 'Finger', 'Finger-based touchscreen')


class KeyboardState(ResourceEnum):
    """Keyboard availability states."""
    EXPOSED = ('keysexposed', 'Exposed', 'Keyboard exposed')
    HIDDEN = ('keyshidden', 'Hidden', 'Keyboard hidden')
    SOFT = ('keyssoft', 'Soft', 'Soft keyboard')


class Keyboard(ResourceEnum):
    """Primary text input methods."""
    NOKEY = ('nokeys', 'No Keys', 'No keyboard')
    QWERTY = ('qwerty', 'Qwerty', 'Qwerty keyboard')
    TWELVEKEY = ('12key', '12 Key', '12 Key keyboard')


class NavigationState(ResourceEnum):
    """Navigation key availability states."""
    EXPOSED = ('navexposed', 'Exposed', 'Navigation exposed')
    HIDDEN = ('navhidden', 'Hidden', 'Navigation hidden')


class Navigation(ResourceEnum):
    """Primary non-touch navigation methods."""
    NONAV = ('nonav', 'None', 'No Navigation')
    DPAD = ('dpad', 'D-pad', 'D-pad Navigation')
    TRACKBALL = ('trackball', 'Trackball', 'Trackball Navigation')
    WHEEL = ('wheel', 'Wheel', 'Wheel Navigation')


# ==============================================================================
# CLI STATUS MARKERS
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_INFO: Final[str] = '[INFO]'
MENU_SEPARATOR: Final[str] = '-' * 60


__all__ = [
    'RES_QUALIFIER_SEP',
    'FAKE_VALUE',
    'DEFAULT_CODE',
    'DEFAULT_DENSITY',
    'QualifierAxis',
    'QUALIFIER_COUNT',
    'ResourceFolderType',
    'ResourceEnum',
    'LayoutDirection',
    'ScreenSize',
    'ScreenRatio',
    'ScreenOrientation',
    'UiMode',
    'NightMode',
    'Density',
    'TouchScreen',
    'KeyboardState',
    'Keyboard',
    'NavigationState',
    'Navigation',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_INFO',
    'MENU_SEPARATOR',
]
