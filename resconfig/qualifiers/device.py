# Path: resconfig/qualifiers/device.py
"""
Device Qualifiers

Enum-based qualifiers describing the device rather than the screen size:
layout direction, UI mode, night mode, density, touch screen, keyboard
and navigation.

Density, KeyboardState and UiMode carry custom match rules; the rest use
plain equality and never prefer one value over another.
"""

import re
from typing import TYPE_CHECKING, Optional

from ..constants import (
    Density,
    Keyboard,
    KeyboardState,
    LayoutDirection,
    Navigation,
    NavigationState,
    NightMode,
    QualifierAxis,
    TouchScreen,
    UiMode,
)
from .base import EnumBasedResourceQualifier, ResourceQualifier

if TYPE_CHECKING:
    from ..configuration.folder_configuration import FolderConfiguration


class LayoutDirectionQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.LAYOUT_DIRECTION
    NAME = 'Layout Direction'
    ENUM_TYPE = LayoutDirection
    SINCE = 17


class UiModeQualifier(EnumBasedResourceQualifier):
    """
    UI mode (``car``, ``television``, ...).

    NORMAL is not a real mode: a NORMAL qualifier matches every device
    mode, and loses to an exact match.
    """

    AXIS = QualifierAxis.UI_MODE
    NAME = 'UI Mode'
    ENUM_TYPE = UiMode
    SINCE = 8

    def is_match_for(self, qualifier: ResourceQualifier) -> bool:
        if self._value is UiMode.NORMAL and isinstance(qualifier, UiModeQualifier):
            return True
        return super().is_match_for(qualifier)

    def is_better_match_than(
        self,
        compare_to: Optional[ResourceQualifier],
        reference: ResourceQualifier
    ) -> bool:
        if compare_to is None:
            return True
        return self == reference and compare_to != reference


class NightModeQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.NIGHT_MODE
    NAME = 'Night Mode'
    ENUM_TYPE = NightMode
    SINCE = 8


class DensityQualifier(EnumBasedResourceQualifier):
    """
    Screen pixel density (``hdpi``, ``xhdpi``, legacy ``240dpi``).

    Density never excludes a resource: every density matches, and the
    closest one is picked by is_better_match_than().
    """

    AXIS = QualifierAxis.DENSITY
    NAME = 'Density'
    ENUM_TYPE = Density
    SINCE = 4

    _LEGACY_PATTERN = re.compile(r'^([0-9]+)dpi$')

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        density = Density.get_enum(self._require_segment(value))
        if density is None:
            # legacy numeric form
            match = self._LEGACY_PATTERN.fullmatch(value)
            if match:
                try:
                    density = Density.get_enum_by_dpi(int(match.group(1)))
                except ValueError:
                    density = None

        if density is None:
            return False

        config.add_qualifier(DensityQualifier(density))
        return True

    def is_match_for(self, qualifier: ResourceQualifier) -> bool:
        return isinstance(qualifier, DensityQualifier)

    def is_better_match_than(
        self,
        compare_to: Optional[ResourceQualifier],
        reference: ResourceQualifier
    ) -> bool:
        if compare_to is None:
            return True

        if compare_to._value is reference._value:
            # already an exact match
            return False
        elif self._value is reference._value:
            return True
        else:
            # Prefer the higher dpi: scaling down beats scaling up.
            return self._value.dpi_value > compare_to._value.dpi_value


class TouchScreenQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.TOUCH_SCREEN
    NAME = 'Touch Screen'
    ENUM_TYPE = TouchScreen
    SINCE = 1


class KeyboardStateQualifier(EnumBasedResourceQualifier):
    """
    Keyboard state (``keysexposed``, ``keyshidden``, ``keyssoft``).

    An EXPOSED resource can be used on a device asking for SOFT, but a
    SOFT resource is preferred when both exist.
    """

    AXIS = QualifierAxis.KEYBOARD_STATE
    NAME = 'Keyboard State'
    SHORT_NAME = 'Keyboard'
    ENUM_TYPE = KeyboardState
    SINCE = 1

    def is_match_for(self, qualifier: ResourceQualifier) -> bool:
        if not isinstance(qualifier, KeyboardStateQualifier):
            return False
        if qualifier._value is KeyboardState.SOFT and self._value is KeyboardState.EXPOSED:
            return True
        return qualifier._value is self._value

    def is_better_match_than(
        self,
        compare_to: Optional[ResourceQualifier],
        reference: ResourceQualifier
    ) -> bool:
        if compare_to is None:
            return True
        return (
            reference._value is KeyboardState.SOFT
            and compare_to._value is KeyboardState.EXPOSED
            and self._value is KeyboardState.SOFT
        )


class TextInputMethodQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.TEXT_INPUT_METHOD
    NAME = 'Text Input Method'
    SHORT_NAME = 'Text Input'
    ENUM_TYPE = Keyboard
    SINCE = 1


class NavigationStateQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.NAVIGATION_STATE
    NAME = 'Navigation State'
    ENUM_TYPE = NavigationState
    SINCE = 1


class NavigationMethodQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.NAVIGATION_METHOD
    NAME = 'Navigation Method'
    ENUM_TYPE = Navigation
    SINCE = 1


__all__ = [
    'LayoutDirectionQualifier',
    'UiModeQualifier',
    'NightModeQualifier',
    'DensityQualifier',
    'TouchScreenQualifier',
    'KeyboardStateQualifier',
    'TextInputMethodQualifier',
    'NavigationStateQualifier',
    'NavigationMethodQualifier',
]
