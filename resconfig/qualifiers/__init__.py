# Path: resconfig/qualifiers/__init__.py
"""
Resource Qualifiers

One class per axis of an Android resource configuration:
- base: ResourceQualifier and EnumBasedResourceQualifier
- network: mobile country / network codes
- locale: language and region
- screen: screen geometry
- device: density, UI mode, keyboard, navigation, ...
- version: platform API level
"""

from .base import ResourceQualifier, EnumBasedResourceQualifier
from .network import CountryCodeQualifier, NetworkCodeQualifier
from .locale import LanguageQualifier, RegionQualifier
from .screen import (
    DimensionQualifier,
    SmallestScreenWidthQualifier,
    ScreenWidthQualifier,
    ScreenHeightQualifier,
    ScreenSizeQualifier,
    ScreenRatioQualifier,
    ScreenOrientationQualifier,
    ScreenDimensionQualifier,
)
from .device import (
    LayoutDirectionQualifier,
    UiModeQualifier,
    NightModeQualifier,
    DensityQualifier,
    TouchScreenQualifier,
    KeyboardStateQualifier,
    TextInputMethodQualifier,
    NavigationStateQualifier,
    NavigationMethodQualifier,
)
from .version import VersionQualifier

__all__ = [
    # Base
    'ResourceQualifier',
    'EnumBasedResourceQualifier',
    'DimensionQualifier',
    # Variants, in axis order
    'CountryCodeQualifier',
    'NetworkCodeQualifier',
    'LanguageQualifier',
    'RegionQualifier',
    'LayoutDirectionQualifier',
    'SmallestScreenWidthQualifier',
    'ScreenWidthQualifier',
    'ScreenHeightQualifier',
    'ScreenSizeQualifier',
    'ScreenRatioQualifier',
    'ScreenOrientationQualifier',
    'UiModeQualifier',
    'NightModeQualifier',
    'DensityQualifier',
    'TouchScreenQualifier',
    'KeyboardStateQualifier',
    'TextInputMethodQualifier',
    'NavigationStateQualifier',
    'NavigationMethodQualifier',
    'ScreenDimensionQualifier',
    'VersionQualifier',
]
