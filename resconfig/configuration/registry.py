# Path: resconfig/configuration/registry.py
"""
Qualifier Registry

Fixed, ordered table of qualifier types. The position of a type in
QUALIFIER_TYPES is its axis index: the folder-name parsing order and the
match precedence.
"""

from functools import lru_cache
from typing import Union

from ..qualifiers import (
    ResourceQualifier,
    CountryCodeQualifier,
    NetworkCodeQualifier,
    LanguageQualifier,
    RegionQualifier,
    LayoutDirectionQualifier,
    SmallestScreenWidthQualifier,
    ScreenWidthQualifier,
    ScreenHeightQualifier,
    ScreenSizeQualifier,
    ScreenRatioQualifier,
    ScreenOrientationQualifier,
    UiModeQualifier,
    NightModeQualifier,
    DensityQualifier,
    TouchScreenQualifier,
    KeyboardStateQualifier,
    TextInputMethodQualifier,
    NavigationStateQualifier,
    NavigationMethodQualifier,
    ScreenDimensionQualifier,
    VersionQualifier,
)


QUALIFIER_TYPES: tuple[type[ResourceQualifier], ...] = (
    CountryCodeQualifier,
    NetworkCodeQualifier,
    LanguageQualifier,
    RegionQualifier,
    LayoutDirectionQualifier,
    SmallestScreenWidthQualifier,
    ScreenWidthQualifier,
    ScreenHeightQualifier,
    ScreenSizeQualifier,
    ScreenRatioQualifier,
    ScreenOrientationQualifier,
    UiModeQualifier,
    NightModeQualifier,
    DensityQualifier,
    TouchScreenQualifier,
    KeyboardStateQualifier,
    TextInputMethodQualifier,
    NavigationStateQualifier,
    NavigationMethodQualifier,
    ScreenDimensionQualifier,
    VersionQualifier,
)


@lru_cache(maxsize=None)
def default_qualifiers() -> tuple[ResourceQualifier, ...]:
    """
    Return one unset qualifier per axis, in axis order.

    Computed once; used as the probe list when parsing folder segments.
    """
    return tuple(cls() for cls in QUALIFIER_TYPES)


def axis_of(qualifier: Union[ResourceQualifier, type[ResourceQualifier]]) -> int:
    """
    Return the axis index owned by a qualifier or qualifier type.

    Raises:
        ValueError: If the type is not one of the registered qualifiers
    """
    cls = qualifier if isinstance(qualifier, type) else type(qualifier)
    if cls not in QUALIFIER_TYPES:
        raise ValueError(f"Unknown qualifier type: {cls.__name__}")
    return int(cls.AXIS)


__all__ = ['QUALIFIER_TYPES', 'default_qualifiers', 'axis_of']
