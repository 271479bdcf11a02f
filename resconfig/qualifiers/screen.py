# Path: resconfig/qualifiers/screen.py
"""
Screen Qualifiers

Qualifiers describing screen geometry:
- SmallestScreenWidthQualifier, ScreenWidthQualifier, ScreenHeightQualifier:
  available space in dp. A resource fits when its value is <= the device's.
- ScreenSizeQualifier, ScreenRatioQualifier, ScreenOrientationQualifier:
  enum buckets.
- ScreenDimensionQualifier: deprecated raw pixel dimension (``800x480``).
"""

import re
from typing import TYPE_CHECKING, Optional

from ..constants import (
    DEFAULT_CODE,
    QualifierAxis,
    ScreenOrientation,
    ScreenRatio,
    ScreenSize,
)
from .base import EnumBasedResourceQualifier, ResourceQualifier

if TYPE_CHECKING:
    from ..configuration.folder_configuration import FolderConfiguration


class DimensionQualifier(ResourceQualifier):
    """
    Base class for dp-sized qualifiers.

    Subclasses declare the segment prefix; values are parsed from
    ``<prefix><N>dp`` and written back in the same form.
    """

    PREFIX: str = ''
    _PATTERN: 're.Pattern[str]'

    def __init__(self, value: int = DEFAULT_CODE):
        self._value = value

    @classmethod
    def get_qualifier(cls, value: str) -> Optional['DimensionQualifier']:
        """Build a qualifier from the numeric part of a segment, or return None."""
        try:
            return cls(int(value))
        except ValueError:
            return None

    @property
    def value(self) -> int:
        return self._value

    def since(self) -> int:
        return 13

    def is_valid(self) -> bool:
        return self._value != DEFAULT_CODE

    def has_fake_value(self) -> bool:
        return False

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        match = self._PATTERN.fullmatch(self._require_segment(value))
        if not match:
            return False
        qualifier = self.get_qualifier(match.group(1))
        if qualifier is None:
            return False
        config.add_qualifier(qualifier)
        return True

    def is_match_for(self, qualifier: ResourceQualifier) -> bool:
        # the resource must fit in the space available on the device
        if type(qualifier) is type(self):
            return self._value <= qualifier._value
        return False

    def is_better_match_than(
        self,
        compare_to: Optional[ResourceQualifier],
        reference: ResourceQualifier
    ) -> bool:
        if compare_to is None:
            return True

        if compare_to._value == reference._value:
            # already an exact match
            return False
        elif self._value == reference._value:
            return True
        else:
            # both fit (is_match_for ran first): the larger one is closer
            return self._value > compare_to._value

    def get_folder_segment(self) -> str:
        if self.is_valid():
            return f'{self.PREFIX}{self._value}dp'
        return ''

    def get_short_display_value(self) -> str:
        return self.get_folder_segment()

    def get_long_display_value(self) -> str:
        return self.get_short_display_value()

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other._value == self._value

    def __hash__(self) -> int:
        return hash((self.AXIS, self._value))


class SmallestScreenWidthQualifier(DimensionQualifier):
    """Smallest available screen width in dp (``sw600dp``)."""

    AXIS = QualifierAxis.SMALLEST_SCREEN_WIDTH
    NAME = 'Smallest Screen Width'
    SHORT_NAME = 'Smallest Width'
    PREFIX = 'sw'
    _PATTERN = re.compile(r'^sw([0-9]+)dp$')


class ScreenWidthQualifier(DimensionQualifier):
    """Available screen width in dp (``w720dp``)."""

    AXIS = QualifierAxis.SCREEN_WIDTH
    NAME = 'Screen Width'
    PREFIX = 'w'
    _PATTERN = re.compile(r'^w([0-9]+)dp$')


class ScreenHeightQualifier(DimensionQualifier):
    """Available screen height in dp (``h480dp``)."""

    AXIS = QualifierAxis.SCREEN_HEIGHT
    NAME = 'Screen Height'
    PREFIX = 'h'
    _PATTERN = re.compile(r'^h([0-9]+)dp$')


class ScreenSizeQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.SCREEN_SIZE
    NAME = 'Screen Size'
    SHORT_NAME = 'Size'
    ENUM_TYPE = ScreenSize
    SINCE = 4


class ScreenRatioQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.SCREEN_RATIO
    NAME = 'Screen Ratio'
    SHORT_NAME = 'Ratio'
    ENUM_TYPE = ScreenRatio
    SINCE = 4


class ScreenOrientationQualifier(EnumBasedResourceQualifier):
    AXIS = QualifierAxis.SCREEN_ORIENTATION
    NAME = 'Screen Orientation'
    SHORT_NAME = 'Orientation'
    ENUM_TYPE = ScreenOrientation
    SINCE = 1


class ScreenDimensionQualifier(ResourceQualifier):
    """
    Raw screen dimension in pixels (``800x480``), larger value first.

    Deprecated as a folder qualifier; still used to describe devices.
    """

    AXIS = QualifierAxis.SCREEN_DIMENSION
    NAME = 'Screen Dimension'
    SHORT_NAME = 'Dimension'

    _PATTERN = re.compile(r'^([0-9]+)x([0-9]+)$')

    def __init__(self, value1: int = DEFAULT_CODE, value2: int = DEFAULT_CODE):
        if value1 < value2:
            value1, value2 = value2, value1
        self._value1 = value1
        self._value2 = value2

    @property
    def value1(self) -> int:
        """The larger of the two dimensions."""
        return self._value1

    @property
    def value2(self) -> int:
        """The smaller of the two dimensions."""
        return self._value2

    def since(self) -> int:
        return 1

    def deprecated(self) -> bool:
        return True

    def is_valid(self) -> bool:
        return self._value1 != DEFAULT_CODE and self._value2 != DEFAULT_CODE

    def has_fake_value(self) -> bool:
        return False

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        match = self._PATTERN.fullmatch(self._require_segment(value))
        if not match:
            return False
        try:
            qualifier = ScreenDimensionQualifier(int(match.group(1)), int(match.group(2)))
        except ValueError:
            return False
        config.add_qualifier(qualifier)
        return True

    def get_folder_segment(self) -> str:
        if self.is_valid():
            return f'{self._value1}x{self._value2}'
        return ''

    def get_short_display_value(self) -> str:
        return self.get_folder_segment()

    def get_long_display_value(self) -> str:
        return self.get_folder_segment()

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ScreenDimensionQualifier)
            and other._value1 == self._value1
            and other._value2 == self._value2
        )

    def __hash__(self) -> int:
        return hash((self.AXIS, self._value1, self._value2))


__all__ = [
    'DimensionQualifier',
    'SmallestScreenWidthQualifier',
    'ScreenWidthQualifier',
    'ScreenHeightQualifier',
    'ScreenSizeQualifier',
    'ScreenRatioQualifier',
    'ScreenOrientationQualifier',
    'ScreenDimensionQualifier',
]
