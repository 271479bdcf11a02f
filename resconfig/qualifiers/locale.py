# Path: resconfig/qualifiers/locale.py
"""
Locale Qualifiers

Language and region qualifiers. Both accept two-letter alphabetic codes
and support the FAKE_VALUE sentinel ("__") meaning "any". The sentinel is
only ever set programmatically and is never rendered.
"""

import re
from typing import TYPE_CHECKING, Optional

from ..constants import FAKE_VALUE, QualifierAxis
from .base import ResourceQualifier

if TYPE_CHECKING:
    from ..configuration.folder_configuration import FolderConfiguration


class LanguageQualifier(ResourceQualifier):
    """Two-letter language code, stored lower-case (``en``)."""

    AXIS = QualifierAxis.LANGUAGE
    NAME = 'Language'

    _PATTERN = re.compile(r'^[a-zA-Z]{2}$')

    def __init__(self, value: Optional[str] = None):
        if value is not None and value != FAKE_VALUE:
            value = value.lower()
        self._value = value

    @classmethod
    def get_qualifier(cls, segment: str) -> Optional['LanguageQualifier']:
        """Build a qualifier from a folder segment, or return None."""
        if cls._PATTERN.fullmatch(segment):
            return cls(segment)
        return None

    @classmethod
    def folder_segment_for(cls, value: str) -> Optional[str]:
        """Return the folder segment for a language code, or None if invalid."""
        segment = value.lower()
        if cls._PATTERN.fullmatch(segment):
            return segment
        return None

    @property
    def value(self) -> str:
        return self._value or ''

    def since(self) -> int:
        return 1

    def is_valid(self) -> bool:
        return self._value is not None

    def has_fake_value(self) -> bool:
        return self._value == FAKE_VALUE

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        qualifier = self.get_qualifier(self._require_segment(value))
        if qualifier is None:
            return False
        config.add_qualifier(qualifier)
        return True

    def get_folder_segment(self) -> str:
        if self._value is not None:
            return self.folder_segment_for(self._value) or ''
        return ''

    def get_short_display_value(self) -> str:
        if self._value is None or self.has_fake_value():
            return ''
        return self._value

    def get_long_display_value(self) -> str:
        if self._value is None or self.has_fake_value():
            return ''
        return f'Language {self._value}'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LanguageQualifier) and other._value == self._value

    def __hash__(self) -> int:
        return hash((self.AXIS, self._value))


class RegionQualifier(ResourceQualifier):
    """Two-letter region code with an ``r`` prefix, stored upper-case (``rUS``)."""

    AXIS = QualifierAxis.REGION
    NAME = 'Region'

    _PATTERN = re.compile(r'^[rR]([a-zA-Z]{2})$')

    def __init__(self, value: Optional[str] = None):
        if value is not None and value != FAKE_VALUE:
            value = value.upper()
        self._value = value

    @classmethod
    def get_qualifier(cls, segment: str) -> Optional['RegionQualifier']:
        """Build a qualifier from a folder segment, or return None."""
        match = cls._PATTERN.fullmatch(segment)
        if match:
            return cls(match.group(1))
        return None

    @classmethod
    def folder_segment_for(cls, value: Optional[str]) -> str:
        """Return the folder segment for a region code, or '' if invalid."""
        if value is not None:
            segment = 'r' + value.upper()
            if cls._PATTERN.fullmatch(segment):
                return segment
        return ''

    @property
    def value(self) -> str:
        return self._value or ''

    def since(self) -> int:
        return 1

    def is_valid(self) -> bool:
        return self._value is not None

    def has_fake_value(self) -> bool:
        return self._value == FAKE_VALUE

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        value = self._require_segment(value)
        if len(value) != 3:
            return False
        qualifier = self.get_qualifier(value)
        if qualifier is None:
            return False
        config.add_qualifier(qualifier)
        return True

    def get_folder_segment(self) -> str:
        return self.folder_segment_for(self._value)

    def get_short_display_value(self) -> str:
        if self._value is None or self.has_fake_value():
            return ''
        return self._value

    def get_long_display_value(self) -> str:
        if self._value is None or self.has_fake_value():
            return ''
        return f'Region {self._value}'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RegionQualifier) and other._value == self._value

    def __hash__(self) -> int:
        return hash((self.AXIS, self._value))


__all__ = ['LanguageQualifier', 'RegionQualifier']
