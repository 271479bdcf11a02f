# Path: resconfig/qualifiers/network.py
"""
Mobile Network Qualifiers

Mobile country code (mcc) and mobile network code (mnc) qualifiers.
Both are numeric; a segment that does not match the code pattern is
rejected rather than defaulted.
"""

import re
from typing import TYPE_CHECKING, Optional

from ..constants import DEFAULT_CODE, QualifierAxis
from .base import ResourceQualifier

if TYPE_CHECKING:
    from ..configuration.folder_configuration import FolderConfiguration


class CountryCodeQualifier(ResourceQualifier):
    """Mobile country code, always three digits (``mcc310``)."""

    AXIS = QualifierAxis.COUNTRY_CODE
    NAME = 'Mobile Country Code'
    SHORT_NAME = 'Country Code'

    _PATTERN = re.compile(r'^mcc([0-9]{3})$')

    def __init__(self, code: int = DEFAULT_CODE):
        self._code = code

    @classmethod
    def get_qualifier(cls, segment: str) -> Optional['CountryCodeQualifier']:
        """
        Build a qualifier from a folder segment.

        Returns:
            CountryCodeQualifier, or None if the segment is not an mcc code
        """
        match = cls._PATTERN.fullmatch(segment)
        if not match:
            return None
        try:
            code = int(match.group(1))
        except ValueError:
            return None
        return cls(code)

    @staticmethod
    def folder_segment_for(code: int) -> str:
        """Return the folder segment for ``code``, or '' outside 100-999."""
        if 100 <= code <= 999:
            return f'mcc{code}'
        return ''

    @property
    def code(self) -> int:
        return self._code

    def since(self) -> int:
        return 1

    def is_valid(self) -> bool:
        return self._code != DEFAULT_CODE

    def has_fake_value(self) -> bool:
        return False

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        qualifier = self.get_qualifier(self._require_segment(value))
        if qualifier is None:
            return False
        config.add_qualifier(qualifier)
        return True

    def get_folder_segment(self) -> str:
        return self.folder_segment_for(self._code)

    def get_short_display_value(self) -> str:
        if self._code != DEFAULT_CODE:
            return f'MCC {self._code}'
        return ''

    def get_long_display_value(self) -> str:
        return self.get_short_display_value()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CountryCodeQualifier) and other._code == self._code

    def __hash__(self) -> int:
        return hash((self.AXIS, self._code))


class NetworkCodeQualifier(ResourceQualifier):
    """Mobile network code, one to three digits, written zero-padded (``mnc007``)."""

    AXIS = QualifierAxis.NETWORK_CODE
    NAME = 'Mobile Network Code'
    SHORT_NAME = 'Network Code'

    _PATTERN = re.compile(r'^mnc([0-9]{1,3})$')

    def __init__(self, code: int = DEFAULT_CODE):
        self._code = code

    @classmethod
    def get_qualifier(cls, segment: str) -> Optional['NetworkCodeQualifier']:
        """
        Build a qualifier from a folder segment.

        Returns:
            NetworkCodeQualifier, or None if the segment is not an mnc code
        """
        match = cls._PATTERN.fullmatch(segment)
        if not match:
            return None
        try:
            code = int(match.group(1))
        except ValueError:
            return None
        return cls(code)

    @staticmethod
    def folder_segment_for(code: int) -> str:
        """Return the zero-padded folder segment for ``code``, or '' outside 1-999."""
        if 1 <= code <= 999:
            return f'mnc{code:03d}'
        return ''

    @property
    def code(self) -> int:
        return self._code

    def since(self) -> int:
        return 1

    def is_valid(self) -> bool:
        return self._code != DEFAULT_CODE

    def has_fake_value(self) -> bool:
        return False

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        qualifier = self.get_qualifier(self._require_segment(value))
        if qualifier is None:
            return False
        config.add_qualifier(qualifier)
        return True

    def get_folder_segment(self) -> str:
        return self.folder_segment_for(self._code)

    def get_short_display_value(self) -> str:
        if self._code != DEFAULT_CODE:
            return f'MNC {self._code}'
        return ''

    def get_long_display_value(self) -> str:
        return self.get_short_display_value()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NetworkCodeQualifier) and other._code == self._code

    def __hash__(self) -> int:
        return hash((self.AXIS, self._code))


__all__ = ['CountryCodeQualifier', 'NetworkCodeQualifier']
