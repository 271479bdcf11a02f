# Path: resconfig/qualifiers/version.py
"""
Version Qualifier

Platform API level qualifier (``v21``). A resource targeting an API level
can be used on any device running that level or a newer one.
"""

import re
from typing import TYPE_CHECKING, Optional

from ..constants import DEFAULT_CODE, QualifierAxis
from .base import ResourceQualifier

if TYPE_CHECKING:
    from ..configuration.folder_configuration import FolderConfiguration


class VersionQualifier(ResourceQualifier):
    """Minimum platform API level (``v21``)."""

    AXIS = QualifierAxis.VERSION
    NAME = 'Platform Version'
    SHORT_NAME = 'Version'

    _PATTERN = re.compile(r'^v([0-9]+)$')

    def __init__(self, version: int = DEFAULT_CODE):
        self._version = version

    @classmethod
    def get_qualifier(cls, segment: str) -> Optional['VersionQualifier']:
        """Build a qualifier from a folder segment, or return None."""
        match = cls._PATTERN.fullmatch(segment)
        if not match:
            return None
        try:
            return cls(int(match.group(1)))
        except ValueError:
            return None

    @property
    def version(self) -> int:
        return self._version

    def since(self) -> int:
        return 1

    def is_valid(self) -> bool:
        return self._version != DEFAULT_CODE

    def has_fake_value(self) -> bool:
        return False

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        qualifier = self.get_qualifier(self._require_segment(value))
        if qualifier is None:
            return False
        config.add_qualifier(qualifier)
        return True

    def is_match_for(self, qualifier: ResourceQualifier) -> bool:
        if isinstance(qualifier, VersionQualifier):
            return self._version <= qualifier._version
        return False

    def is_better_match_than(
        self,
        compare_to: Optional[ResourceQualifier],
        reference: ResourceQualifier
    ) -> bool:
        if compare_to is None:
            return True

        if compare_to._version == reference._version:
            return False
        elif self._version == reference._version:
            return True
        else:
            # newest level that the device still supports
            return self._version > compare_to._version

    def get_folder_segment(self) -> str:
        if self.is_valid():
            return f'v{self._version}'
        return ''

    def get_short_display_value(self) -> str:
        if self.is_valid():
            return f'API {self._version}'
        return ''

    def get_long_display_value(self) -> str:
        if self.is_valid():
            return f'API Level {self._version}'
        return ''

    def __eq__(self, other: object) -> bool:
        return isinstance(other, VersionQualifier) and other._version == self._version

    def __hash__(self) -> int:
        return hash((self.AXIS, self._version))


__all__ = ['VersionQualifier']
