# Path: resconfig/qualifiers/base.py
"""
Base Qualifiers

Abstract base classes for all resource qualifiers.
Defines the interface every qualifier variant must implement.

Qualifiers are immutable value objects: one instance describes one value
on one axis of a folder configuration (a language, a density, ...).
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ..constants import QualifierAxis, ResourceEnum

if TYPE_CHECKING:
    from ..configuration.folder_configuration import FolderConfiguration


class ResourceQualifier(ABC):
    """
    Abstract base class for resource qualifiers.

    Each subclass handles one axis of the resource configuration:
    - CountryCodeQualifier / NetworkCodeQualifier: mcc / mnc codes
    - LanguageQualifier / RegionQualifier: locale
    - Screen*Qualifier: screen geometry
    - DensityQualifier, UiModeQualifier, ...: device characteristics
    - VersionQualifier: platform API level

    Subclasses set AXIS and NAME, and implement parsing, serialization,
    display and equality.

    Example:
        config = FolderConfiguration()
        if DensityQualifier().check_and_set('hdpi', config):
            print(config.density.get_folder_segment())  # 'hdpi'
    """

    AXIS: QualifierAxis
    NAME: str = ''
    SHORT_NAME: Optional[str] = None

    @property
    def name(self) -> str:
        """Human-readable name of the qualifier."""
        return self.NAME

    @property
    def short_name(self) -> str:
        """Shorter human-readable name of the qualifier."""
        return self.SHORT_NAME or self.NAME

    @abstractmethod
    def since(self) -> int:
        """Return the API level in which this qualifier was added."""
        pass

    def deprecated(self) -> bool:
        """Whether this qualifier is deprecated."""
        return False

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True if the qualifier holds a real value."""
        pass

    @abstractmethod
    def has_fake_value(self) -> bool:
        """
        Return True if the qualifier holds the internal 'any' sentinel.

        Fake values are never produced by parsing and must not be used
        as real qualifier values.
        """
        pass

    @abstractmethod
    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        """
        Parse a folder segment and, if valid, install it into a configuration.

        Args:
            value: Folder segment to check, already lower-cased
            config: Folder configuration that receives the new qualifier

        Returns:
            True if the segment was valid and was set

        Raises:
            ValueError: If value is None
        """
        pass

    @abstractmethod
    def get_folder_segment(self) -> str:
        """Return the folder-name segment, or '' if the qualifier is unset."""
        pass

    def is_match_for(self, qualifier: 'ResourceQualifier') -> bool:
        """
        Return whether this qualifier can be used for the reference qualifier.

        The default is plain equality. Subclasses relax this where a
        resource value may serve other device values.

        Args:
            qualifier: Reference qualifier (typically from a device)

        Returns:
            True if this qualifier matches the reference
        """
        return self == qualifier

    def is_better_match_than(
        self,
        compare_to: Optional['ResourceQualifier'],
        reference: 'ResourceQualifier'
    ) -> bool:
        """
        Return whether this qualifier is a better match than ``compare_to``.

        Only called when both qualifiers already passed is_match_for()
        against the same reference. The default never prefers one
        qualifier over another.

        Args:
            compare_to: Current best qualifier, may be None
            reference: Reference qualifier both are compared against

        Returns:
            True if this qualifier should replace ``compare_to``
        """
        return False

    @abstractmethod
    def get_short_display_value(self) -> str:
        """Return a short string for display."""
        pass

    @abstractmethod
    def get_long_display_value(self) -> str:
        """Return a long string for display."""
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass

    def compare_to(self, other: 'ResourceQualifier') -> int:
        """Natural ordering: compare the folder segments as strings."""
        mine = str(self)
        theirs = str(other)
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: 'ResourceQualifier') -> bool:
        if not isinstance(other, ResourceQualifier):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        return self.get_folder_segment()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_folder_segment()!r})"

    @staticmethod
    def _require_segment(value: Optional[str]) -> str:
        if value is None:
            raise ValueError("Folder segment must not be None")
        return value


class EnumBasedResourceQualifier(ResourceQualifier):
    """
    Base class for qualifiers whose value is a ResourceEnum member.

    Subclasses only declare AXIS, NAME, ENUM_TYPE and SINCE; parsing,
    serialization, display and equality are shared.
    """

    ENUM_TYPE: type[ResourceEnum]
    SINCE: int = 1

    def __init__(self, value: Optional[ResourceEnum] = None):
        if value is not None and not isinstance(value, self.ENUM_TYPE):
            raise ValueError(
                f"{type(self).__name__} expects {self.ENUM_TYPE.__name__}, got {value!r}"
            )
        self._value = value

    @property
    def value(self) -> Optional[ResourceEnum]:
        """The enum value, or None for an unset qualifier."""
        return self._value

    def since(self) -> int:
        return self.SINCE

    def is_valid(self) -> bool:
        return self._value is not None

    def has_fake_value(self) -> bool:
        return False

    def check_and_set(self, value: str, config: 'FolderConfiguration') -> bool:
        member = self.ENUM_TYPE.get_enum(self._require_segment(value))
        if member is None:
            return False
        config.add_qualifier(type(self)(member))
        return True

    def get_folder_segment(self) -> str:
        if self._value is not None:
            return self._value.resource_value
        return ''

    def get_short_display_value(self) -> str:
        if self._value is not None:
            return self._value.short_display_value
        return ''

    def get_long_display_value(self) -> str:
        if self._value is not None:
            return self._value.long_display_value
        return ''

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other._value is self._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


__all__ = ['ResourceQualifier', 'EnumBasedResourceQualifier']
