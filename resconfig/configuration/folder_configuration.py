# Path: resconfig/configuration/folder_configuration.py
"""
Folder Configuration

Represents the configuration of a resource folder: one optional qualifier
per axis, in the fixed axis order. A slot set to None means "not
specified" and acts as a wildcard during matching.

Example:
    config = FolderConfiguration.get_config_for_folder('values-en-rUS-hdpi')
    config.language.value              # 'en'
    config.get_folder_name('values')   # 'values-en-rUS-hdpi'
"""

import math
from functools import total_ordering
from typing import TYPE_CHECKING, Iterable, Optional, Union

from ..constants import (
    DEFAULT_DENSITY,
    QUALIFIER_COUNT,
    RES_QUALIFIER_SEP,
    Density,
    QualifierAxis,
    ResourceFolderType,
    ScreenOrientation,
)
from ..core.logger import get_input_logger
from ..qualifiers import (
    ResourceQualifier,
    ScreenHeightQualifier,
    ScreenWidthQualifier,
    SmallestScreenWidthQualifier,
    VersionQualifier,
)
from .registry import QUALIFIER_TYPES, axis_of, default_qualifiers

if TYPE_CHECKING:
    from ..matcher.models.configurable import Configurable


logger = get_input_logger('folder_parser')


class _QualifierSlot:
    """Attribute access to one axis of a FolderConfiguration."""

    def __init__(self, axis: QualifierAxis):
        self.axis = axis

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance._qualifiers[self.axis]

    def __set__(self, instance, qualifier: Optional[ResourceQualifier]) -> None:
        expected = QUALIFIER_TYPES[self.axis]
        if qualifier is not None and not isinstance(qualifier, expected):
            raise TypeError(
                f"{self.name} expects {expected.__name__}, got {type(qualifier).__name__}"
            )
        instance._qualifiers[self.axis] = qualifier


@total_ordering
class FolderConfiguration:
    """
    Configuration of a resource folder.

    Holds QUALIFIER_COUNT nullable slots indexed by QualifierAxis. Slots can
    be read and written through named attributes (``config.density``) or by
    index (``get_qualifier``).

    Instances are mutable, single-threaded value objects: do not mutate a
    configuration while a resolver is reading it.
    """

    country_code = _QualifierSlot(QualifierAxis.COUNTRY_CODE)
    network_code = _QualifierSlot(QualifierAxis.NETWORK_CODE)
    language = _QualifierSlot(QualifierAxis.LANGUAGE)
    region = _QualifierSlot(QualifierAxis.REGION)
    layout_direction = _QualifierSlot(QualifierAxis.LAYOUT_DIRECTION)
    smallest_screen_width = _QualifierSlot(QualifierAxis.SMALLEST_SCREEN_WIDTH)
    screen_width = _QualifierSlot(QualifierAxis.SCREEN_WIDTH)
    screen_height = _QualifierSlot(QualifierAxis.SCREEN_HEIGHT)
    screen_size = _QualifierSlot(QualifierAxis.SCREEN_SIZE)
    screen_ratio = _QualifierSlot(QualifierAxis.SCREEN_RATIO)
    screen_orientation = _QualifierSlot(QualifierAxis.SCREEN_ORIENTATION)
    ui_mode = _QualifierSlot(QualifierAxis.UI_MODE)
    night_mode = _QualifierSlot(QualifierAxis.NIGHT_MODE)
    density = _QualifierSlot(QualifierAxis.DENSITY)
    touch_type = _QualifierSlot(QualifierAxis.TOUCH_SCREEN)
    keyboard_state = _QualifierSlot(QualifierAxis.KEYBOARD_STATE)
    text_input_method = _QualifierSlot(QualifierAxis.TEXT_INPUT_METHOD)
    navigation_state = _QualifierSlot(QualifierAxis.NAVIGATION_STATE)
    navigation_method = _QualifierSlot(QualifierAxis.NAVIGATION_METHOD)
    screen_dimension = _QualifierSlot(QualifierAxis.SCREEN_DIMENSION)
    version = _QualifierSlot(QualifierAxis.VERSION)

    def __init__(self):
        self._qualifiers: list[Optional[ResourceQualifier]] = [None] * QUALIFIER_COUNT

    # ==========================================================================
    # PARSING
    # ==========================================================================

    @classmethod
    def get_config(cls, folder_segments: Iterable[str]) -> Optional['FolderConfiguration']:
        """
        Build a configuration from the segments of a folder name.

        The first segment is the base folder name ("values", "layout") and
        is skipped.

        Args:
            folder_segments: Folder name split on '-'

        Returns:
            FolderConfiguration, or None if any qualifier segment is invalid
        """
        iterator = iter(folder_segments)
        next(iterator, None)
        return cls.get_config_from_qualifiers(iterator)

    @classmethod
    def get_config_from_qualifiers(
        cls,
        qualifiers: Iterable[str]
    ) -> Optional['FolderConfiguration']:
        """
        Build a configuration from qualifier segments only.

        Segments must appear in axis order. Each segment is matched
        against the qualifier types starting after the last matched axis;
        a segment that matches none of them, or an empty segment, fails
        the whole parse.

        Args:
            qualifiers: Qualifier segments, without the base folder name

        Returns:
            FolderConfiguration, or None if parsing fails
        """
        config = cls()
        probes = default_qualifiers()
        qualifier_index = 0

        for segment in qualifiers:
            if not segment:
                logger.debug("Empty qualifier segment")
                return None

            segment = segment.lower()
            while (qualifier_index < QUALIFIER_COUNT
                   and not probes[qualifier_index].check_and_set(segment, config)):
                qualifier_index += 1

            if qualifier_index == QUALIFIER_COUNT:
                logger.debug(f"No qualifier accepts segment '{segment}' at this position")
                return None

            qualifier_index += 1

        return config

    @classmethod
    def get_config_for_folder(cls, folder_name: str) -> Optional['FolderConfiguration']:
        """
        Build a configuration from a full folder name.

        Args:
            folder_name: Folder name such as 'values-en-rUS-hdpi'

        Returns:
            FolderConfiguration, or None if the name is not a valid folder name
        """
        if folder_name is None:
            raise ValueError("Folder name must not be None")
        return cls.get_config(folder_name.split(RES_QUALIFIER_SEP))

    @staticmethod
    def get_qualifier_count() -> int:
        """Return the number of qualifier axes."""
        return QUALIFIER_COUNT

    # ==========================================================================
    # SET / MERGE
    # ==========================================================================

    def set(
        self,
        config: Optional['FolderConfiguration'],
        non_fake_values_only: bool = False
    ) -> None:
        """
        Copy every slot from another configuration.

        Args:
            config: Source configuration; None is a no-op
            non_fake_values_only: Keep the current value of any slot whose
                source qualifier holds a fake value
        """
        if config is None:
            return
        for i in range(QUALIFIER_COUNT):
            qualifier = config._qualifiers[i]
            if not non_fake_values_only or qualifier is None or not qualifier.has_fake_value():
                self._qualifiers[i] = qualifier

    def reset(self) -> None:
        """Clear every slot."""
        self._qualifiers = [None] * QUALIFIER_COUNT

    def subtract(self, config: 'FolderConfiguration') -> None:
        """Clear every slot for which ``config`` holds a valid qualifier."""
        for i in range(QUALIFIER_COUNT):
            qualifier = config._qualifiers[i]
            if qualifier is not None and qualifier.is_valid():
                self._qualifiers[i] = None

    def add(self, config: 'FolderConfiguration') -> None:
        """Overwrite every slot for which ``config`` holds a qualifier, valid or not."""
        for i in range(QUALIFIER_COUNT):
            if config._qualifiers[i] is not None:
                self._qualifiers[i] = config._qualifiers[i]

    def get_invalid_qualifier(self) -> Optional[ResourceQualifier]:
        """Return the first qualifier that is set but not valid, or None."""
        for qualifier in self._qualifiers:
            if qualifier is not None and not qualifier.is_valid():
                return qualifier
        return None

    def check_region(self) -> bool:
        """Return False if a region is set without a language."""
        return (self._qualifiers[QualifierAxis.LANGUAGE] is not None
                or self._qualifiers[QualifierAxis.REGION] is None)

    def add_qualifier(self, qualifier: Optional[ResourceQualifier]) -> None:
        """Install a qualifier into the axis owned by its type. None is ignored."""
        if qualifier is None:
            return
        self._qualifiers[axis_of(qualifier)] = qualifier

    def remove_qualifier(self, qualifier: ResourceQualifier) -> None:
        """Clear the slot holding this exact qualifier instance."""
        for i in range(QUALIFIER_COUNT):
            if self._qualifiers[i] is qualifier:
                self._qualifiers[i] = None
                return

    def get_qualifier(self, index: int) -> Optional[ResourceQualifier]:
        """Return the qualifier at an axis index, or None."""
        return self._qualifiers[index]

    def get_qualifiers(self) -> list[ResourceQualifier]:
        """Return the qualifiers that are set, in axis order."""
        return [q for q in self._qualifiers if q is not None]

    def create_default(self) -> None:
        """Fill every slot with an unset qualifier."""
        self._qualifiers = list(default_qualifiers())

    # ==========================================================================
    # DERIVED VALUES
    # ==========================================================================

    def normalize(self) -> None:
        """
        Make the version qualifier reflect the qualifiers in use.

        Sets the version to the highest since() of the present qualifiers
        when it is missing or lower. Configurations that only use API 1
        qualifiers are left unchanged.
        """
        min_sdk = 1
        for qualifier in self._qualifiers:
            if qualifier is not None:
                min_sdk = max(min_sdk, qualifier.since())

        if min_sdk == 1:
            return

        version = self._qualifiers[QualifierAxis.VERSION]
        if version is None or version.version < min_sdk:
            self._qualifiers[QualifierAxis.VERSION] = VersionQualifier(min_sdk)

    def update_screen_width_and_height(self) -> None:
        """
        Derive smallest-width, width and height (dp) from the pixel dimension.

        Requires screen dimension, density and orientation to be set.
        No-op for NODPI. Sizes are rounded up so that ``w480dp`` matches a
        480.5dp screen.
        """
        size_q = self._qualifiers[QualifierAxis.SCREEN_DIMENSION]
        density_q = self._qualifiers[QualifierAxis.DENSITY]
        orientation_q = self._qualifiers[QualifierAxis.SCREEN_ORIENTATION]

        if size_q is None or density_q is None or orientation_q is None:
            return
        if not (size_q.is_valid() and density_q.is_valid() and orientation_q.is_valid()):
            return

        density = density_q.value
        if density is Density.NODPI:
            return

        size1 = max(size_q.value1, size_q.value2)
        size2 = min(size_q.value1, size_q.value2)

        dp1 = math.ceil(size1 * DEFAULT_DENSITY / density.dpi_value)
        dp2 = math.ceil(size2 * DEFAULT_DENSITY / density.dpi_value)

        self.smallest_screen_width = SmallestScreenWidthQualifier(dp2)

        orientation = orientation_q.value
        if orientation is ScreenOrientation.PORTRAIT:
            self.screen_width = ScreenWidthQualifier(dp2)
            self.screen_height = ScreenHeightQualifier(dp1)
        elif orientation is ScreenOrientation.LANDSCAPE:
            self.screen_width = ScreenWidthQualifier(dp1)
            self.screen_height = ScreenHeightQualifier(dp2)
        elif orientation is ScreenOrientation.SQUARE:
            self.screen_width = ScreenWidthQualifier(dp2)
            self.screen_height = ScreenHeightQualifier(dp2)

    # ==========================================================================
    # COMPARISON
    # ==========================================================================

    def is_default(self) -> bool:
        """Return True if no slot is set."""
        return all(q is None for q in self._qualifiers)

    def compare_to(self, other: 'FolderConfiguration') -> int:
        """
        Order configurations: default first, then slot by slot.

        A missing qualifier sorts before a present one; two present
        qualifiers compare by folder segment.

        Returns:
            Negative, zero or positive integer
        """
        if self.is_default():
            return 0 if other.is_default() else -1

        for mine, theirs in zip(self._qualifiers, other._qualifiers):
            if mine is None:
                if theirs is not None:
                    return -1
            elif theirs is None:
                return 1
            else:
                result = mine.compare_to(theirs)
                if result != 0:
                    return result

        return 0

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, FolderConfiguration):
            return NotImplemented
        return self._qualifiers == other._qualifiers

    def __lt__(self, other: 'FolderConfiguration') -> bool:
        if not isinstance(other, FolderConfiguration):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(tuple(self._qualifiers))

    # ==========================================================================
    # MATCHING
    # ==========================================================================

    def is_match_for(self, reference_config: Optional['FolderConfiguration']) -> bool:
        """
        Return whether this configuration can be used for the reference.

        Only axes set on both sides are compared; an axis missing on
        either side never disqualifies.
        """
        if reference_config is None:
            return False

        for test_q, reference_q in zip(self._qualifiers, reference_config._qualifiers):
            if test_q is not None and reference_q is not None and not test_q.is_match_for(reference_q):
                return False

        return True

    def find_matching_configurables(
        self,
        configurables: Optional[Iterable['Configurable']]
    ) -> list['Configurable']:
        """Return the configurables that best match this configuration."""
        from ..matcher.engine.resolver import find_matching_configurables
        return find_matching_configurables(self, configurables)

    def find_matching_configurable(
        self,
        configurables: Optional[Iterable['Configurable']]
    ) -> Optional['Configurable']:
        """
        Return the first best match, or None.

        Several configurables can be indistinguishable for this reference;
        the first one in input order is returned.
        """
        from ..matcher.engine.resolver import find_matching_configurable
        return find_matching_configurable(self, configurables)

    def get_highest_priority_qualifier(self, start_index: int) -> int:
        """Return the first set axis at or after ``start_index``, or -1."""
        for i in range(start_index, QUALIFIER_COUNT):
            if self._qualifiers[i] is not None:
                return i
        return -1

    # ==========================================================================
    # NAMES AND DISPLAY
    # ==========================================================================

    def _segments(self) -> list[str]:
        segments = []
        for qualifier in self._qualifiers:
            if qualifier is not None:
                segment = qualifier.get_folder_segment()
                if segment:
                    segments.append(segment)
        return segments

    def get_folder_name(self, folder_type: Union[ResourceFolderType, str]) -> str:
        """
        Return the folder name for a resource type.

        Args:
            folder_type: Base folder name, e.g. ResourceFolderType.VALUES

        Returns:
            Folder name such as 'values-en-rUS-hdpi'
        """
        base = folder_type.value if isinstance(folder_type, ResourceFolderType) else folder_type
        return RES_QUALIFIER_SEP.join([base] + self._segments())

    def get_unique_key(self) -> str:
        """Return a key identifying this configuration ('-en-rUS-hdpi')."""
        return ''.join(RES_QUALIFIER_SEP + segment for segment in self._segments())

    def to_display_string(self) -> str:
        """
        Return a readable description of the configuration.

        Language and region, when both set, are combined into a single
        'Locale en_US' entry.
        """
        if self.is_default():
            return 'default'

        parts = []
        index = 0

        while index < QualifierAxis.LANGUAGE:
            qualifier = self._qualifiers[index]
            if qualifier is not None:
                parts.append(qualifier.get_long_display_value())
            index += 1

        language = self._qualifiers[QualifierAxis.LANGUAGE]
        region = self._qualifiers[QualifierAxis.REGION]
        if language is not None and region is not None:
            language_code = language.get_short_display_value()
            region_code = region.get_short_display_value()
            if language_code and region_code:
                parts.append(f"Locale {language_code}_{region_code}")
                index += 2

        while index < QUALIFIER_COUNT:
            qualifier = self._qualifiers[index]
            if qualifier is not None:
                parts.append(qualifier.get_long_display_value())
            index += 1

        return ', '.join(part for part in parts if part)

    def to_short_display_string(self) -> str:
        """Return a compact, comma-separated description."""
        if self.is_default():
            return 'default'
        return ','.join(q.get_short_display_value() for q in self.get_qualifiers())

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"FolderConfiguration({self.get_unique_key()!r})"


__all__ = ['FolderConfiguration']
