# Path: resconfig/matcher/engine/resolver.py
"""
Best-Match Resolver

Selects the candidates whose configuration best matches a reference
(device) configuration, the way Android picks a resource folder.

Algorithm:
    1. Eliminate candidates that contradict the reference.
    2. Walk the axes in precedence order. For each axis the reference
       sets, if any remaining candidate sets it too, drop the candidates
       that do not set it and those whose value is not the best one.
    3. Stop as soon as fewer than two candidates remain.

The precedence of an axis matters more than the number of qualifiers
that exactly match the device.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from ...constants import QUALIFIER_COUNT, QualifierAxis
from ...core.logger import get_process_logger
from ..models.configurable import Configurable
from ..models.match_result import AxisDecision, MatchResult, describe_configurable
from ..scoring.tiebreaker import QualifierTiebreaker

if TYPE_CHECKING:
    from ...configuration.folder_configuration import FolderConfiguration


class BestMatchResolver:
    """
    Resolves candidates against a reference configuration.

    The input list is never modified, and the same inputs always give the
    same result. When several candidates cannot be told apart on any axis
    the reference sets, all of them are returned in input order.

    Example:
        resolver = BestMatchResolver()
        device = FolderConfiguration.get_config_for_folder('values-en-rUS-xhdpi')
        result = resolver.resolve(device, [
            ResourceFolder.from_name('values-en'),
            ResourceFolder.from_name('values-en-rUS'),
        ])
        print(result.best_match)  # values-en-rUS
    """

    def __init__(self):
        """Initialize resolver."""
        self.logger = get_process_logger('resolver')
        self.tiebreaker = QualifierTiebreaker()

    def resolve(
        self,
        reference: 'FolderConfiguration',
        configurables: Optional[Iterable[Configurable]]
    ) -> MatchResult:
        """
        Resolve candidates against a reference configuration.

        Args:
            reference: Reference configuration (typically a device)
            configurables: Candidates; None is treated as empty

        Returns:
            MatchResult with the remaining matches and the decision trail

        Raises:
            ValueError: If reference is None
        """
        if reference is None:
            raise ValueError("Reference configuration must not be None")

        candidates = list(configurables) if configurables is not None else []
        result = MatchResult(reference=reference, candidate_count=len(candidates))

        # 1: eliminate candidates that contradict the reference
        matching = []
        for configurable in candidates:
            configuration = configurable.get_configuration()
            if configuration is not None and configuration.is_match_for(reference):
                matching.append(configurable)
            else:
                result.eliminated.append(describe_configurable(configurable))

        self.logger.debug(
            f"{len(matching)} of {len(candidates)} candidates match "
            f"'{reference.get_unique_key()}'"
        )

        if len(matching) < 2:
            result.matches = matching
            return result

        # 2: refine axis by axis
        for axis in range(QUALIFIER_COUNT):
            reference_qualifier = reference.get_qualifier(axis)
            if reference_qualifier is None:
                continue

            qualifiers = [c.get_configuration().get_qualifier(axis) for c in matching]
            found, best_match = self.tiebreaker.select(qualifiers, reference_qualifier)
            if not found:
                continue

            kept = []
            removed = []
            for configurable, qualifier in zip(matching, qualifiers):
                if qualifier is None or (best_match is not None and best_match != qualifier):
                    removed.append(configurable)
                else:
                    kept.append(configurable)

            if removed:
                result.axis_decisions.append(AxisDecision(
                    axis=QualifierAxis(axis),
                    best_match=str(best_match) if best_match is not None else None,
                    removed=[describe_configurable(c) for c in removed],
                ))
            matching = kept

            # 3: nothing left to discriminate
            if len(matching) < 2:
                break

        if len(matching) > 1:
            self.logger.debug(
                f"{len(matching)} candidates are indistinguishable, keeping input order"
            )

        result.matches = matching
        return result


def find_matching_configurables(
    reference: 'FolderConfiguration',
    configurables: Optional[Iterable[Configurable]]
) -> list[Configurable]:
    """
    Return the candidates that best match the reference.

    Args:
        reference: Reference configuration
        configurables: Candidates; None is treated as empty

    Returns:
        Best matches in input order (empty if none match)
    """
    return BestMatchResolver().resolve(reference, configurables).matches


def find_matching_configurable(
    reference: 'FolderConfiguration',
    configurables: Optional[Iterable[Configurable]]
) -> Optional[Configurable]:
    """
    Return the first best match, or None.

    Indistinguishable matches are broken by input order only.
    """
    matches = find_matching_configurables(reference, configurables)
    return matches[0] if matches else None


__all__ = [
    'BestMatchResolver',
    'find_matching_configurables',
    'find_matching_configurable',
]
