# Path: resconfig/matcher/scoring/tiebreaker.py
"""
Tiebreaker

Picks the preferred qualifier value on one axis when several candidates
survived elimination.
"""

import logging
from typing import Optional, Sequence

from ...qualifiers import ResourceQualifier


class QualifierTiebreaker:
    """
    Selects the best qualifier value for one axis.

    Each qualifier type encodes its own preference in
    is_better_match_than():
    - Density: exact match, else the higher dpi
    - Width / height / smallest width / version: exact match, else the
      largest value that still fits
    - KeyboardState: SOFT over EXPOSED for a SOFT reference
    - Other types: no preference (the best match stays None)

    Example:
        tiebreaker = QualifierTiebreaker()
        found, best = tiebreaker.select(
            [DensityQualifier(Density.MEDIUM), DensityQualifier(Density.HIGH)],
            reference=DensityQualifier(Density.XHIGH)
        )
        # found is True, best is the HIGH qualifier
    """

    def __init__(self):
        """Initialize tiebreaker."""
        self.logger = logging.getLogger('process.scoring.tiebreaker')

    def select(
        self,
        qualifiers: Sequence[Optional[ResourceQualifier]],
        reference: ResourceQualifier
    ) -> tuple[bool, Optional[ResourceQualifier]]:
        """
        Find the preferred value among the candidates' qualifiers.

        Args:
            qualifiers: Qualifier of each candidate on this axis (None if unset)
            reference: Reference qualifier on this axis

        Returns:
            Tuple of (whether any candidate sets this axis, best qualifier).
            The best qualifier is None when no value is preferred.
        """
        found = False
        best_match: Optional[ResourceQualifier] = None

        for qualifier in qualifiers:
            if qualifier is None:
                continue
            found = True
            if qualifier.is_better_match_than(best_match, reference):
                best_match = qualifier

        if found:
            self.logger.debug(
                f"{reference.name}: best match for '{reference}' is "
                f"{repr(str(best_match)) if best_match is not None else 'any'}"
            )

        return found, best_match


__all__ = ['QualifierTiebreaker']
