# Path: resconfig/matcher/models/match_result.py
"""
Match Result Models

Models describing how a set of candidates was resolved against a
reference configuration.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from ...constants import QualifierAxis
from .configurable import Configurable

if TYPE_CHECKING:
    from ...configuration.folder_configuration import FolderConfiguration


def describe_configurable(configurable: Any) -> str:
    """Return a readable label for a configurable (its name, or repr)."""
    name = getattr(configurable, 'name', None)
    if isinstance(name, str) and name:
        return name
    return repr(configurable)


@dataclass
class AxisDecision:
    """
    Outcome of the refinement step on one axis.

    Attributes:
        axis: Axis that discriminated between candidates
        best_match: Folder segment of the preferred qualifier, or None when
            every present value was equally good
        removed: Labels of the candidates removed on this axis
    """
    axis: QualifierAxis
    best_match: Optional[str] = None
    removed: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'axis': self.axis.name.lower(),
            'best_match': self.best_match,
            'removed': self.removed,
        }


@dataclass
class MatchResult:
    """
    Complete resolution of candidates against a reference configuration.

    Attributes:
        reference: Reference (device) configuration
        candidate_count: Number of candidates considered
        eliminated: Labels of candidates that contradict the reference
        axis_decisions: Refinement steps that removed candidates
        matches: Remaining candidates, in input order
    """
    reference: 'FolderConfiguration'
    candidate_count: int = 0
    eliminated: list[str] = field(default_factory=list)
    axis_decisions: list[AxisDecision] = field(default_factory=list)
    matches: list[Configurable] = field(default_factory=list)

    @property
    def best_match(self) -> Optional[Configurable]:
        """First remaining candidate, or None."""
        return self.matches[0] if self.matches else None

    @property
    def is_ambiguous(self) -> bool:
        """True when several candidates could not be told apart."""
        return len(self.matches) > 1

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'reference': self.reference.get_unique_key(),
            'reference_display': self.reference.to_display_string(),
            'candidate_count': self.candidate_count,
            'eliminated': self.eliminated,
            'axis_decisions': [d.to_dict() for d in self.axis_decisions],
            'matches': [describe_configurable(m) for m in self.matches],
            'ambiguous': self.is_ambiguous,
        }


__all__ = ['AxisDecision', 'MatchResult', 'describe_configurable']
