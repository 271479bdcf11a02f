# Path: resconfig/matcher/__init__.py
"""
Matching Engine - Best Resource Match

Given a reference configuration (a device) and candidate configurations
(resource folders), select the candidates Android would use.

Core Components:
    - BestMatchResolver: Main resolver
    - QualifierTiebreaker: Per-axis preference
    - Models: Configurable, ResourceFolder, MatchResult

Example:
    from resconfig.matcher import BestMatchResolver, ResourceFolder

    folders = [ResourceFolder.from_name(n) for n in ('values', 'values-fr')]
    result = BestMatchResolver().resolve(device_config, folders)
"""

from .engine import (
    BestMatchResolver,
    find_matching_configurables,
    find_matching_configurable,
)
from .models import (
    Configurable,
    ResourceFolder,
    AxisDecision,
    MatchResult,
)
from .scoring import QualifierTiebreaker

__all__ = [
    'BestMatchResolver',
    'find_matching_configurables',
    'find_matching_configurable',
    'Configurable',
    'ResourceFolder',
    'AxisDecision',
    'MatchResult',
    'QualifierTiebreaker',
]
