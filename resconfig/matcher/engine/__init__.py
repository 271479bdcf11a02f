# Path: resconfig/matcher/engine/__init__.py
"""
Matcher Engine

- BestMatchResolver: elimination + axis-by-axis refinement
"""

from .resolver import (
    BestMatchResolver,
    find_matching_configurables,
    find_matching_configurable,
)

__all__ = [
    'BestMatchResolver',
    'find_matching_configurables',
    'find_matching_configurable',
]
