# Path: resconfig/matcher/models/__init__.py
"""
Matcher Models

Data models for the resolver:
- Configurable: interface of matchable items
- ResourceFolder: folder name + parsed configuration
- MatchResult / AxisDecision: resolution report
"""

from .configurable import Configurable
from .resource_folder import ResourceFolder
from .match_result import AxisDecision, MatchResult, describe_configurable

__all__ = [
    'Configurable',
    'ResourceFolder',
    'AxisDecision',
    'MatchResult',
    'describe_configurable',
]
