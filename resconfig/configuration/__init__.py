# Path: resconfig/configuration/__init__.py
"""
Folder Configuration Package

- registry: ordered qualifier types (axis table)
- folder_configuration: FolderConfiguration, parsing, merging, display
"""

from .registry import QUALIFIER_TYPES, default_qualifiers, axis_of
from .folder_configuration import FolderConfiguration

__all__ = [
    'QUALIFIER_TYPES',
    'default_qualifiers',
    'axis_of',
    'FolderConfiguration',
]
