# Path: resconfig/__init__.py
"""
resconfig - Android Resource Configuration Matching

Parses resource folder names ("values-en-rUS-land-hdpi-v21") into
typed configurations and selects the folders that best match a device.

Packages:
    - qualifiers: one qualifier type per configuration axis
    - configuration: FolderConfiguration and the axis registry
    - matcher: best-match resolution
    - devices: reference device profiles
    - core: logging

Example:
    from resconfig import FolderConfiguration, ResourceFolder, find_matching_configurable

    device = FolderConfiguration.get_config_for_folder('values-en-rUS-xhdpi')
    folders = [ResourceFolder.from_name(n) for n in ('values', 'values-en', 'values-fr')]
    find_matching_configurable(device, folders)  # values-en
"""

from .configuration import FolderConfiguration
from .matcher import (
    BestMatchResolver,
    Configurable,
    MatchResult,
    ResourceFolder,
    find_matching_configurable,
    find_matching_configurables,
)
from .devices import DeviceLoader, DeviceProfile

__version__ = '1.0.0'

__all__ = [
    'FolderConfiguration',
    'BestMatchResolver',
    'Configurable',
    'MatchResult',
    'ResourceFolder',
    'find_matching_configurable',
    'find_matching_configurables',
    'DeviceLoader',
    'DeviceProfile',
]
