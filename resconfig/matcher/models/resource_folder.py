# Path: resconfig/matcher/models/resource_folder.py
"""
Resource Folder Model

A named resource folder ("drawable-hdpi") and its parsed configuration.
"""

from dataclasses import dataclass
from typing import Optional

from ...configuration.folder_configuration import FolderConfiguration
from .configurable import Configurable


@dataclass
class ResourceFolder(Configurable):
    """
    A resource folder candidate.

    Attributes:
        name: Folder name as written on disk (e.g., "values-en-rUS")
        configuration: Parsed configuration of the folder

    Example:
        folder = ResourceFolder.from_name('values-en-rUS')
        folder.configuration.region.value  # 'US'
    """
    name: str
    configuration: FolderConfiguration

    @classmethod
    def from_name(cls, name: str) -> Optional['ResourceFolder']:
        """
        Parse a folder name into a ResourceFolder.

        Args:
            name: Folder name

        Returns:
            ResourceFolder, or None if the name has an invalid qualifier
        """
        configuration = FolderConfiguration.get_config_for_folder(name)
        if configuration is None:
            return None
        return cls(name=name, configuration=configuration)

    @property
    def base_name(self) -> str:
        """The resource type part of the name ("values", "layout")."""
        return self.name.split('-', 1)[0]

    def get_configuration(self) -> FolderConfiguration:
        return self.configuration

    def __str__(self) -> str:
        return self.name


__all__ = ['ResourceFolder']
