# Path: resconfig/matcher/models/configurable.py
"""
Configurable

Interface for anything that can be matched against a reference
configuration: resource folders, resource items, device-specific files.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ...configuration.folder_configuration import FolderConfiguration


class Configurable(ABC):
    """
    An item exposing a FolderConfiguration.

    The resolver only calls get_configuration(); it never looks at the
    concrete type.
    """

    @abstractmethod
    def get_configuration(self) -> Optional['FolderConfiguration']:
        """Return the configuration of this item."""
        pass


__all__ = ['Configurable']
