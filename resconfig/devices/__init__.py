# Path: resconfig/devices/__init__.py
"""
Device Profiles

Reference devices described in YAML, turned into the configuration the
resolver matches resource folders against.
"""

from .models import DeviceProfile
from .loader import DeviceLoader

__all__ = [
    'DeviceProfile',
    'DeviceLoader',
]
