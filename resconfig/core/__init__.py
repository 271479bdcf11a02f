# Path: resconfig/core/__init__.py
"""
resconfig Core Package

Core utilities shared by the library and the CLI.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging

__all__ = [
    'setup_ipo_logging',
]
