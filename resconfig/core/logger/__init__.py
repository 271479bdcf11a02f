# Path: resconfig/core/logger/__init__.py
"""
resconfig Logger Package

IPO-aware logging for resource configuration matching.

Provides separate log streams for:
- INPUT layer (folder names, device profiles)
- PROCESS layer (best-match resolution)
- OUTPUT layer (CLI reporting)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
