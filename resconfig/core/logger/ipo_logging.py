# Path: resconfig/core/logger/ipo_logging.py
"""
IPO-Aware Logging for resconfig

Log records are routed by the first component of the logger name:

- input.*    folder-name parsing, device profile loading
- process.*  best-match resolution
- output.*   CLI reporting

With a log directory, each layer gets its own file next to a combined
full_activity.log. Console output goes to stderr so that stdout only
carries CLI results.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

FULL_LOG_FILE = 'full_activity.log'
LAYER_LOG_FILES = {
    'input': 'input_activity.log',
    'process': 'process_activity.log',
    'output': 'output_activity.log',
}


class IPOFilter(logging.Filter):
    """Pass only the records of one layer."""

    def __init__(self, layer: str):
        """
        Args:
            layer: 'input', 'process' or 'output'
        """
        super().__init__()
        self.layer = layer
        self._prefix = f'{layer}.'

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name == self.layer or record.name.startswith(self._prefix)


def _file_handler(path: Path, formatter: logging.Formatter,
                  layer: Optional[str] = None) -> logging.Handler:
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    if layer is not None:
        handler.addFilter(IPOFilter(layer))
    return handler


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Configure the root logger for resconfig.

    Replaces any handlers already on the root logger.

    Args:
        log_dir: Directory for the log files; None disables file logging
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Also log to stderr

    Raises:
        ValueError: If log_level is not a logging level name

    Example:
        setup_ipo_logging(Path('/tmp/resconfig-logs'), 'DEBUG', console_output=False)
        get_process_logger('resolver').debug('...')  # -> process_activity.log
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        root.addHandler(_file_handler(log_dir / FULL_LOG_FILE, formatter))
        for layer, file_name in LAYER_LOG_FILES.items():
            root.addHandler(_file_handler(log_dir / file_name, formatter, layer))

    if console_output:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(console)


def get_input_logger(name: str) -> logging.Logger:
    """Logger for the INPUT layer, e.g. get_input_logger('device_loader')."""
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """Logger for the PROCESS layer, e.g. get_process_logger('resolver')."""
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Logger for the OUTPUT layer, e.g. get_output_logger('match')."""
    return logging.getLogger(f'output.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
