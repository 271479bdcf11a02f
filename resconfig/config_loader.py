# Path: resconfig/config_loader.py
"""
Configuration Loader for resconfig

Reads settings from an optional .env file at the project root and from
RESCONFIG_* environment variables. One shared instance serves the
library and the CLI.

Every setting has a default, so an empty environment is valid.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .constants import ResourceFolderType


# ==============================================================================
# DEFAULTS
# ==============================================================================

ENV_PREFIX: str = 'RESCONFIG_'

DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_FOLDER_TYPE: ResourceFolderType = ResourceFolderType.VALUES

LOG_LEVELS: tuple[str, ...] = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
TRUE_VALUES: tuple[str, ...] = ('true', '1', 'yes', 'on')


class ConfigLoader:
    """
    Process-wide settings for resconfig.

    The first instantiation reads .env and the environment; later calls
    return the same object without reading again.

    Example:
        config = ConfigLoader()
        config.get('log_level')       # 'INFO'
        config.get('devices_dir')     # Path, or None for the packaged profiles
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Read settings once.

        Raises:
            ValueError: If a variable holds an unsupported value
        """
        if ConfigLoader._initialized:
            return

        # resconfig/config_loader.py -> <project root>/.env
        env_file = Path(__file__).resolve().parent.parent / '.env'
        if env_file.exists():
            load_dotenv(dotenv_path=env_file, interpolate=True)

        self._config = self._read_settings()
        ConfigLoader._initialized = True

    def _read_settings(self) -> dict[str, Any]:
        """
        Collect and validate every setting.

        Returns:
            Mapping of setting name to typed value

        Raises:
            ValueError: If a variable holds an unsupported value
        """
        return {
            # ================================================================
            # LOGGING
            # ================================================================
            'log_dir': self._path('LOG_DIR'),
            'log_level': self._log_level('LOG_LEVEL'),
            'log_console': self._flag('LOG_CONSOLE', False),

            # ================================================================
            # DEVICES
            # ================================================================
            'devices_dir': self._path('DEVICES_DIR'),

            # ================================================================
            # OUTPUT
            # ================================================================
            'default_folder_type': self._folder_type('DEFAULT_FOLDER_TYPE'),
            'normalize_output': self._flag('NORMALIZE_OUTPUT', False),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a setting.

        Args:
            key: Setting name (e.g. 'log_level')
            default: Returned when the setting does not exist

        Returns:
            Setting value or default
        """
        return self._config.get(key, default)

    # ==========================================================================
    # VARIABLE READERS
    # ==========================================================================

    @staticmethod
    def _raw(name: str) -> Optional[str]:
        return os.getenv(ENV_PREFIX + name)

    def _text(self, name: str, default: str) -> str:
        """String variable, or default when unset."""
        value = self._raw(name)
        return default if value is None else value

    def _flag(self, name: str, default: bool) -> bool:
        """Boolean variable: true/1/yes/on are True, anything else False."""
        value = self._raw(name)
        if value is None:
            return default
        return value.strip().lower() in TRUE_VALUES

    def _path(self, name: str) -> Optional[Path]:
        """Path variable with ${VAR} expansion; unset or empty gives None."""
        value = self._raw(name)
        if not value:
            return None
        return Path(os.path.expandvars(value))

    def _log_level(self, name: str) -> str:
        level = self._text(name, DEFAULT_LOG_LEVEL).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid {ENV_PREFIX}{name}: {level}. "
                f"Must be one of {', '.join(LOG_LEVELS)}"
            )
        return level

    def _folder_type(self, name: str) -> ResourceFolderType:
        value = self._text(name, DEFAULT_FOLDER_TYPE.value)
        try:
            return ResourceFolderType(value)
        except ValueError:
            raise ValueError(f"Invalid {ENV_PREFIX}{name}: {value}")

    def __repr__(self) -> str:
        return (
            f"ConfigLoader("
            f"log_level={self._config.get('log_level')}, "
            f"devices_dir={self._config.get('devices_dir')})"
        )


__all__ = ['ConfigLoader']
