# Path: resconfig/devices/loader.py
"""
Device Loader

Loads device profiles from YAML files in the devices directory and
validates them into DeviceProfile models.
"""

from pathlib import Path
from typing import Optional

import yaml

from ..core.logger import get_input_logger
from .models import DeviceProfile


class DeviceLoader:
    """
    Loads device profiles from YAML files.

    Scans the devices directory (recursively) for YAML files. Each file
    holds one profile.

    Example:
        loader = DeviceLoader()
        devices = loader.load_all()

        nexus = devices.get('nexus_5')
        reference = nexus.to_configuration()
    """

    def __init__(self, devices_path: Optional[Path] = None):
        """
        Initialize device loader.

        Args:
            devices_path: Path to devices directory.
                          Defaults to the packaged dictionary/devices/
        """
        self.logger = get_input_logger('device_loader')

        if devices_path is None:
            self.devices_path = Path(__file__).parent.parent / 'dictionary' / 'devices'
        else:
            self.devices_path = Path(devices_path)

        self._devices_cache: Optional[dict[str, DeviceProfile]] = None

    def load_all(self, use_cache: bool = True) -> dict[str, DeviceProfile]:
        """
        Load all device profiles.

        Files that fail to load are logged and skipped.

        Args:
            use_cache: Whether to use cached results

        Returns:
            Dictionary mapping device_id to DeviceProfile
        """
        if use_cache and self._devices_cache is not None:
            return self._devices_cache

        devices = {}

        if not self.devices_path.exists():
            self.logger.warning(f"Devices directory not found: {self.devices_path}")
            return devices

        yaml_files = sorted(self.devices_path.rglob('*.yaml'))
        yaml_files.extend(sorted(self.devices_path.rglob('*.yml')))

        self.logger.info(f"Found {len(yaml_files)} device profile files")

        for yaml_file in yaml_files:
            try:
                device = self.load_file(yaml_file)
                if device:
                    if device.device_id in devices:
                        self.logger.warning(
                            f"Duplicate device_id: {device.device_id} in {yaml_file}"
                        )
                    devices[device.device_id] = device
            except Exception as e:
                self.logger.error(f"Failed to load device from {yaml_file}: {e}")

        self.logger.info(f"Loaded {len(devices)} device profiles")
        self._devices_cache = devices
        return devices

    def load_file(self, file_path: Path) -> Optional[DeviceProfile]:
        """
        Load a single device profile from a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            DeviceProfile or None if the file is empty or not valid YAML

        Raises:
            pydantic.ValidationError: If the profile fields are invalid
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                self.logger.warning(f"Empty file: {file_path}")
                return None

            return DeviceProfile.model_validate(data)

        except yaml.YAMLError as e:
            self.logger.error(f"YAML parse error in {file_path}: {e}")
            return None
        except Exception as e:
            self.logger.error(f"Error loading {file_path}: {e}")
            raise

    def get_device(self, device_id: str) -> Optional[DeviceProfile]:
        """Get a device profile by ID."""
        return self.load_all().get(device_id)

    def clear_cache(self) -> None:
        """Clear the device cache."""
        self._devices_cache = None


__all__ = ['DeviceLoader']
