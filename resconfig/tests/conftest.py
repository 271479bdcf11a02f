# Path: resconfig/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for resconfig

Provides common test fixtures used across all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'RESCONFIG_LOG_LEVEL': 'DEBUG',
        'RESCONFIG_LOG_CONSOLE': 'false',
        'RESCONFIG_DEFAULT_FOLDER_TYPE': 'values',
        'RESCONFIG_NORMALIZE_OUTPUT': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def clean_env():
    """Remove every RESCONFIG_* variable for the duration of a test."""
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith('RESCONFIG_')}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from resconfig.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# CONFIGURATION FIXTURES
# ==============================================================================

@pytest.fixture
def folder_config():
    """Factory parsing a folder name into a FolderConfiguration."""
    from resconfig.configuration import FolderConfiguration

    def _make(folder_name: str):
        config = FolderConfiguration.get_config_for_folder(folder_name)
        assert config is not None, f"Invalid folder name in test: {folder_name}"
        return config

    return _make


@pytest.fixture
def folders():
    """Factory building ResourceFolder candidates from folder names."""
    from resconfig.matcher import ResourceFolder

    def _make(*names: str):
        result = []
        for name in names:
            folder = ResourceFolder.from_name(name)
            assert folder is not None, f"Invalid folder name in test: {name}"
            result.append(folder)
        return result

    return _make


# ==============================================================================
# DEVICE FIXTURES
# ==============================================================================

@pytest.fixture
def sample_device_data():
    """Provide a sample device profile as loaded from YAML."""
    return {
        'device_id': 'test_phone',
        'name': 'Test Phone',
        'screen_width_px': 480,
        'screen_height_px': 800,
        'density': 'hdpi',
        'api_level': 21,
        'language': 'en',
        'region': 'US',
    }


@pytest.fixture
def devices_dir(temp_dir, sample_device_data):
    """Create a devices directory holding one valid profile."""
    import yaml

    path = temp_dir / 'devices'
    path.mkdir()
    with open(path / 'test_phone.yaml', 'w', encoding='utf-8') as f:
        yaml.safe_dump(sample_device_data, f)
    return path
