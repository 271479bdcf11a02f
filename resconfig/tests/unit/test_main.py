# Path: resconfig/tests/unit/test_main.py
"""
Unit Tests for main.py

Tests the CLI entry point functionality including:
- Argument parsing
- parse / match / devices commands
- Exit codes
"""

import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from resconfig import main as cli


@pytest.fixture
def run_cli(clean_env, reset_singletons, capsys):
    """Run the CLI with logging setup disabled; return (exit code, stdout)."""
    def _run(*argv, env=None):
        with patch.dict(os.environ, env or {}):
            with patch('resconfig.main.setup_ipo_logging'):
                code = cli.main(list(argv))
        return code, capsys.readouterr().out
    return _run


class TestArgumentParsing:
    """Test command line argument parsing."""

    def test_command_required(self):
        """A command is required."""
        with pytest.raises(SystemExit) as exc:
            cli.build_parser().parse_args([])
        assert exc.value.code == 2

    def test_match_requires_reference_or_device(self):
        """match needs --reference or --device."""
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(['match', 'values'])

    def test_reference_and_device_exclusive(self):
        """--reference and --device cannot be combined."""
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(
                ['match', '--reference', 'values-en', '--device', 'nexus_5', 'values']
            )

    def test_match_flags(self):
        """--all and --json are recognized."""
        args = cli.build_parser().parse_args(
            ['match', '-r', 'values-en', '--all', '--json', 'values', 'values-en']
        )
        assert args.all and args.json
        assert args.candidates == ['values', 'values-en']


class TestParseCommand:
    """Test the parse command."""

    def test_parse_valid(self, run_cli):
        """Valid names print their description."""
        code, out = run_cli('parse', 'values-en-rUS-hdpi')
        assert code == 0
        assert '[OK] values-en-rUS-hdpi' in out
        assert 'Locale en_US, High Density' in out

    def test_parse_invalid(self, run_cli):
        """Invalid names print a failure and exit 1."""
        code, out = run_cli('parse', 'values', 'values-hdpi-en')
        assert code == 1
        assert '[FAIL] values-hdpi-en' in out
        assert '[OK] values' in out

    def test_parse_normalized(self, run_cli):
        """RESCONFIG_NORMALIZE_OUTPUT adds the implied version."""
        code, out = run_cli(
            'parse', 'layout-sw600dp', env={'RESCONFIG_NORMALIZE_OUTPUT': 'true'}
        )
        assert code == 0
        assert 'layout-sw600dp-v13' in out

    def test_unknown_base_uses_default_type(self, run_cli):
        """Unknown base names use the configured folder type."""
        code, out = run_cli('parse', 'custom-en', env={'RESCONFIG_DEFAULT_FOLDER_TYPE': 'raw'})
        assert code == 0
        assert 'raw-en' in out


class TestMatchCommand:
    """Test the match command."""

    def test_match_reference(self, run_cli):
        """The best folder is printed."""
        code, out = run_cli(
            'match', '--reference', 'values-en-rUS-xhdpi',
            'values', 'values-en', 'values-en-rUS', 'values-fr'
        )
        assert code == 0
        assert '[OK] values-en-rUS' in out

    def test_match_no_result(self, run_cli):
        """No match exits 1."""
        code, out = run_cli('match', '--reference', 'values-en', 'values-fr')
        assert code == 1
        assert '[FAIL]' in out

    def test_match_invalid_reference(self, run_cli):
        """An invalid reference exits 1."""
        code, out = run_cli('match', '--reference', 'values-hdpi-en', 'values')
        assert code == 1
        assert 'Invalid reference' in out

    def test_match_skips_invalid_candidates(self, run_cli):
        """Invalid candidate names are skipped."""
        code, out = run_cli('match', '--reference', 'values-en', 'values-bogus', 'values')
        assert code == 0
        assert 'Skipping invalid folder name: values-bogus' in out
        assert '[OK] values' in out

    def test_match_all(self, run_cli):
        """--all prints every equal match."""
        code, out = run_cli(
            'match', '--reference', 'values-en', '--all', 'values-en-land', 'values-en-port'
        )
        assert code == 0
        assert '[OK] values-en-land' in out
        assert '[OK] values-en-port' in out

    def test_match_json(self, run_cli):
        """--json prints the match report."""
        code, out = run_cli('match', '--reference', 'values-en', '--json', 'values', 'values-en')
        assert code == 0
        data = json.loads(out)
        assert data['matches'] == ['values-en']
        assert data['candidate_count'] == 2

    def test_match_device(self, run_cli):
        """A packaged device can be the reference."""
        code, out = run_cli(
            'match', '--device', 'nexus_5',
            'drawable', 'drawable-hdpi', 'drawable-xxhdpi', 'drawable-xxxhdpi'
        )
        assert code == 0
        assert '[OK] drawable-xxhdpi' in out

    def test_match_unknown_device(self, run_cli):
        """Unknown devices exit 1."""
        code, out = run_cli('match', '--device', 'no_such_device', 'values')
        assert code == 1
        assert 'Unknown device' in out


class TestDevicesCommand:
    """Test the devices command."""

    def test_lists_packaged_devices(self, run_cli):
        """Packaged devices are listed."""
        code, out = run_cli('devices')
        assert code == 0
        assert 'nexus_5' in out
        assert 'android_tv' in out

    def test_custom_devices_dir(self, run_cli, devices_dir):
        """RESCONFIG_DEVICES_DIR replaces the packaged profiles."""
        code, out = run_cli('devices', env={'RESCONFIG_DEVICES_DIR': str(devices_dir)})
        assert code == 0
        assert 'test_phone' in out
        assert 'nexus_5' not in out

    def test_empty_devices_dir(self, run_cli, temp_dir):
        """An empty directory is reported."""
        code, out = run_cli('devices', env={'RESCONFIG_DEVICES_DIR': str(temp_dir)})
        assert code == 0
        assert 'No device profiles found' in out


class TestConfigurationErrors:
    """Test configuration failures."""

    def test_invalid_configuration_exits_1(self, run_cli):
        """Invalid configuration is reported, not raised."""
        code, out = run_cli('parse', 'values', env={'RESCONFIG_LOG_LEVEL': 'LOUD'})
        assert code == 1
        assert '[FAIL] Error' in out
