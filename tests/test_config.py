"""Tests for configuration functions in core/config.py

The user config file is redirected to a temp directory by the autouse
isolated_config fixture, so nothing outside tmp_path is touched.
"""

import json

import pytest
from unittest.mock import patch

from core import config
from core.config import DEFAULT_TIMEOUT, HubSettings, load_config, parse_timeout, resolve_settings, save_config
from core.errors import ConfigError


class TestConstants:
    """Test that constants are properly defined."""

    def test_user_config_file_is_redirected(self, isolated_config):
        """Tests must never read the real ~/.powerview/config.json."""
        assert config.USER_CONFIG_FILE == isolated_config
        assert isolated_config.name == 'config.json'
        assert isolated_config.parent.name == '.powerview'

    def test_environment_variable_names(self):
        assert config.HUB_IP_ENV == 'POWERVIEW_HUB_IP'
        assert config.TIMEOUT_ENV == 'POWERVIEW_TIMEOUT'

    def test_default_timeout(self):
        assert DEFAULT_TIMEOUT == 1.0


class TestLoadConfig:
    """Test configuration file loading."""

    def test_config_file_not_exists(self):
        assert load_config() == {}

    def test_config_file_valid_json(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('{"hub_ip": "10.0.0.31", "timeout": 0.5}')

        assert load_config() == {'hub_ip': '10.0.0.31', 'timeout': 0.5}

    def test_config_file_corrupt(self, isolated_config, capsys):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('{not json')

        assert load_config() == {}
        assert 'Warning' in capsys.readouterr().err

    def test_config_file_not_an_object(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('["10.0.0.31"]')

        assert load_config() == {}


class TestSaveConfig:
    """Test configuration file saving."""

    def test_save_creates_directory(self, isolated_config):
        save_config({'hub_ip': '10.0.0.31'})

        assert isolated_config.exists()
        assert json.loads(isolated_config.read_text()) == {'hub_ip': '10.0.0.31'}

    @patch('json.dump')
    def test_save_writes_indented_json(self, mock_json_dump):
        test_config = {'hub_ip': '10.0.0.31'}

        save_config(test_config)

        call_args = mock_json_dump.call_args
        assert call_args[1]['indent'] == 2
        assert call_args[0][0] == test_config


class TestParseTimeout:
    """Test timeout validation."""

    @pytest.mark.parametrize('value, expected', [(0.5, 0.5), ('0.75', 0.75), (1, 1.0)])
    def test_valid(self, value, expected):
        assert parse_timeout(value) == expected

    @pytest.mark.parametrize('value', [0, -1, 'soon', None])
    def test_invalid(self, value):
        with pytest.raises(ConfigError):
            parse_timeout(value)


class TestResolveSettings:
    """Test precedence: explicit value > environment > config file."""

    def test_nothing_configured(self):
        with pytest.raises(ConfigError) as exc_info:
            resolve_settings()
        assert 'POWERVIEW_HUB_IP' in str(exc_info.value)

    def test_config_file(self):
        save_config({'hub_ip': '10.0.0.31', 'timeout': 0.5})
        assert resolve_settings() == HubSettings(ip='10.0.0.31', timeout=0.5)

    def test_environment_beats_config_file(self, monkeypatch):
        save_config({'hub_ip': '10.0.0.31', 'timeout': 0.5})
        monkeypatch.setenv('POWERVIEW_HUB_IP', '10.0.0.40')
        monkeypatch.setenv('POWERVIEW_TIMEOUT', '0.8')

        assert resolve_settings() == HubSettings(ip='10.0.0.40', timeout=0.8)

    def test_explicit_beats_environment(self, monkeypatch):
        monkeypatch.setenv('POWERVIEW_HUB_IP', '10.0.0.40')
        monkeypatch.setenv('POWERVIEW_TIMEOUT', '0.8')

        assert resolve_settings('10.0.0.50', 0.6) == HubSettings(ip='10.0.0.50', timeout=0.6)

    def test_default_timeout(self):
        assert resolve_settings('10.0.0.31').timeout == DEFAULT_TIMEOUT

    def test_invalid_environment_timeout(self, monkeypatch):
        monkeypatch.setenv('POWERVIEW_TIMEOUT', 'fast')
        with pytest.raises(ConfigError):
            resolve_settings('10.0.0.31')

    @pytest.mark.parametrize('stored', [0, -0.5, ''])
    def test_falsy_config_file_timeout_is_rejected(self, stored):
        save_config({'hub_ip': '10.0.0.31', 'timeout': stored})
        with pytest.raises(ConfigError):
            resolve_settings()

    def test_empty_environment_timeout_is_unset(self, monkeypatch):
        save_config({'hub_ip': '10.0.0.31', 'timeout': 0.5})
        monkeypatch.setenv('POWERVIEW_TIMEOUT', '')

        assert resolve_settings().timeout == 0.5
