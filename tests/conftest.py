"""Pytest configuration and fixtures for PowerView control tests."""

import base64
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.hub import Hub


def b64(text: str) -> str:
    """Encode a display name the way the hub does."""
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config file at a temp dir and clear environment overrides."""
    config_file = tmp_path / '.powerview' / 'config.json'
    monkeypatch.setattr('core.config.USER_CONFIG_FILE', config_file)
    monkeypatch.delenv('POWERVIEW_HUB_IP', raising=False)
    monkeypatch.delenv('POWERVIEW_TIMEOUT', raising=False)
    return config_file


@pytest.fixture
def hub():
    """A Hub on a fixed LAN address. Tests patch hub.session.send."""
    return Hub('10.0.0.31')


@pytest.fixture
def make_response():
    """Factory for fake requests responses."""
    def _make(status_code=200, content=b'', reason='OK'):
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        response.reason = reason
        return response
    return _make


@pytest.fixture
def scenes_body():
    return json.dumps({
        'sceneIds': [1, 2, 3],
        'sceneData': [
            {'id': 1, 'name': b64('Master'), 'roomId': 5, 'order': 0, 'colorId': 9, 'iconId': 0},
            {'id': 2, 'name': b64('Bedtime'), 'roomId': 6, 'order': 1, 'colorId': 3, 'iconId': 0},
            {'id': 3, 'name': b64('All Open'), 'roomId': 5, 'order': 2, 'colorId': 1, 'iconId': 0},
        ],
    }).encode()


@pytest.fixture
def rooms_body():
    return json.dumps({
        'roomIds': [5, 6],
        'roomData': [
            {'id': 5, 'name': b64('Living Room'), 'order': 0, 'colorId': 9, 'iconId': 0},
            {'id': 6, 'name': b64('Bedroom'), 'order': 1, 'colorId': 3, 'iconId': 0},
        ],
    }).encode()


@pytest.fixture
def shades_body():
    return json.dumps({
        'shadeIds': [65513, 1204],
        'shadeData': [
            {
                'id': 65513, 'name': b64('Master6'), 'roomId': 5, 'groupId': 45906,
                'order': 2, 'type': 8, 'batteryStrength': 61, 'batteryStatus': 1,
                'batteryIsLow': False,
                'positions': {'position1': 0, 'posKind1': 1, 'position2': 58351, 'posKind2': 2},
            },
            {
                'id': 1204, 'name': b64('Kitchen'), 'roomId': 6, 'groupId': 45906,
                'order': 0, 'type': 8, 'batteryStrength': 12, 'batteryStatus': 3,
                'batteryIsLow': True,
                'positions': {'position1': 65535, 'posKind1': 1},
            },
        ],
    }).encode()


@pytest.fixture
def user_data_body():
    return json.dumps({
        'userData': {
            'serialNumber': 'ABC123', 'rfID': '0xB1C2', 'rfIDInt': 45506, 'rfStatus': 0,
            'hubName': b64('Master'), 'macAddress': '00:26:74:00:00:01',
            'roomCount': 1, 'shadeCount': 6, 'groupCount': 1, 'sceneCount': 5,
        },
    }).encode()
