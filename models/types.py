"""Wire-level definitions for the PowerView hub API.

This module provides TypedDict definitions for the JSON documents the hub
sends and accepts, plus the endpoint paths they travel on.
"""

from typing import TypedDict

# Endpoint paths
SCENES_PATH = '/api/scenes'
ROOMS_PATH = '/api/rooms'
SHADES_PATH = '/api/shades'
USER_DATA_PATH = '/api/userdata/'

JSON_CONTENT_TYPE = 'application/json; charset=UTF-8'

# Raw shade positions span the full unsigned 16-bit range
MAX_POSITION = 65535

# Position channel discriminators ("posKind") required by the hub
BOTTOM_POSITION_KIND = 1
TOP_POSITION_KIND = 2


class SceneData(TypedDict, total=False):
    """One entry of 'sceneData' in GET /api/scenes?."""
    id: int
    name: str  # Base64
    roomId: int
    order: int
    colorId: int
    iconId: int


class RoomData(TypedDict, total=False):
    """One entry of 'roomData' in GET /api/rooms?."""
    id: int
    name: str  # Base64
    order: int
    colorId: int
    iconId: int


class ShadePositions(TypedDict, total=False):
    """Position channels of a shade. position1 is the bottom rail, position2 the top."""
    posKind1: int
    position1: int
    posKind2: int
    position2: int


class ShadeData(TypedDict, total=False):
    """One entry of 'shadeData' in GET /api/shades?."""
    id: int
    name: str  # Base64
    roomId: int
    groupId: int
    order: int
    type: int
    batteryStrength: int
    batteryStatus: int
    batteryIsLow: bool
    positions: ShadePositions


class ShadeMove(TypedDict):
    id: int
    positions: ShadePositions


class ShadeMoveBody(TypedDict):
    """Body of PUT /api/shades/<id>."""
    shade: ShadeMove


class UserData(TypedDict, total=False):
    """The 'userData' object of GET /api/userdata/ (subset used here)."""
    serialNumber: str
    hubName: str  # Base64
    macAddress: str
    roomCount: int
    shadeCount: int
    sceneCount: int
