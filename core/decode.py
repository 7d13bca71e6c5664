"""Decoding of PowerView hub responses into typed records.

Every listing response is a JSON object holding a list of ids and a parallel
list of detail records, e.g. 'sceneIds' and 'sceneData'. Only the detail list
is used. Display names arrive Base64-encoded and are decoded here, once, for
every record type.

Any shape problem raises DecodeError; a record is either fully decoded or
not returned at all.
"""

import base64
import binascii
import json
from dataclasses import dataclass

from core.errors import DecodeError
from models.types import MAX_POSITION, RoomData, SceneData, ShadeData, UserData


@dataclass(frozen=True)
class SceneRecord:
    id: int
    name: str
    room_id: int
    order: int = 0
    color_id: int = 0
    icon_id: int = 0


@dataclass(frozen=True)
class RoomRecord:
    id: int
    name: str
    order: int = 0
    color_id: int = 0
    icon_id: int = 0


@dataclass(frozen=True)
class ShadeRecord:
    id: int
    name: str
    room_id: int = 0
    group_id: int = 0
    order: int = 0
    type: int = 0
    battery_strength: int = 0
    battery_status: int = 0
    battery_is_low: bool = False
    bottom: int = 0
    top: int = 0


@dataclass(frozen=True)
class HubInfo:
    """Identity and inventory counts reported by GET /api/userdata/."""
    serial_number: str
    name: str
    mac_address: str
    room_count: int = 0
    shade_count: int = 0
    scene_count: int = 0


def decode_name(value) -> str:
    """Decode a Base64 display name.

    A missing (None) name decodes to the empty string. Anything that is not
    valid standard Base64 of UTF-8 text raises DecodeError.
    """
    if value is None:
        return ''
    if not isinstance(value, str):
        raise DecodeError(f"name must be a Base64 string, got {type(value).__name__}")
    try:
        return base64.b64decode(value, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid Base64 name {value!r}: {e}") from e


def _load_object(raw: bytes) -> dict:
    try:
        document = json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"malformed JSON from hub: {e}") from e
    if not isinstance(document, dict):
        raise DecodeError(f"expected a JSON object from hub, got {type(document).__name__}")
    return document


def _data_list(document: dict, key: str) -> list[dict]:
    """Return the detail list under key. A missing list is empty."""
    items = document.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise DecodeError(f"'{key}' must be a list, got {type(items).__name__}")
    for item in items:
        if not isinstance(item, dict):
            raise DecodeError(f"'{key}' entries must be objects, got {type(item).__name__}")
    return items


def _int(record: dict, key: str) -> int:
    """Read an integer field; absent fields take the hub's zero value."""
    value = record.get(key, 0)
    # bool is an int subclass but never a valid number on the wire
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"'{key}' must be an integer, got {value!r}")
    return value


def _str(record: dict, key: str) -> str:
    value = record.get(key, '')
    if not isinstance(value, str):
        raise DecodeError(f"'{key}' must be a string, got {value!r}")
    return value


def _position(positions: dict, key: str) -> int:
    value = _int(positions, key)
    if not 0 <= value <= MAX_POSITION:
        raise DecodeError(f"'{key}' out of range 0-{MAX_POSITION}: {value}")
    return value


def _scene(data: SceneData) -> SceneRecord:
    return SceneRecord(
        id=_int(data, 'id'),
        name=decode_name(data.get('name')),
        room_id=_int(data, 'roomId'),
        order=_int(data, 'order'),
        color_id=_int(data, 'colorId'),
        icon_id=_int(data, 'iconId'),
    )


def _room(data: RoomData) -> RoomRecord:
    return RoomRecord(
        id=_int(data, 'id'),
        name=decode_name(data.get('name')),
        order=_int(data, 'order'),
        color_id=_int(data, 'colorId'),
        icon_id=_int(data, 'iconId'),
    )


def _shade(data: ShadeData) -> ShadeRecord:
    positions = data.get('positions')
    if positions is None:
        positions = {}
    if not isinstance(positions, dict):
        raise DecodeError(f"'positions' must be an object, got {positions!r}")

    battery_is_low = data.get('batteryIsLow', False)
    if not isinstance(battery_is_low, bool):
        raise DecodeError(f"'batteryIsLow' must be a boolean, got {battery_is_low!r}")

    return ShadeRecord(
        id=_int(data, 'id'),
        name=decode_name(data.get('name')),
        room_id=_int(data, 'roomId'),
        group_id=_int(data, 'groupId'),
        order=_int(data, 'order'),
        type=_int(data, 'type'),
        battery_strength=_int(data, 'batteryStrength'),
        battery_status=_int(data, 'batteryStatus'),
        battery_is_low=battery_is_low,
        bottom=_position(positions, 'position1'),
        top=_position(positions, 'position2'),
    )


def decode_scenes(raw: bytes) -> list[SceneRecord]:
    """Decode the body of GET /api/scenes? into scene records, in response order."""
    return [_scene(d) for d in _data_list(_load_object(raw), 'sceneData')]


def decode_rooms(raw: bytes) -> list[RoomRecord]:
    """Decode the body of GET /api/rooms? into room records, in response order."""
    return [_room(d) for d in _data_list(_load_object(raw), 'roomData')]


def decode_shades(raw: bytes) -> list[ShadeRecord]:
    """Decode the body of GET /api/shades? into shade records, in response order."""
    return [_shade(d) for d in _data_list(_load_object(raw), 'shadeData')]


def decode_user_data(raw: bytes) -> HubInfo:
    """Decode the body of GET /api/userdata/."""
    data: UserData = _load_object(raw).get('userData')
    if not isinstance(data, dict):
        raise DecodeError("'userData' object missing from hub response")
    return HubInfo(
        serial_number=_str(data, 'serialNumber'),
        name=decode_name(data.get('hubName')),
        mac_address=_str(data, 'macAddress'),
        room_count=_int(data, 'roomCount'),
        shade_count=_int(data, 'shadeCount'),
        scene_count=_int(data, 'sceneCount'),
    )
