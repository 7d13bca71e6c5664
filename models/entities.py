"""Scene, Room and Shade handles bound to a PowerView hub.

Entities keep a plain, non-owning reference to the Hub they came from and
send every operation through it. The hub reference takes no part in
equality or repr.
"""

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.errors import NilEntityError
from models.types import (
    BOTTOM_POSITION_KIND,
    MAX_POSITION,
    SCENES_PATH,
    SHADES_PATH,
    TOP_POSITION_KIND,
    ShadeMoveBody,
)
from models.utils import position_to_percent

if TYPE_CHECKING:
    from core.hub import Hub


@dataclass
class Room:
    """A room configured on the hub.

    name is None when the room was reached through a scene, whose payload
    carries only the room id. An empty string means the hub itself
    returned an empty name.
    """
    id: int
    name: str | None = None
    hub: 'Hub | None' = field(default=None, repr=False, compare=False)


@dataclass
class Scene:
    """A stored scene preset."""
    id: int
    name: str
    room: Room
    hub: 'Hub | None' = field(default=None, repr=False, compare=False)

    def activate(self) -> None:
        """Activate the scene on the hub.

        Raises:
            NilEntityError: if the scene is not bound to a hub
            HubError, HubTimeoutError, HubConnectionError: from the transport
        """
        if self.hub is None:
            raise NilEntityError(f"scene {self.name!r} is not bound to a hub")
        self.hub.request('GET', f"{SCENES_PATH}?sceneid={self.id}")


def shade_move_body(shade_id: int, bottom: int, top: int) -> ShadeMoveBody:
    """Build the PUT body that moves both position channels of a shade."""
    return {
        'shade': {
            'id': shade_id,
            'positions': {
                'posKind2': TOP_POSITION_KIND,
                'position2': top,
                'posKind1': BOTTOM_POSITION_KIND,
                'position1': bottom,
            },
        },
    }


def _check_position(label: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_POSITION:
        raise ValueError(f"{label} position must be an integer between 0 and {MAX_POSITION}, got {value!r}")


@dataclass
class Shade:
    """A motorised shade with two independently positioned rails.

    bottom (wire 'position1') and top (wire 'position2') are raw hub
    positions in 0-65535. They reflect the last listing or the last
    successful move; they are never re-fetched.
    """
    id: int
    name: str
    battery_strength: int = 0
    battery_status: int = 0
    battery_is_low: bool = False
    bottom: int = 0
    top: int = 0
    room: Room | None = None
    hub: 'Hub | None' = field(default=None, repr=False, compare=False)

    @property
    def bottom_percent(self) -> int:
        return position_to_percent(self.bottom)

    @property
    def top_percent(self) -> int:
        return position_to_percent(self.top)

    def move(self, bottom: int, top: int) -> None:
        """Move the shade's bottom and top rails to raw positions.

        The local bottom/top fields are updated only after the hub accepts
        the command. The hub's confirmation body is not parsed.

        Raises:
            ValueError: if a position is outside 0-65535
            NilEntityError: if the shade is not bound to a hub
            HubError, HubTimeoutError, HubConnectionError: from the transport
        """
        _check_position('bottom', bottom)
        _check_position('top', top)
        if self.hub is None:
            raise NilEntityError(f"shade {self.name!r} is not bound to a hub")

        body = json.dumps(shade_move_body(self.id, bottom, top), separators=(',', ':'))
        self.hub.request('PUT', f"{SHADES_PATH}/{self.id}", body=body)

        self.bottom = bottom
        self.top = top
