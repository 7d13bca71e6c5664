"""Read-only snapshots of the scenes, rooms and shades listed by a hub.

Each listing call on a Hub produces a new, independent collection. A
collection never talks to the hub again: as_map(), by_name(), find() and
by_id() work on the decoded snapshot only.

Names are assumed unique within a snapshot. If the hub repeats a name, the
later entry in response order wins in as_map() and therefore in by_name();
the earlier entry stays reachable through iteration and by_id().
"""

from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from core.decode import RoomRecord, SceneRecord, ShadeRecord
from core.errors import NilEntityError
from models.entities import Room, Scene, Shade
from models.utils import find_similar_strings

if TYPE_CHECKING:
    from core.hub import Hub

T = TypeVar('T', Scene, Room, Shade)


class HubCollection(Generic[T]):
    """Common lookups over one hub response."""

    kind = 'entity'

    def __init__(self, items: list[T]):
        self._items = tuple(items)
        self._name_map: dict[str, T] | None = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate in hub response order, duplicates included."""
        return iter(self._items)

    def as_map(self) -> dict[str, T]:
        """Return the entities keyed by name (case-sensitive, later entries win)."""
        if self._name_map is None:
            name_map = {}
            for item in self._items:
                name_map[item.name] = item
            self._name_map = name_map
        # Copy so callers cannot alter the snapshot
        return dict(self._name_map)

    def by_name(self) -> list[T]:
        """Return the entities of as_map() sorted by name, ascending."""
        name_map = self.as_map()
        return [name_map[name] for name in sorted(name_map)]

    def find(self, name: str) -> T:
        """Look up an entity by exact name.

        Raises:
            NilEntityError: if no entity has that name; the message lists
                similar names when there are any
        """
        name_map = self.as_map()
        if name in name_map:
            return name_map[name]

        message = f"no {self.kind} named {name!r}"
        suggestions = find_similar_strings(name, list(name_map), limit=3)
        if suggestions:
            message += f" (did you mean: {', '.join(repr(s) for s in suggestions)}?)"
        raise NilEntityError(message)

    def by_id(self, entity_id: int) -> T:
        """Look up an entity by its hub-assigned id.

        Raises:
            NilEntityError: if no entity has that id
        """
        for item in self._items:
            if item.id == entity_id:
                return item
        raise NilEntityError(f"no {self.kind} with id {entity_id}")


class Scenes(HubCollection[Scene]):
    """Scenes listed by GET /api/scenes?."""

    kind = 'scene'

    @classmethod
    def from_records(cls, hub: 'Hub', records: list[SceneRecord]) -> 'Scenes':
        return cls([
            Scene(id=r.id, name=r.name, room=Room(id=r.room_id, hub=hub), hub=hub)
            for r in records
        ])

    def in_room(self, room_id: int) -> list[Scene]:
        """Scenes belonging to room_id, sorted by name."""
        return [s for s in self.by_name() if s.room.id == room_id]


class Rooms(HubCollection[Room]):
    """Rooms listed by GET /api/rooms?."""

    kind = 'room'

    @classmethod
    def from_records(cls, hub: 'Hub', records: list[RoomRecord]) -> 'Rooms':
        return cls([Room(id=r.id, name=r.name, hub=hub) for r in records])

    def name_for(self, room_id: int) -> str | None:
        """Name of room_id, or None if the room is not in this listing."""
        try:
            return self.by_id(room_id).name
        except NilEntityError:
            return None


class Shades(HubCollection[Shade]):
    """Shades listed by GET /api/shades?."""

    kind = 'shade'

    @classmethod
    def from_records(cls, hub: 'Hub', records: list[ShadeRecord]) -> 'Shades':
        return cls([
            Shade(
                id=r.id,
                name=r.name,
                battery_strength=r.battery_strength,
                battery_status=r.battery_status,
                battery_is_low=r.battery_is_low,
                bottom=r.bottom,
                top=r.top,
                room=Room(id=r.room_id, hub=hub),
                hub=hub,
            )
            for r in records
        ])
