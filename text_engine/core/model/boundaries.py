"""Rooms and the doors that connect them.

A Room holds a bounded, ordered list of items and a set of unique doors.
A Door is an immutable edge between exactly two rooms.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Tuple

from ..errors import InvalidArgumentError, InvalidStateError
from .base import GameEntity

if TYPE_CHECKING:
    from ...items import Item

__all__ = ["CONTENT_LIMIT", "Door", "Room", "connect_rooms"]

logger = logging.getLogger(__name__)

CONTENT_LIMIT = 10


class Door(GameEntity):
    """Edge between two rooms.

    Doors compare by identity: two door objects joining the same rooms are
    still two different doors.
    """

    def __init__(self, first: "Room", second: "Room", name: str = "door", description: str = ""):
        super().__init__(name, description)
        if first == second:
            raise InvalidArgumentError(f"A door cannot connect room '{_endpoint_name(first)}' to itself.")
        self._first = first
        self._second = second

    @property
    def first(self) -> "Room":
        return self._first

    @property
    def second(self) -> "Room":
        return self._second

    @property
    def rooms(self) -> Tuple["Room", "Room"]:
        return self._first, self._second

    def get_other_room(self, room: "Room") -> "Room":
        """Return the endpoint opposite ``room``.

        Raises:
            InvalidStateError: one of the door's endpoints is not a Room.
            InvalidArgumentError: ``room`` is not one of the two endpoints.
        """
        first, second = self._first, self._second
        if not isinstance(first, Room) or not isinstance(second, Room):
            raise InvalidStateError(f"Door '{self.name}' has corrupted endpoints: {first!r}, {second!r}.")
        if room == first:
            return second
        if room == second:
            return first
        raise InvalidArgumentError(
            f"Door '{self.name}' does not connect room '{getattr(room, 'name', room)}' "
            f"(it joins '{first.name}' and '{second.name}')."
        )

    def __str__(self) -> str:
        base = f"{self.name} between {_endpoint_name(self._first)} and {_endpoint_name(self._second)}"
        if self.description:
            return f"{base}: {self.description}"
        return base

    def __repr__(self) -> str:
        return f"Door({self.name!r}, {_endpoint_name(self._first)!r} <-> {_endpoint_name(self._second)!r})"


class Room(GameEntity):
    """A location holding items and doors.

    Two rooms are equal iff their names match exactly, regardless of their
    items, doors or description.
    """

    def __init__(self, name: str, description: str = "",
                 items: Iterable["Item"] = (), doors: Iterable[Door] = ()):
        super().__init__(name, description)
        items = list(items)
        if len(items) > CONTENT_LIMIT:
            raise InvalidArgumentError(f"Rooms can have a maximum of {CONTENT_LIMIT} items.")
        self._items: List["Item"] = items
        # dict come set ordinato: examine() resta deterministico
        self._doors: Dict[Door, None] = dict.fromkeys(doors)

    @property
    def items(self) -> Tuple["Item", ...]:
        return tuple(self._items)

    @property
    def doors(self) -> Tuple[Door, ...]:
        return tuple(self._doors)

    def add_doors(self, *doors: Door) -> Tuple[Door, ...]:
        """Add doors not already present. Returns the doors actually added."""
        added = []
        for door in doors:
            if door in self._doors:
                continue
            self._doors[door] = None
            added.append(door)
        if added:
            logger.debug("Room '%s': attached %d door(s)", self.name, len(added))
        return tuple(added)

    def get_room_through_door(self, door: Door) -> "Room":
        """Return the room on the other side of ``door``."""
        if door not in self._doors:
            raise InvalidArgumentError(
                f"This room ({self.name}) is not connected to the given door ({door})."
            )
        return door.get_other_room(self)

    def add_item(self, item: "Item") -> None:
        """Add an item to the room.

        A new item is rejected once the room holds CONTENT_LIMIT items. An item
        already in the room is always accepted; at the limit it is not appended
        again, so the count never exceeds CONTENT_LIMIT.
        """
        present = item in self._items
        if len(self._items) >= CONTENT_LIMIT:
            if not present:
                raise InvalidArgumentError(f"Room has hit limit of {CONTENT_LIMIT} items.")
            logger.debug("Room '%s' full: re-add of '%s' accepted without append", self.name, item.name)
            return
        self._items.append(item)
        logger.debug("Room '%s': added item '%s' (%d/%d)", self.name, item.name, len(self._items), CONTENT_LIMIT)

    def remove_item(self, item: "Item") -> None:
        """Remove one occurrence of ``item``."""
        try:
            self._items.remove(item)
        except ValueError:
            raise InvalidArgumentError(f"Item '{item.name}' is not in room '{self.name}'.") from None

    def find_item(self, name: str) -> "Item | None":
        """Find first item by name (case-insensitive)."""
        name_lower = name.lower()
        for item in self._items:
            if item.name.lower() == name_lower:
                return item
        return None

    def examine(self) -> List[str]:
        """One line per item (insertion order) followed by one line per door."""
        lines = [str(item) for item in self._items]
        lines.extend(str(door) for door in self._doors)
        return lines

    def can_move_to(self, other: "Room") -> bool:
        """Check whether any door of this room leads to ``other``."""
        for door in self._doors:
            try:
                if door.get_other_room(self) == other:
                    return True
            except (InvalidArgumentError, InvalidStateError):
                # porta non collegata: proviamo la successiva
                continue
        return False

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Room):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Room({self.name!r})"


def _endpoint_name(endpoint) -> str:
    if isinstance(endpoint, Room):
        return endpoint.name
    return f"<invalid endpoint {endpoint!r}>"


def connect_rooms(first: Room, second: Room, name: str = "door", description: str = "") -> Door:
    """Create a door between two rooms and attach it to both."""
    door = Door(first, second, name=name, description=description)
    first.add_doors(door)
    second.add_doors(door)
    return door
