"""Runtime registry for the room graph.

Acts as an in-memory index of rooms by name, so that world-building code
and traversal queries do not have to walk door references repeatedly.
"""
from __future__ import annotations
import logging
from collections import deque
from typing import Dict, List, Optional, Set

from .errors import InvalidArgumentError, InvalidStateError
from .model.boundaries import Door, Room, connect_rooms

__all__ = ["WorldMap"]

logger = logging.getLogger(__name__)


class WorldMap:
    """Name-indexed rooms plus the doors created through ``connect``.

    Doors attached directly with ``Room.add_doors`` after ``add_room`` are not
    listed in ``doors``; ``all_doors()`` and ``validate()`` also collect them
    from the registered rooms.
    """

    def __init__(self):
        self.rooms: Dict[str, Room] = {}
        self.doors: List[Door] = []

    def add_room(self, room: Room) -> Room:
        if room.name in self.rooms:
            raise InvalidArgumentError(f"Duplicate room name '{room.name}'.")
        self.rooms[room.name] = room
        # porte già presenti sulla stanza vengono indicizzate
        for door in room.doors:
            if door not in self.doors:
                self.doors.append(door)
        return room

    def get_room(self, name: str) -> Optional[Room]:
        return self.rooms.get(name)

    def require_room(self, name: str) -> Room:
        room = self.rooms.get(name)
        if room is None:
            raise InvalidArgumentError(f"Unknown room '{name}'.")
        return room

    def connect(self, first: str, second: str, name: str = "door", description: str = "") -> Door:
        """Create a door between two registered rooms."""
        door = connect_rooms(self.require_room(first), self.require_room(second),
                             name=name, description=description)
        self.doors.append(door)
        logger.debug("Connected '%s' <-> '%s' via '%s'", first, second, name)
        return door

    def neighbours(self, name: str) -> List[str]:
        room = self.require_room(name)
        result: List[str] = []
        for door in room.doors:
            try:
                other = room.get_room_through_door(door)
            except (InvalidArgumentError, InvalidStateError):
                # porta estranea o corrotta: validate() la segnala
                continue
            if other.name not in result:
                result.append(other.name)
        return result

    def reachable_from(self, name: str) -> Set[str]:
        """Names of all rooms reachable from ``name`` (itself included)."""
        return set(self._bfs(name))

    def path_between(self, start: str, goal: str) -> Optional[List[str]]:
        """Shortest list of room names from start to goal, or None."""
        self.require_room(goal)
        parents = self._bfs(start)
        if goal not in parents:
            return None
        path = [goal]
        while parents[path[-1]] is not None:
            path.append(parents[path[-1]])
        path.reverse()
        return path

    def _bfs(self, start: str) -> Dict[str, Optional[str]]:
        self.require_room(start)
        parents: Dict[str, Optional[str]] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for nxt in self.neighbours(current):
                if nxt in parents or nxt not in self.rooms:
                    continue
                parents[nxt] = current
                queue.append(nxt)
        return parents

    def all_doors(self) -> List[Door]:
        """Doors known to the map plus any attached to registered rooms."""
        doors = list(self.doors)
        for room in self.rooms.values():
            for door in room.doors:
                if door not in doors:
                    doors.append(door)
        return doors

    def validate(self) -> List[str]:
        issues: List[str] = []
        for room in self.rooms.values():
            if not room.doors:
                issues.append(f"Room '{room.name}' has no doors")
            for door in room.doors:
                try:
                    room.get_room_through_door(door)
                except (InvalidArgumentError, InvalidStateError):
                    issues.append(f"Door '{door.name}' in room '{room.name}' does not lead anywhere from it")
        for door in self.all_doors():
            for endpoint in door.rooms:
                if not isinstance(endpoint, Room):
                    issues.append(f"Door '{door.name}' has a corrupted endpoint: {endpoint!r}")
                    continue
                registered = self.rooms.get(endpoint.name)
                if registered is None:
                    issues.append(f"Door '{door.name}' points to unregistered room '{endpoint.name}'")
                elif door not in registered.doors:
                    issues.append(f"Door '{door.name}' is not attached to room '{endpoint.name}'")
        if self.rooms:
            origin = next(iter(self.rooms))
            reachable = self.reachable_from(origin)
            for room_name in self.rooms:
                if room_name not in reachable:
                    issues.append(f"Room '{room_name}' is unreachable from '{origin}'")
        return issues
