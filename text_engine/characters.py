"""Characters: the owners that Actions and Effects navigate.

A character owns its stats, its inventory and (once placed) a current room.
``get_entity`` is the single extraction point used by Effect and Action to
reach those owned entities by type.
"""
from __future__ import annotations
import logging
from typing import Optional, Type, TypeVar

from .core.errors import InvalidArgumentError, InvalidStateError
from .core.model.base import GameEntity
from .core.model.boundaries import Door, Room
from .inventory import Inventory
from .items import Item
from .stats import CharacterStats

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GameCharacter(GameEntity):
    def __init__(self, name: str, description: str = "", location: Optional[Room] = None,
                 inventory: Optional[Inventory] = None, stats: Optional[CharacterStats] = None):
        super().__init__(name, description)
        self.location = location
        self.inventory = inventory if inventory is not None else Inventory()
        self.stats = stats if stats is not None else CharacterStats(f"{name} stats")

    def get_entity(self, kind: Type[T]) -> T:
        """Return the entity of type ``kind`` owned by this character.

        Raises:
            InvalidStateError: a Room is requested but the character is not placed.
            InvalidArgumentError: the character owns nothing of that type.
        """
        if isinstance(self, kind):
            return self
        if isinstance(self.stats, kind):
            return self.stats
        if isinstance(self.inventory, kind):
            return self.inventory
        if issubclass(kind, Room):
            if self.location is None:
                raise InvalidStateError(f"{self.name} is not in any room.")
            if isinstance(self.location, kind):
                return self.location
        raise InvalidArgumentError(f"{self.name} owns no entity of type {kind.__name__}.")

    def require_location(self) -> Room:
        if self.location is None:
            raise InvalidStateError(f"{self.name} is not in any room.")
        return self.location

    def move_through(self, door: Door) -> Room:
        """Walk through a door of the current room. Returns the new room."""
        target = self.require_location().get_room_through_door(door)
        logger.debug("%s moves %s -> %s", self.name, self.location.name, target.name)
        self.location = target
        return target

    def pick_up(self, item_name: str) -> Item:
        """Move a named item from the current room into the inventory."""
        room = self.require_location()
        item = room.find_item(item_name)
        if item is None:
            raise InvalidArgumentError(f"There is no '{item_name}' here.")
        self.inventory.add(item)
        room.remove_item(item)
        return item

    def drop(self, item_name: str) -> Item:
        """Move a carried item into the current room (subject to its limit)."""
        room = self.require_location()
        item = self.inventory.find(item_name)
        if item is None:
            raise InvalidArgumentError(f"{self.name} is not carrying '{item_name}'.")
        room.add_item(item)
        self.inventory.remove(item)
        return item

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class PlayerCharacter(GameCharacter):
    """The character controlled by the player; Actions are applied to it."""
    pass
