"""Player actions: resolve the freshest interactive target off a player.

An Action never modifies properties on entities. It only navigates what the
player currently owns (inventory, location, room contents) and hands back the
live reference, so callers never act on a stale copy. Property changes belong
to Effects (see ``text_engine.effects``).
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Optional

from .errors import InvalidStateError
from .model.base import GameEntity

if TYPE_CHECKING:
    from ..characters import PlayerCharacter

__all__ = [
    "Action",
    "held_item_action",
    "room_item_action",
    "current_room_action",
]

Resolver = Callable[["PlayerCharacter"], Optional[GameEntity]]


class Action(GameEntity):
    def __init__(self, name: str, description: str, resolver: Resolver):
        super().__init__(name, description)
        self._resolver = resolver

    def apply(self, player: "PlayerCharacter") -> GameEntity:
        """Fetch the relevant interactive entity from ``player``.

        Should be called every time the action is presented, never cached.
        """
        target = self._resolver(player)
        if target is None:
            raise InvalidStateError(f"Action '{self.name}' found nothing to act on for {player.name}.")
        return target

    def __call__(self, player: "PlayerCharacter") -> GameEntity:
        return self.apply(player)

    def __repr__(self) -> str:
        return f"Action({self.name!r})"


def held_item_action(item_name: str) -> Action:
    """Action targeting the named item in the player's inventory."""
    return Action(f"use {item_name}", f"Use the {item_name} you are carrying.",
                  lambda player: player.inventory.find(item_name))


def room_item_action(item_name: str) -> Action:
    """Action targeting the named item lying in the player's current room."""
    return Action(f"inspect {item_name}", f"Look closely at the {item_name}.",
                  lambda player: player.require_location().find_item(item_name))


def current_room_action() -> Action:
    return Action("look", "Look around the room.", lambda player: player.location)
