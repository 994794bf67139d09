"""Text Engine: rooms, doors, items, characters, actions and effects."""
from .core.errors import GameError, InvalidArgumentError, InvalidStateError
from .core.world import CONTENT_LIMIT, Door, GameEntity, Interactive, Room, WorldMap, connect_rooms
from .core.actions import Action, current_room_action, held_item_action, room_item_action
from .items import Item, ItemRegistry, get_item_registry
from .inventory import Inventory
from .stats import CharacterStats
from .characters import GameCharacter, PlayerCharacter
from .effects import (
    Effect,
    damage_effect,
    grant_item_effect,
    heal_effect,
    place_item_effect,
    remove_item_effect,
    restore_energy_effect,
)

__all__ = [
    "GameError", "InvalidArgumentError", "InvalidStateError",
    "CONTENT_LIMIT", "Door", "GameEntity", "Interactive", "Room", "WorldMap", "connect_rooms",
    "Action", "current_room_action", "held_item_action", "room_item_action",
    "Item", "ItemRegistry", "get_item_registry",
    "Inventory", "CharacterStats", "GameCharacter", "PlayerCharacter",
    "Effect", "damage_effect", "grant_item_effect", "heal_effect",
    "place_item_effect", "remove_item_effect", "restore_energy_effect",
]
