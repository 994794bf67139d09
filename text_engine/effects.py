"""Effects system: state changes applied to a character's entities.

An Effect always takes a GameCharacter. It extracts the entity of its target
type from the character, runs the injected mutation on it and returns its
report line for the presentation layer.
"""
from __future__ import annotations
import logging
from typing import Callable, Generic, Type, TypeVar

from .characters import GameCharacter
from .core.errors import InvalidArgumentError
from .core.model.base import GameEntity
from .core.model.boundaries import Room
from .inventory import Inventory
from .items import Item
from .stats import CharacterStats

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Effect(GameEntity, Generic[T]):
    """Something that changes the state of the game."""

    def __init__(self, name: str, description: str, report: str,
                 target: Type[T], consumer: Callable[[T], None]):
        super().__init__(name, description)
        self.report = report
        self.target = target
        self.consumer = consumer

    def apply(self, character: GameCharacter) -> str:
        """Apply the mutation to the character's target entity and return the report."""
        entity = character.get_entity(self.target)
        self.consumer(entity)
        logger.debug("Effect '%s' applied to %s (%s)", self.name, character.name, self.target.__name__)
        return self.report

    def __call__(self, character: GameCharacter) -> str:
        return self.apply(character)

    def __repr__(self) -> str:
        return f"Effect({self.name!r}, target={self.target.__name__})"


def heal_effect(amount: int) -> Effect[CharacterStats]:
    return Effect("heal", "Restores health.", f"You recover {amount} health.",
                  CharacterStats, lambda stats: stats.heal(amount))


def damage_effect(amount: int) -> Effect[CharacterStats]:
    return Effect("damage", "Inflicts damage.", f"You take {amount} damage.",
                  CharacterStats, lambda stats: stats.damage(amount))


def restore_energy_effect(amount: int) -> Effect[CharacterStats]:
    return Effect("rest", "Restores energy.", f"You regain {amount} energy.",
                  CharacterStats, lambda stats: stats.restore_energy(amount))


def grant_item_effect(item: Item) -> Effect[Inventory]:
    """Put ``item`` into the character's inventory."""
    return Effect("grant", f"Receive the {item.name}.", f"You now carry the {item.name}.",
                  Inventory, lambda inventory: inventory.add(item))


def remove_item_effect(item_name: str) -> Effect[Inventory]:
    """Take the named item away from the character's inventory."""
    def _remove(inventory: Inventory) -> None:
        item = inventory.find(item_name)
        if item is None:
            raise InvalidArgumentError(f"'{item_name}' is not carried.")
        inventory.remove(item)

    return Effect("lose", f"Lose the {item_name}.", f"The {item_name} is gone.",
                  Inventory, _remove)


def place_item_effect(item: Item) -> Effect[Room]:
    """Place ``item`` in the character's current room."""
    return Effect("place", f"The {item.name} appears.", f"A {item.name} appears nearby.",
                  Room, lambda room: room.add_item(item))
