"""Item definitions and registry system.

Defines the Item entity and a registry of item templates that world-building
code can copy fresh instances from.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Dict, List, Optional

from .core.errors import InvalidArgumentError
from .core.model.base import GameEntity

if TYPE_CHECKING:
    from .characters import GameCharacter


@dataclass(eq=False)
class Item(GameEntity):
    """Base item definition."""
    weight: float = 0.0
    tags: List[str] = field(default_factory=list)
    use_text: str = ""

    def __post_init__(self):
        super().__post_init__()
        if self.weight < 0:
            raise InvalidArgumentError(f"Item '{self.name}' cannot have negative weight.")

    def has_tag(self, tag: str) -> bool:
        """Check if item has a specific tag."""
        return tag in self.tags

    def interact(self, character: "GameCharacter") -> str:
        """Describe what happens when a character interacts with this item."""
        if self.use_text:
            return self.use_text
        return f"{character.name} examines the {self.name}. {self.description}".rstrip()

    def __repr__(self) -> str:
        return f"Item({self.name!r})"


class ItemRegistry:
    """Registry for managing item templates."""

    def __init__(self):
        self.items: Dict[str, Item] = {}

    def register_item(self, item: Item):
        """Register a new item template."""
        self.items[item.name] = item

    def get_item(self, name: str) -> Optional[Item]:
        """Get item template by name."""
        return self.items.get(name)

    def get_all_items(self) -> List[Item]:
        return list(self.items.values())

    def get_items_by_tag(self, tag: str) -> List[Item]:
        """Get all items with a specific tag."""
        return [item for item in self.items.values() if item.has_tag(tag)]

    def find_items_by_name(self, name: str, partial=False) -> List[Item]:
        """Find items by name (exact or partial match, case-insensitive)."""
        name_lower = name.lower()
        if partial:
            return [item for item in self.items.values()
                    if name_lower in item.name.lower()]
        return [item for item in self.items.values()
                if item.name.lower() == name_lower]

    def create(self, name: str) -> Item:
        """Return a fresh copy of a registered template.

        Each copy is a distinct item: rooms and inventories treat two copies
        as two items.
        """
        template = self.items.get(name)
        if template is None:
            raise InvalidArgumentError(f"Unknown item '{name}'.")
        return replace(template, tags=list(template.tags))

    def create_default_items(self):
        """Create some default items for testing."""
        defaults = [
            Item("Lantern", "An oil lantern with a cracked glass.", weight=1.5,
                 tags=["light"], use_text="The lantern flickers to life."),
            Item("Brass Key", "A small key, green with age.", weight=0.1, tags=["key"]),
            Item("Bread", "A stale loaf of bread.", weight=0.5, tags=["food"]),
            Item("Rope", "Twenty feet of hemp rope.", weight=3.0, tags=["tool"]),
            Item("Bandage", "Clean linen strips.", weight=0.2, tags=["medical"]),
        ]
        for item in defaults:
            self.register_item(item)


# Global registry instance
_item_registry = ItemRegistry()


def get_item_registry() -> ItemRegistry:
    """Get the global item registry."""
    return _item_registry


def create_default_items():
    """Create default items in the global registry."""
    _item_registry.create_default_items()
