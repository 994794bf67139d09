"""Inventory management system.

Provides an ordered, weight-bounded container of Item instances carried by a
character.
"""
from __future__ import annotations
import logging
from typing import Iterator, List, Optional

from config import get_carry_capacity
from .core.errors import InvalidArgumentError
from .items import Item

logger = logging.getLogger(__name__)


class Inventory:
    """Character inventory with a weight limit."""

    def __init__(self, capacity: Optional[float] = None):
        self.capacity = get_carry_capacity() if capacity is None else capacity
        self.items: List[Item] = []

    def get_total_weight(self) -> float:
        """Calculate total weight of carried items."""
        return sum(item.weight for item in self.items)

    def can_carry(self, additional_weight: float) -> bool:
        """Check if can carry additional weight."""
        return self.get_total_weight() + additional_weight <= self.capacity

    def add(self, item: Item) -> None:
        """Add an item. Raises if already carried or too heavy."""
        if item in self.items:
            raise InvalidArgumentError(f"'{item.name}' is already carried.")
        if not self.can_carry(item.weight):
            raise InvalidArgumentError(
                f"'{item.name}' is too heavy ({self.get_total_weight() + item.weight:.1f}/{self.capacity:.1f})."
            )
        self.items.append(item)
        logger.debug("Inventory: added '%s' (%.1f/%.1f)", item.name, self.get_total_weight(), self.capacity)

    def remove(self, item: Item) -> None:
        if item not in self.items:
            raise InvalidArgumentError(f"'{item.name}' is not carried.")
        self.items.remove(item)

    def find(self, name: str) -> Optional[Item]:
        """Find carried item by name (case-insensitive)."""
        name_lower = name.lower()
        for item in self.items:
            if item.name.lower() == name_lower:
                return item
        return None

    def list_items(self) -> List[str]:
        return [str(item) for item in self.items]

    def __contains__(self, item) -> bool:
        return item in self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self.items))
