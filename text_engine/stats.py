"""Character statistics: health, energy and morale.

All mutators clamp to [0, max] and return the delta actually applied, so
effects can report precisely what changed.
"""
from __future__ import annotations
from dataclasses import dataclass

from config import get_max_health
from .core.model.base import GameEntity


@dataclass(eq=False)
class CharacterStats(GameEntity):
    """Statistics container for a single character."""
    health: int = -1
    max_health: int = -1
    energy: int = 100
    max_energy: int = 100
    morale: int = 75
    max_morale: int = 100

    def __post_init__(self):
        super().__post_init__()
        # -1 = usa il default configurato
        if self.max_health < 0:
            self.max_health = get_max_health()
        if self.health < 0:
            self.health = self.max_health
        self.health = _clamp(self.health, self.max_health)
        self.energy = _clamp(self.energy, self.max_energy)
        self.morale = _clamp(self.morale, self.max_morale)

    def is_alive(self) -> bool:
        return self.health > 0

    def heal(self, amount: int) -> int:
        """Restore health. Returns actual amount healed."""
        old = self.health
        self.health = _clamp(self.health + amount, self.max_health)
        return self.health - old

    def damage(self, amount: int) -> int:
        """Apply damage. Returns actual damage taken."""
        old = self.health
        self.health = _clamp(self.health - amount, self.max_health)
        return old - self.health

    def restore_energy(self, amount: int) -> int:
        old = self.energy
        self.energy = _clamp(self.energy + amount, self.max_energy)
        return self.energy - old

    def spend_energy(self, amount: int) -> int:
        old = self.energy
        self.energy = _clamp(self.energy - amount, self.max_energy)
        return old - self.energy

    def adjust_morale(self, delta: int) -> int:
        """Shift morale by delta (either sign). Returns the applied change."""
        old = self.morale
        self.morale = _clamp(self.morale + delta, self.max_morale)
        return self.morale - old

    def summary(self) -> str:
        return (f"HP {self.health}/{self.max_health} | "
                f"Energy {self.energy}/{self.max_energy} | "
                f"Morale {self.morale}/{self.max_morale}")


def _clamp(value: int, maximum: int) -> int:
    return max(0, min(maximum, value))
