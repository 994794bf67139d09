"""Base entity definitions shared by every domain object.

Pure dataclasses: no loading, no registry lookups.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..errors import InvalidArgumentError

if TYPE_CHECKING:
    from ...characters import GameCharacter

__all__ = ["GameEntity", "Interactive"]


@dataclass(eq=False)
class GameEntity:
    """Anything with a name and a description.

    Equality is reference identity; subtypes that need value equality
    (see Room) override ``__eq__``/``__hash__`` themselves.
    """
    name: str
    description: str = ""

    def __post_init__(self):
        if not self.name:
            raise InvalidArgumentError(f"{type(self).__name__} requires a non-empty name.")

    def __str__(self) -> str:
        if self.description:
            return f"{self.name}: {self.description}"
        return self.name


@runtime_checkable
class Interactive(Protocol):
    """Something a character can interact with."""
    name: str

    def interact(self, character: "GameCharacter") -> str:
        ...
