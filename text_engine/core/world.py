"""Facade for the world model.

Re-exports entity, room and door definitions from the internal modules to
provide a stable import surface.
"""
from .model.base import GameEntity, Interactive
from .model.boundaries import CONTENT_LIMIT, Door, Room, connect_rooms
from .registry import WorldMap

__all__ = [
    "GameEntity",
    "Interactive",
    "CONTENT_LIMIT",
    "Door",
    "Room",
    "connect_rooms",
    "WorldMap",
]
