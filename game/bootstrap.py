"""Bootstrap utilities: build the demo world and place the player in it."""
from __future__ import annotations
import logging

from config import configure_logging, get_strict_world
from text_engine.core.errors import InvalidStateError
from text_engine.core.world import Room, WorldMap
from text_engine.characters import PlayerCharacter
from text_engine.items import ItemRegistry

logger = logging.getLogger(__name__)

# (nome, descrizione, oggetti iniziali)
_ROOMS = [
    ("Hall", "A draughty entrance hall.", ["Lantern"]),
    ("Kitchen", "Copper pans hang over a cold hearth.", ["Bread", "Bandage"]),
    ("Cellar", "Damp stone steps lead into darkness.", ["Rope"]),
    ("Study", "Shelves of mouldering books.", ["Brass Key"]),
]

_DOORS = [
    ("Hall", "Kitchen", "oak door", ""),
    ("Kitchen", "Cellar", "trapdoor", "A heavy hatch in the floor."),
    ("Hall", "Study", "glass door", ""),
]


def create_demo_world(player_name: str = "Player") -> tuple[WorldMap, PlayerCharacter]:
    items = ItemRegistry()
    items.create_default_items()

    world = WorldMap()
    for name, description, contents in _ROOMS:
        world.add_room(Room(name, description, items=[items.create(i) for i in contents]))
    for first, second, door_name, door_description in _DOORS:
        world.connect(first, second, name=door_name, description=door_description)

    issues = world.validate()
    if issues:
        if get_strict_world():
            raise InvalidStateError("World validation failed: " + "; ".join(issues))
        for i in issues:
            logger.warning("[WORLD WARNING] %s", i)

    # Posizione iniziale: prima stanza in ordine di definizione
    start = next(iter(world.rooms.values()))
    player = PlayerCharacter(player_name, "A curious visitor.", location=start)
    logger.info("Demo world ready: %d rooms, %d doors, start in '%s'",
                len(world.rooms), len(world.doors), start.name)
    return world, player


def main() -> None:
    configure_logging()
    world, player = create_demo_world()
    print(f"== {player.location.name} ==")
    print(player.location.description)
    for line in player.location.examine():
        print(f"- {line}")


if __name__ == "__main__":
    main()
