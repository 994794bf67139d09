"""Tests for characters, actions and effects."""

import pytest

from text_engine.core.actions import Action, current_room_action, held_item_action, room_item_action
from text_engine.core.errors import InvalidArgumentError, InvalidStateError
from text_engine.core.world import CONTENT_LIMIT, Room, connect_rooms
from text_engine.characters import PlayerCharacter
from text_engine.effects import (
    Effect,
    damage_effect,
    grant_item_effect,
    heal_effect,
    place_item_effect,
    remove_item_effect,
    restore_energy_effect,
)
from text_engine.inventory import Inventory
from text_engine.items import Item
from text_engine.stats import CharacterStats


@pytest.fixture
def setup():
    hall = Room("Hall", "A hall.")
    kitchen = Room("Kitchen", "A kitchen.", items=[Item("Bread", weight=0.5)])
    door = connect_rooms(hall, kitchen, name="oak door")
    player = PlayerCharacter("Ada", "A visitor.", location=hall,
                             inventory=Inventory(capacity=10.0),
                             stats=CharacterStats("Ada stats", health=50, max_health=100))
    return player, hall, kitchen, door


class TestCharacter:
    def test_get_entity_by_type(self, setup):
        player, hall, _, _ = setup
        assert player.get_entity(PlayerCharacter) is player
        assert player.get_entity(CharacterStats) is player.stats
        assert player.get_entity(Inventory) is player.inventory
        assert player.get_entity(Room) is hall

    def test_get_entity_unknown_type(self, setup):
        player, _, _, _ = setup
        with pytest.raises(InvalidArgumentError):
            player.get_entity(Item)

    def test_get_room_when_not_placed(self):
        with pytest.raises(InvalidStateError):
            PlayerCharacter("Nobody").get_entity(Room)

    def test_move_through(self, setup):
        player, hall, kitchen, door = setup
        assert player.move_through(door) is kitchen
        assert player.location is kitchen
        player.move_through(door)
        assert player.location is hall

    def test_move_through_foreign_door(self, setup):
        player, hall, kitchen, _ = setup
        cellar = Room("Cellar")
        foreign = connect_rooms(kitchen, cellar)
        with pytest.raises(InvalidArgumentError):
            player.move_through(foreign)
        assert player.location is hall

    def test_pick_up_and_drop(self, setup):
        player, _, kitchen, door = setup
        player.move_through(door)
        bread = player.pick_up("bread")
        assert bread in player.inventory
        assert kitchen.items == ()
        player.drop("Bread")
        assert kitchen.items == (bread,)
        assert bread not in player.inventory

    def test_pick_up_missing(self, setup):
        player, _, _, _ = setup
        with pytest.raises(InvalidArgumentError):
            player.pick_up("Bread")

    def test_drop_into_full_room_keeps_item(self, setup):
        player, hall, _, _ = setup
        for i in range(CONTENT_LIMIT):
            hall.add_item(Item(f"junk{i}"))
        coin = Item("Coin")
        player.inventory.add(coin)
        with pytest.raises(InvalidArgumentError):
            player.drop("Coin")
        assert coin in player.inventory


class TestAction:
    def test_held_item_resolves_fresh_reference(self, setup):
        player, _, _, _ = setup
        action = held_item_action("Lantern")
        old = Item("Lantern")
        player.inventory.add(old)
        assert action.apply(player) is old
        # sostituzione dell'oggetto: l'azione deve restituire il nuovo riferimento
        player.inventory.remove(old)
        new = Item("Lantern", "Freshly polished.")
        player.inventory.add(new)
        assert action(player) is new

    def test_missing_target_is_invalid_state(self, setup):
        player, _, _, _ = setup
        with pytest.raises(InvalidStateError):
            held_item_action("Lantern").apply(player)

    def test_room_item_follows_player(self, setup):
        player, _, kitchen, door = setup
        action = room_item_action("Bread")
        with pytest.raises(InvalidStateError):
            action.apply(player)
        player.move_through(door)
        assert action.apply(player) is kitchen.items[0]

    def test_current_room(self, setup):
        player, hall, kitchen, door = setup
        look = current_room_action()
        assert look(player) is hall
        player.move_through(door)
        assert look(player) is kitchen

    def test_action_does_not_mutate(self, setup):
        player, hall, _, _ = setup
        before = (player.stats.health, len(player.inventory), hall.examine())
        current_room_action().apply(player)
        assert (player.stats.health, len(player.inventory), hall.examine()) == before

    def test_call_dispatches_to_overridden_apply(self, setup):
        player, hall, _, _ = setup

        class RoomOnly(Action):
            def apply(self, player):
                return player.require_location()

        action = RoomOnly("where", "Where am I?", lambda p: None)
        assert action(player) is hall

    def test_custom_resolver(self, setup):
        player, _, _, _ = setup
        action = Action("self", "Look at yourself.", lambda p: p)
        assert action.apply(player) is player
        assert action.name == "self"


class TestEffect:
    def test_call_dispatches_to_overridden_apply(self, setup):
        player, _, _, _ = setup

        class LoudEffect(Effect):
            def apply(self, character):
                return super().apply(character).upper()

        loud = LoudEffect("shout", "Shout.", "you feel better.", CharacterStats, lambda s: s.heal(1))
        assert loud(player) == "YOU FEEL BETTER."

    def test_heal_reports_and_mutates(self, setup):
        player, _, _, _ = setup
        report = heal_effect(20).apply(player)
        assert report == "You recover 20 health."
        assert player.stats.health == 70

    def test_damage_and_energy(self, setup):
        player, _, _, _ = setup
        damage_effect(60)(player)
        assert player.stats.health == 0
        player.stats.spend_energy(40)
        restore_energy_effect(15).apply(player)
        assert player.stats.energy == 75

    def test_same_shape_different_mutation(self, setup):
        player, _, _, _ = setup
        double = Effect("double", "Double morale.", "You feel bolder.", CharacterStats,
                        lambda s: s.adjust_morale(s.morale))
        halve = Effect("halve", "Halve morale.", "You feel smaller.", CharacterStats,
                       lambda s: s.adjust_morale(-(s.morale // 2)))
        assert double.apply(player) == "You feel bolder."
        assert player.stats.morale == 100
        assert halve.apply(player) == "You feel smaller."
        assert player.stats.morale == 50

    def test_inventory_effects(self, setup):
        player, _, _, _ = setup
        key = Item("Brass Key", weight=0.1)
        assert grant_item_effect(key).apply(player) == "You now carry the Brass Key."
        assert key in player.inventory
        remove_item_effect("brass key").apply(player)
        assert key not in player.inventory

    def test_remove_missing_item_raises(self, setup):
        player, _, _, _ = setup
        with pytest.raises(InvalidArgumentError):
            remove_item_effect("Sword").apply(player)

    def test_place_item_in_room(self, setup):
        player, hall, _, _ = setup
        coin = Item("Coin")
        place_item_effect(coin).apply(player)
        assert hall.items == (coin,)

    def test_unreachable_target(self):
        with pytest.raises(InvalidStateError):
            place_item_effect(Item("Coin")).apply(PlayerCharacter("Nobody"))

    def test_effect_errors_propagate(self, setup):
        player, _, _, _ = setup
        with pytest.raises(InvalidArgumentError):
            grant_item_effect(Item("Anvil", weight=99.0)).apply(player)
