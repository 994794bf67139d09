import logging

import pytest

import config
from game.bootstrap import create_demo_world
from text_engine.core.actions import held_item_action, room_item_action
from text_engine.core.errors import InvalidStateError
from text_engine.effects import heal_effect


@pytest.fixture()
def game():
    return create_demo_world("Tester")


def test_demo_world_is_valid(game):
    world, player = game
    assert world.validate() == []
    assert player.location.name == "Hall"
    assert world.reachable_from("Hall") == set(world.rooms)


def test_demo_turn(game):
    """Un turno completo: movimento, raccolta, azione, effetto."""
    world, player = game
    hall = world.require_room("Hall")
    kitchen = world.require_room("Kitchen")
    oak = next(d for d in hall.doors if d.name == "oak door")
    player.move_through(oak)
    assert player.location == kitchen

    bandage = room_item_action("Bandage").apply(player)
    player.pick_up("Bandage")
    assert held_item_action("Bandage").apply(player) is bandage

    player.stats.damage(30)
    assert heal_effect(10).apply(player) == "You recover 10 health."
    assert player.stats.health == player.stats.max_health - 20


def test_examine_start_room(game):
    world, _ = game
    lines = world.require_room("Hall").examine()
    assert lines[0].startswith("Lantern")
    assert any("oak door" in l for l in lines)
    assert any("glass door" in l for l in lines)


def test_strict_world(monkeypatch):
    import game.bootstrap as bootstrap
    monkeypatch.setenv("TE_STRICT_WORLD", "1")
    monkeypatch.setattr(bootstrap, "_DOORS", bootstrap._DOORS[:2])
    with pytest.raises(InvalidStateError):
        create_demo_world()


def test_lenient_world_logs_warnings(monkeypatch, caplog):
    import game.bootstrap as bootstrap
    monkeypatch.delenv("TE_STRICT_WORLD", raising=False)
    monkeypatch.setattr(bootstrap, "_DOORS", bootstrap._DOORS[:2])
    with caplog.at_level(logging.WARNING, logger="game.bootstrap"):
        create_demo_world()
    assert any("Study" in r.getMessage() for r in caplog.records)


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("TE_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("TE_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING


def test_main_prints_start_room(capsys):
    from game.bootstrap import main
    main()
    out = capsys.readouterr().out
    assert "== Hall ==" in out
    assert "- Lantern" in out
