import pytest

from fighterlite.factory import Factory
from fighterlite.level import Level, Phase
from fighterlite.objects import Bandit, Rock
from fighterlite.player import Player
from fighterlite.player_states import CollideWithObjectState, Input
from fighterlite.sprite import Texture, Vec2


def _level(**kwargs):
    return Level("lvl1bg", Vec2(1000.0, 800.0), **kwargs)


def _sized_rock_factory():
    factory = Factory()
    factory.register("r", lambda pos, name: Rock(pos, name, texture=Texture("rock", 80, 80)))
    return factory


def test_squad_line_creates_bandits_only_for_registered_letters():
    level = _level()
    level.add_squad("b1 h1")
    assert len(level.squads) == 1
    members = list(level.squads[0])
    assert len(members) == 1
    assert isinstance(members[0], Bandit)


def test_squad_positions_are_spaced():
    level = _level()
    level.add_squad("b2")
    positions = [enemy.position for enemy in level.squads[0]]
    assert positions == [Vec2(0.0, 0.0), Vec2(25.0, 50.0)]


def test_invalid_count_raises():
    level = _level()
    with pytest.raises(ValueError):
        level.add_squad("bx")


def test_empty_squad_line_adds_empty_squad():
    level = _level()
    level.add_squad("")
    assert len(level.squads) == 1
    assert len(level.squads[0]) == 0


def test_pickables_spawn_at_fixed_point():
    level = _level()
    level.add_pickable_objects("R q")
    assert len(level.pickables) == 1
    assert isinstance(level.pickables[0], Rock)
    assert level.pickables[0].position == Vec2(250.0, 500.0)


def test_visible_objects_show_only_current_phase():
    level = _level()
    level.add_squad("b1")
    level.add_squad("b2")
    level.add_pickable_objects("r")
    visible = list(level.visible_objects())
    assert level.phase is Phase.PHASE1
    assert visible[0] is list(level.squads[0])[0]
    assert visible[-1] is level.pickables[0]
    assert len(visible) == 2


def test_update_moves_enemies_towards_target():
    level = _level()
    level.add_squad("b1")
    bandit = list(level.squads[0])[0]
    before = (Vec2(125.0, 125.0) - bandit.position).length()
    level.update(0.1)
    after = (Vec2(125.0, 125.0) - bandit.position).length()
    assert after < before


def test_enemies_never_reported_defeated():
    level = _level()
    assert level.are_all_enemies_defeated() is False


def test_player_touching_rock_switches_state():
    level = _level(pickable_factory=_sized_rock_factory())
    level.add_pickable_objects("r")
    player = Player(Vec2(250.0, 500.0), "davis_ani", texture=Texture("davis", 80, 80))
    level.handle_collisions_with_player(player)
    assert isinstance(player.state, CollideWithObjectState)
    assert player.state.obj is level.pickables[0]


def test_player_far_from_rock_keeps_state():
    level = _level(pickable_factory=_sized_rock_factory())
    level.add_pickable_objects("r")
    player = Player(Vec2(0.0, 0.0), "davis_ani", texture=Texture("davis", 80, 80))
    before = player.state
    level.handle_collisions_with_player(player)
    assert player.state is before
    assert player.state.input is Input.RELEASE_RIGHT