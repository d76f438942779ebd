import pytest

from fighterlite.collision import UnknownCollisionError, process_collision
from fighterlite.objects import Bandit, Rock
from fighterlite.player import Player
from fighterlite.player_states import CollideWithObjectState, Input, StandingState
from fighterlite.sprite import Texture, Vec2


def _player():
    return Player(Vec2(0.0, 0.0), "davis_ani", 300.0, texture=Texture("davis", 80, 80))


def _rock():
    return Rock(Vec2(0.0, 0.0), "r", texture=Texture("rock", 80, 80))


def test_player_rock_enters_collide_state():
    player = _player()
    rock = _rock()
    process_collision(player, rock)
    assert isinstance(player.state, CollideWithObjectState)
    assert player.state.obj is rock
    assert player.state.input is Input.NONE


def test_rock_player_is_symmetric():
    player = _player()
    rock = _rock()
    process_collision(rock, player)
    assert isinstance(player.state, CollideWithObjectState)
    assert player.state.obj is rock


def test_unknown_pair_raises():
    rock = _rock()
    other = _rock()
    with pytest.raises(UnknownCollisionError) as info:
        process_collision(rock, other)
    assert info.value.first is rock
    assert info.value.second is other


def test_unknown_pair_leaves_player_state():
    player = _player()
    bandit = Bandit(Vec2(0.0, 0.0))
    with pytest.raises(UnknownCollisionError):
        process_collision(player, bandit)
    assert isinstance(player.state, StandingState)