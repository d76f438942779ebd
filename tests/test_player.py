import pytest

from fighterlite.animation import (
    STANDING,
    WALKING_WITH_ROCK,
    AnimationNotFoundError,
    load_animations,
)
from fighterlite.objects import Rock
from fighterlite.player import AttackBehavior, Player
from fighterlite.player_states import (
    CollideWithObjectState,
    Input,
    JumpingState,
    KeyEvent,
    StandingState,
    WalkingState,
)
from fighterlite.sprite import Texture, Vec2

SHEET = Texture("davis_ani", 800, 800)


@pytest.fixture(autouse=True)
def animations():
    load_animations()


def make_player(pos=Vec2(0.0, 0.0), speed=300.0):
    return Player(pos, "davis_ani", speed, SHEET)


def test_new_player_stands():
    player = make_player()
    assert isinstance(player.state, StandingState)
    assert player.animation_name == "standing"
    assert player.direction == Vec2(0.0, 0.0)
    assert player.is_alive()


def test_default_speed_is_source_default():
    assert Player(Vec2(), "davis_ani", texture=SHEET).speed == 200.0


def test_press_right_walks_right():
    player = make_player()
    player.handle_input(KeyEvent(True, "right"))
    assert isinstance(player.state, WalkingState)
    assert player.direction == Vec2(1.0, 0.0)
    assert player.sprite.scale.x == 1.0


def test_press_then_release_left_stands_still():
    player = make_player()
    player.handle_input(KeyEvent(True, "left"))
    assert player.direction.x == -1.0
    assert player.sprite.scale.x == -1.0
    player.handle_input(KeyEvent(False, "left"))
    assert isinstance(player.state, StandingState)
    assert player.direction == Vec2(0.0, 0.0)


def test_press_jump_enters_jumping():
    player = make_player()
    player.handle_input(KeyEvent(True, "rshift"))
    assert isinstance(player.state, JumpingState)
    assert player.animation_name == "jumping"


@pytest.mark.parametrize(
    "commands, expected",
    [
        ([Input.PRESS_UP], Vec2(0.0, -1.0)),
        ([Input.PRESS_JUMP], Vec2(0.0, -1.0)),
        ([Input.PRESS_DOWN], Vec2(0.0, 1.0)),
        ([Input.PRESS_DOWN, Input.RELEASE_UP], Vec2(0.0, 0.0)),
        ([Input.PRESS_UP, Input.RELEASE_DOWN], Vec2(0.0, 0.0)),
        ([Input.PRESS_RIGHT, Input.NONE], Vec2(0.0, 0.0)),
        ([Input.PRESS_LEFT, Input.RELEASE_RIGHT], Vec2(-1.0, 0.0)),
        ([Input.PRESS_RIGHT, Input.RELEASE_LEFT], Vec2(1.0, 0.0)),
    ],
)
def test_set_direction(commands, expected):
    player = make_player()
    for command in commands:
        player.set_direction(command)
    assert player.direction == expected


def test_move_straight_covers_speed_times_dt():
    player = make_player(speed=300.0)
    player.set_direction(Input.PRESS_RIGHT)
    player.move(0.5)
    assert player.position.x == pytest.approx(300.0 * 0.5)
    assert player.position.y == 0.0


def test_move_diagonal_keeps_speed():
    player = make_player(speed=300.0)
    player.set_direction(Input.PRESS_RIGHT)
    player.set_direction(Input.PRESS_DOWN)
    player.move(1.0)
    assert player.position.length() == pytest.approx(300.0, rel=1e-6)
    assert player.position.x == pytest.approx(player.position.y)


def test_update_loads_named_animation():
    player = make_player()
    player.update(0.0)
    assert player.current_animation_name == "standing"
    assert player.sprite.texture_rect.width == STANDING.width
    assert player.sprite.texture_rect.top == STANDING.y


def test_update_with_unknown_animation_raises():
    player = make_player()
    player.set_animation_name("flying")
    with pytest.raises(AnimationNotFoundError):
        player.update(0.0)


def test_pick_up_object_places_and_carries_rock():
    player = make_player(pos=Vec2(100.0, 200.0))
    rock = Rock(Vec2(0.0, 0.0), "r", Texture("rock", 80, 80))
    player.pick_up_object(rock)
    assert player.held_object is rock
    assert player.strategy_name == "rock"
    assert rock.position == Vec2(100.0, 200.0) + Vec2(20.0, -30.0)
    player.move(0.0)
    assert rock.position == Vec2(100.0, 200.0) + Vec2(20.0, -100.0)


def test_rock_animation_after_pickup():
    player = make_player()
    player.update(0.0)
    rock = Rock(Vec2(0.0, 0.0), "r", Texture("rock", 80, 80))
    player.pick_up_object(rock)
    player.set_animation_name("walking")
    player.update(0.0)
    assert player.sprite.texture_rect.top == WALKING_WITH_ROCK.y


def test_collide_state_picks_up_through_player():
    player = make_player()
    rock = Rock(Vec2(0.0, 0.0), "r", Texture("rock", 80, 80))
    state = CollideWithObjectState(Input.NONE, rock)
    player.set_state(state)
    player.handle_input(KeyEvent(False, "lshift"))
    assert player.state is state
    player.update(0.0)
    assert player.held_object is rock


def test_set_state_enters_state():
    player = make_player()
    player.set_state(WalkingState(Input.PRESS_DOWN))
    assert player.animation_name == "walking"
    assert player.direction == Vec2(0.0, 1.0)


def test_clamp_to_window_keeps_sprite_inside():
    player = make_player(pos=Vec2(-500.0, 5000.0))
    player.update(0.0)
    player.clamp_to_window((800, 600))
    bounds = player.bounds
    assert bounds.left >= 0.0
    assert bounds.top >= 0.0
    assert bounds.left + bounds.width <= 800.0
    assert bounds.top + bounds.height <= 600.0


def test_clamp_leaves_inside_position_alone():
    player = make_player(pos=Vec2(400.0, 300.0))
    player.update(0.0)
    player.clamp_to_window((800, 600))
    assert player.position == Vec2(400.0, 300.0)


def test_attack_behavior_is_abstract():
    with pytest.raises(TypeError):
        AttackBehavior()


def test_set_attack_stores_behavior():
    class Punch(AttackBehavior):
        def attack(self):
            return None

    player = make_player()
    punch = Punch()
    player.set_attack(punch)
    assert player.attack is punch