"""The human-controlled fighter."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fighterlite.animation import get_animation
from fighterlite.objects import PickableObject, PlayableObject
from fighterlite.player_states import Input, PlayerState, StandingState, input_for_event
from fighterlite.sprite import Texture, Vec2

_INV_SQRT2 = 0.70710678118
_HELD_OFFSET = Vec2(20.0, -100.0)
_PICKUP_OFFSET = Vec2(20.0, -30.0)


class AttackBehavior(ABC):
    """A way of attacking."""

    @abstractmethod
    def attack(self) -> None:
        """Carry out the attack."""


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


class Player(PlayableObject):
    """A fighter moved by the keyboard through a state machine."""

    def __init__(
        self, pos: Vec2, name: str, speed: float = 200.0, texture: Texture | None = None
    ) -> None:
        super().__init__(pos, name, texture)
        self.speed = speed
        self.alive = True
        self.direction = Vec2(0.0, 0.0)
        self.attack: AttackBehavior | None = None
        self.held_object: PickableObject | None = None
        self.animation_name = ""
        self.strategy_name = ""
        self.current_animation_name = ""
        self.state: PlayerState = StandingState(Input.RELEASE_RIGHT)
        self.state.enter(self)

    def handle_input(self, event: object) -> None:
        """Feed an event to the current state and switch if it asks to."""
        following = self.state.handle_input(input_for_event(event))
        if following is not None:
            self.set_state(following)

    def update(self, dt: float) -> None:
        if self.current_animation_name != self.animation_name:
            self.set_animation(get_animation(self.animation_name + self.strategy_name, self.texture))
            self.current_animation_name = self.animation_name
        self.move(dt)
        self.state.update(self, dt)
        self.update_animation(dt)
        self.apply_sprite()

    def move(self, dt: float) -> None:
        """Move by direction * speed * dt, slowing diagonals to the same speed."""
        velocity = self.direction
        if velocity.x != 0.0 and velocity.y != 0.0:
            velocity = velocity * _INV_SQRT2
        self.move_sprite(velocity * (self.speed * dt))
        if self.held_object is not None:
            self.held_object.move(self.position + _HELD_OFFSET)

    def set_direction(self, input: Input) -> None:
        x, y = self.direction
        if input is Input.PRESS_LEFT:
            x = -1.0
            self.set_facing(-1)
        elif input is Input.PRESS_RIGHT:
            x = 1.0
            self.set_facing(1)
        elif input is Input.RELEASE_LEFT:
            if x < 0.0:
                x = 0.0
        elif input in (Input.NONE, Input.RELEASE_RIGHT):
            if x > 0.0:
                x = 0.0
        elif input in (Input.PRESS_JUMP, Input.PRESS_UP):
            y = -1.0
        elif input in (Input.RELEASE_UP, Input.RELEASE_DOWN):
            y = 0.0
        elif input is Input.PRESS_DOWN:
            y = 1.0
        self.direction = Vec2(x, y)

    def handle_collision(self) -> None:
        return None

    def is_alive(self) -> bool:
        return self.alive

    def clamp_to_window(self, window_size: tuple[int, int]) -> None:
        """Keep the whole sprite inside a window of the given size."""
        width, height = window_size
        bounds = self.bounds
        half_w = bounds.width / 2.0
        half_h = bounds.height / 2.0
        self.position = Vec2(
            _clamp(self.position.x, half_w, float(width) - half_w),
            _clamp(self.position.y, half_h, float(height) - half_h),
        )

    def set_state(self, state: PlayerState) -> None:
        self.state = state
        self.state.enter(self)

    def set_attack(self, attack: AttackBehavior) -> None:
        self.attack = attack

    def pick_up_object(self, obj: PickableObject) -> None:
        """Start carrying obj; animations switch to their rock variants."""
        self.held_object = obj
        self.strategy_name = "rock"
        obj.position = self.position + _PICKUP_OFFSET

    def set_animation_name(self, name: str) -> None:
        self.animation_name = name