"""Keyboard input mapping and the player's movement state machine."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Callable

from fighterlite.objects import PickableObject
from fighterlite.sprite import Vec2

if TYPE_CHECKING:
    from fighterlite.player import Player

Clock = Callable[[], float]


class Input(IntEnum):
    """Player commands derived from keyboard events."""

    PRESS_LEFT = 0
    PRESS_RIGHT = 1
    RELEASE_LEFT = 2
    RELEASE_RIGHT = 3
    PRESS_UP = 4
    PRESS_DOWN = 5
    RELEASE_UP = 6
    RELEASE_DOWN = 7
    PRESS_JUMP = 8
    PRESS_ATTACK = 9
    END_ATTACK = 10
    ADD_OBJ = 11
    NONE = 12


@dataclass(frozen=True)
class KeyEvent:
    """A key going down (pressed=True) or up (pressed=False).

    Keys are named in lower case: "left", "right", "up", "down",
    "return", "rshift", "lshift", "escape" and so on.
    """

    pressed: bool
    key: str


_PRESSED_INPUTS = {
    "left": Input.PRESS_LEFT,
    "right": Input.PRESS_RIGHT,
    "return": Input.PRESS_ATTACK,
    "up": Input.PRESS_UP,
    "down": Input.PRESS_DOWN,
    "rshift": Input.PRESS_JUMP,
}

_RELEASED_INPUTS = {
    "left": Input.RELEASE_LEFT,
    "right": Input.RELEASE_RIGHT,
    "down": Input.RELEASE_DOWN,
    "up": Input.RELEASE_UP,
    "return": Input.END_ATTACK,
    "lshift": Input.ADD_OBJ,
}


def input_for_event(event: object) -> Input:
    """Translate an event into a player command; anything else is NONE."""
    if not isinstance(event, KeyEvent):
        return Input.NONE
    table = _PRESSED_INPUTS if event.pressed else _RELEASED_INPUTS
    return table.get(event.key, Input.NONE)


_DIRECTION_PRESSES = frozenset(
    {Input.PRESS_UP, Input.PRESS_DOWN, Input.PRESS_LEFT, Input.PRESS_RIGHT}
)
_DIRECTION_RELEASES = frozenset(
    {Input.RELEASE_LEFT, Input.RELEASE_RIGHT, Input.RELEASE_DOWN, Input.RELEASE_UP}
)


class PlayerState(ABC):
    """One state of the player; it decides which state follows an input."""

    def __init__(self, input: Input = Input.NONE) -> None:
        self.input = input

    @abstractmethod
    def handle_input(self, input: Input) -> PlayerState | None:
        """Return the next state, or None to stay in this one."""

    @abstractmethod
    def enter(self, player: Player) -> None:
        """Prepare the player when this state becomes current."""

    def update(self, player: Player, dt: float) -> None:
        """Advance the state by one frame."""
        return None


class StandingState(PlayerState):
    """The player stands still."""

    def handle_input(self, input: Input) -> PlayerState | None:
        if input in _DIRECTION_PRESSES:
            return WalkingState(input)
        if input is Input.PRESS_JUMP:
            return JumpingState(input)
        return None

    def enter(self, player: Player) -> None:
        player.set_animation_name("standing")
        player.set_direction(self.input)


class WalkingState(PlayerState):
    """The player walks in the direction of the pressed key."""

    def handle_input(self, input: Input) -> PlayerState | None:
        if input in _DIRECTION_RELEASES:
            return StandingState(input)
        return None

    def enter(self, player: Player) -> None:
        player.set_animation_name("walking")
        player.set_direction(self.input)


class JumpPhase(ABC):
    """One part of a jump: rising, hanging in the air or falling."""

    @abstractmethod
    def update(self, player: Player, dt: float) -> JumpPhase | None:
        """Advance the phase; return the phase that follows, if any."""


class FallingPhase(JumpPhase):
    """Moves the player down until the ground is reached."""

    def __init__(self, speed: float, ground_y: float) -> None:
        self.speed = speed
        self.ground_y = ground_y

    def update(self, player: Player, dt: float) -> JumpPhase | None:
        y = min(player.position.y + self.speed * dt, self.ground_y)
        player.position = Vec2(player.position.x, y)
        return None


class HangingPhase(JumpPhase):
    """Keeps the player in the air for a fixed time."""

    FALL_SPEED = 700.0

    def __init__(self, duration: float, ground_y: float, clock: Clock = time.monotonic) -> None:
        self.duration = duration
        self.ground_y = ground_y
        self._clock = clock
        self._start = clock()

    def update(self, player: Player, dt: float) -> JumpPhase | None:
        if self._clock() - self._start >= self.duration:
            return FallingPhase(self.FALL_SPEED, self.ground_y)
        return None


class RisingPhase(JumpPhase):
    """Moves the player up for a fixed time."""

    HANG_DURATION = 0.2

    def __init__(
        self, duration: float, speed: float, ground_y: float, clock: Clock = time.monotonic
    ) -> None:
        self.duration = duration
        self.speed = speed
        self.ground_y = ground_y
        self._clock = clock
        self._start = clock()

    def update(self, player: Player, dt: float) -> JumpPhase | None:
        player.position = Vec2(player.position.x, player.position.y - self.speed * dt)
        if self._clock() - self._start >= self.duration:
            return HangingPhase(self.HANG_DURATION, self.ground_y, self._clock)
        return None


class JumpingState(PlayerState):
    """The player jumps: rises, hangs, falls and then stands again."""

    RISE_DURATION = 0.15
    RISE_SPEED = 650.0

    def __init__(self, input: Input = Input.NONE, clock: Clock = time.monotonic) -> None:
        super().__init__(input)
        self._clock = clock
        self.ground_y = 0.0
        self.phase: JumpPhase | None = None

    def handle_input(self, input: Input) -> PlayerState | None:
        return None

    def enter(self, player: Player) -> None:
        player.set_animation_name("jumping")
        self.ground_y = player.position.y
        self.phase = RisingPhase(self.RISE_DURATION, self.RISE_SPEED, self.ground_y, self._clock)

    def update(self, player: Player, dt: float) -> None:
        if self.phase is None:
            player.set_state(StandingState(Input.NONE))
            return
        following = self.phase.update(player, dt)
        if following is not None:
            self.phase = following
        elif player.position.y >= self.ground_y:
            player.set_state(StandingState(Input.NONE))


class CollideWithObjectState(PlayerState):
    """The player touches a pickable object and may pick it up."""

    def __init__(self, input: Input, obj: PickableObject) -> None:
        super().__init__(input)
        self.obj = obj
        self.pickup_pending = False

    def handle_input(self, input: Input) -> PlayerState | None:
        if input is Input.ADD_OBJ:
            self.pickup_pending = True
            return None
        if input in _DIRECTION_PRESSES:
            return WalkingState(input)
        if input in _DIRECTION_RELEASES:
            return StandingState(input)
        if input is Input.PRESS_JUMP:
            return JumpingState(input)
        return None

    def enter(self, player: Player) -> None:
        return None

    def update(self, player: Player, dt: float) -> None:
        if self.pickup_pending:
            player.pick_up_object(self.obj)
            self.pickup_pending = False