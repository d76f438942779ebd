"""Double-dispatch collision handling between game objects."""

from __future__ import annotations

from typing import Callable

from fighterlite.objects import GameObject, Rock
from fighterlite.player import Player
from fighterlite.player_states import CollideWithObjectState, Input

CollisionHandler = Callable[[GameObject, GameObject], None]


class UnknownCollisionError(Exception):
    """Raised when no handler exists for a pair of object types."""

    def __init__(self, first: GameObject, second: GameObject) -> None:
        super().__init__(
            f"Unknown collision of {type(first).__name__} and {type(second).__name__}"
        )
        self.first = first
        self.second = second


def _player_rock(player: GameObject, rock: GameObject) -> None:
    assert isinstance(player, Player) and isinstance(rock, Rock)
    player.set_state(CollideWithObjectState(Input.NONE, rock))


def _rock_player(rock: GameObject, player: GameObject) -> None:
    _player_rock(player, rock)


_HANDLERS: dict[tuple[type, type], CollisionHandler] = {
    (Player, Rock): _player_rock,
    (Rock, Player): _rock_player,
}


def process_collision(first: GameObject, second: GameObject) -> None:
    """Run the handler registered for the exact types of the two objects."""
    handler = _HANDLERS.get((type(first), type(second)))
    if handler is None:
        raise UnknownCollisionError(first, second)
    handler(first, second)