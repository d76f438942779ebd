"""Runs one battle: players, allies and the level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from fighterlite.level import Level
from fighterlite.objects import Ally, GameObject
from fighterlite.player import Player
from fighterlite.sprite import Vec2

_DEFAULT_PLAYER_NAME = "davis_ani"
_DEFAULT_PLAYER_SPEED = 300.0
_DEFAULT_ENEMIES = "b1 h1"


@dataclass
class CharacterSelection:
    """One chosen character and whether a human controls it."""

    character_type: str
    is_human_controlled: bool = True


class Controller:
    """Updates the world each frame and decides when the level ends."""

    def __init__(
        self,
        level: Level,
        players: Iterable[Player] = (),
        allies: Iterable[Ally] = (),
    ) -> None:
        self.level = level
        self.players: list[Player] = list(players)
        self.allies: list[Ally] = list(allies)
        self.players.append(
            Player(Vec2(0.0, 0.0), _DEFAULT_PLAYER_NAME, _DEFAULT_PLAYER_SPEED)
        )
        self.level.add_squad(_DEFAULT_ENEMIES)
        self._level_finished = False
        self._player_won = False

    def handle_input(self, event: object) -> None:
        for player in self.players:
            player.handle_input(event)

    def update_world(self, dt: float) -> None:
        for player in self.players:
            player.update(dt)
        self.level.update(dt)

    def check_level_end_conditions(self) -> None:
        if self.level.are_all_enemies_defeated():
            self._level_finished = True
            self._player_won = True
            return
        anyone_alive = any(p.is_alive() for p in self.players) or any(
            a.is_alive() for a in self.allies
        )
        if not anyone_alive:
            self._level_finished = True
            self._player_won = False

    def visible_objects(self) -> Iterator[GameObject]:
        """Everything to draw: level contents first, then the players."""
        yield from self.level.visible_objects()
        yield from self.players

    def is_level_finished(self) -> bool:
        return self._level_finished

    def did_win(self) -> bool:
        return self._player_won