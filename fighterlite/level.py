"""A level: background, squads of enemies per phase and pickable objects."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Iterator

from fighterlite.collision import process_collision
from fighterlite.factory import Factory
from fighterlite.objects import (
    ENEMY_FACTORY,
    PICKABLE_FACTORY,
    Enemy,
    GameObject,
    PickableObject,
    Squad,
)
from fighterlite.player import Player
from fighterlite.sprite import Vec2

_SQUAD_SPACING = Vec2(25.0, 50.0)
_PICKABLE_SPAWN = Vec2(250.0, 500.0)
# Enemies chase this point until the real player position is passed in.
_DEMO_TARGET = Vec2(125.0, 125.0)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Phase(IntEnum):
    PHASE1 = 0
    PHASE2 = 1
    PHASE3 = 2


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid enemy count: {text!r}")
    return int(match.group(1))


class Level:
    """Holds the enemies and objects of one stage."""

    def __init__(
        self,
        background: str,
        screen_size: Vec2,
        *,
        enemy_factory: Factory[Enemy] = ENEMY_FACTORY,
        pickable_factory: Factory[PickableObject] = PICKABLE_FACTORY,
    ) -> None:
        self.background = background
        self.screen_size = screen_size
        self.phase = Phase.PHASE1
        self.squads: list[Squad] = []
        self.pickables: list[PickableObject] = []
        self._enemy_factory = enemy_factory
        self._pickable_factory = pickable_factory

    def add_squad(self, squad_line: str) -> None:
        """Add a squad from tokens like "b3": enemy letter then count."""
        squad = Squad()
        for token in squad_line.split():
            kind = token[0].lower()
            count = _leading_int(token[1:])
            for i in range(count):
                enemy = self._enemy_factory.create(kind, _SQUAD_SPACING * float(i))
                if enemy is not None:
                    squad.add_enemy(enemy)
        self.squads.append(squad)

    def add_pickable_objects(self, object_line: str) -> None:
        """Add one pickable object per token, keyed by its first letter."""
        for token in object_line.split():
            obj = self._pickable_factory.create(token[0].lower(), _PICKABLE_SPAWN)
            if obj is not None:
                self.pickables.append(obj)

    def _current_squad(self) -> Squad | None:
        index = int(self.phase)
        return self.squads[index] if index < len(self.squads) else None

    def update(self, dt: float) -> None:
        squad = self._current_squad()
        if squad is not None:
            squad.update(_DEMO_TARGET)
        for obj in self.pickables:
            obj.update(dt)

    def are_all_enemies_defeated(self) -> bool:
        return False

    def handle_collisions_with_player(self, player: Player) -> None:
        for obj in self.pickables:
            if player.collide(obj):
                process_collision(player, obj)

    def visible_objects(self) -> Iterator[GameObject]:
        """Enemies of the current phase, then the pickable objects."""
        squad = self._current_squad()
        if squad is not None:
            yield from squad
        yield from self.pickables