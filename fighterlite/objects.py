"""Game objects: pickables, weapons, computer players, enemies and squads."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Callable, Iterator

from fighterlite.animation import Animation
from fighterlite.factory import Factory
from fighterlite.sprite import FloatRect, Sprite, Texture, Vec2

FRAME_ORIGIN = Vec2(40.0, 40.0)


class GameObject(ABC):
    """Anything with a sprite and an animation in the game world."""

    texture_loader: Callable[[str], Texture] = Texture

    def __init__(self, pos: Vec2, name: str, texture: Texture | None = None) -> None:
        self.name = name
        self._texture = texture if texture is not None else type(self).texture_loader(name)
        self.sprite = Sprite(origin=FRAME_ORIGIN, position=pos)
        self.sprite.set_texture(self._texture)
        self.animation = Animation()
        self.collisions = 0

    def handle_collision(self) -> None:
        """React to a collision by counting it."""
        self.collisions += 1

    @property
    def texture(self) -> Texture:
        return self._texture

    @property
    def position(self) -> Vec2:
        return self.sprite.position

    @position.setter
    def position(self, pos: Vec2) -> None:
        self.sprite.position = pos

    @property
    def bounds(self) -> FloatRect:
        return self.sprite.global_bounds()

    def set_animation(self, animation: Animation) -> None:
        """Take a copy of the animation and start it from its first frame."""
        self.animation = copy.copy(animation)
        self.animation.reset()

    def update(self, dt: float) -> None:
        self.animation.apply_to_sprite(self.sprite)

    def collide(self, other: GameObject) -> bool:
        return self.bounds.intersects(other.bounds)

    def update_animation(self, dt: float) -> None:
        self.animation.update(dt)

    def apply_sprite(self) -> None:
        self.animation.apply_to_sprite(self.sprite)

    def move_sprite(self, delta: Vec2) -> None:
        self.sprite.move(delta)

    def set_facing(self, side: int) -> None:
        """Face right with 1 and left with -1."""
        self.sprite.scale = Vec2(float(side), 1.0)


class PickableObject(GameObject):
    """An object a player can pick up and carry."""

    def __init__(self, pos: Vec2, name: str, texture: Texture | None = None) -> None:
        super().__init__(pos, name, texture)
        self.goal_position = Vec2()

    def move(self, goal: Vec2) -> None:
        self.goal_position = goal
        self.position = goal


class PlayableObject(GameObject):
    """A fighter with hit points and energy."""

    def __init__(self, pos: Vec2, name: str, texture: Texture | None = None) -> None:
        super().__init__(pos, name, texture)
        self.hp = 0
        self.energy = 0


class Weapon(PickableObject):
    """A pickable object that can be used to fight."""


class Rock(Weapon):
    """A rock lying on the ground."""


class ComputerPlayer(PlayableObject):
    """A fighter driven by the computer, tracking hits it took."""

    def __init__(self, pos: Vec2, name: str, texture: Texture | None = None) -> None:
        super().__init__(pos, name, texture)
        self.was_hit = False
        self.was_knocked_down = False

    def on_hit(self) -> None:
        self.was_hit = True

    def on_knocked_down(self) -> None:
        self.was_knocked_down = True

    def clear_hit_flags(self) -> None:
        self.was_hit = False
        self.was_knocked_down = False


class Ally(ComputerPlayer):
    """A computer-driven fighter on the player's side."""

    def __init__(self, pos: Vec2, name: str, texture: Texture | None = None) -> None:
        super().__init__(pos, name, texture)
        self.alive = True

    def is_alive(self) -> bool:
        return self.alive


class Enemy(ComputerPlayer):
    """A computer-driven opponent that reacts to the player's position."""

    @abstractmethod
    def update_towards(self, player_pos: Vec2) -> None:
        """Act for one frame given where the player is."""


class Bandit(Enemy):
    """An enemy that walks straight at the player until in attack range."""

    def __init__(self, pos: Vec2, texture: Texture | None = None) -> None:
        super().__init__(pos, "bandit", texture)
        self.direction = Vec2()
        self.attack_range = 60.0
        self.speed = 2.5

    def update_towards(self, player_pos: Vec2) -> None:
        self.move(player_pos)

    def move(self, player_pos: Vec2) -> None:
        self.direction = player_pos - self.position
        distance = self.direction.length()
        if distance > self.attack_range:
            self.move_sprite(self.direction / distance * self.speed)


class Hunter(Enemy):
    """An enemy that stands its ground."""

    def __init__(self, pos: Vec2, texture: Texture | None = None) -> None:
        super().__init__(pos, "hunter", texture)

    def update_towards(self, player_pos: Vec2) -> None:
        return None


class Squad:
    """A group of enemies that fight together in one level phase."""

    def __init__(self) -> None:
        self._members: list[Enemy] = []

    def add_enemy(self, enemy: Enemy) -> None:
        self._members.append(enemy)

    def update(self, player_pos: Vec2) -> None:
        for enemy in self._members:
            enemy.update_towards(player_pos)

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)


ENEMY_FACTORY: Factory[Enemy] = Factory()
PICKABLE_FACTORY: Factory[PickableObject] = Factory()

ENEMY_FACTORY.register("b", lambda pos, name: Bandit(pos))
ENEMY_FACTORY.register("H", lambda pos, name: Hunter(pos))
PICKABLE_FACTORY.register("r", lambda pos, name: Rock(pos, name))