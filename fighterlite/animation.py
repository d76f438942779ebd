"""Sprite-sheet animations and the table of named animations."""

from __future__ import annotations

from dataclasses import dataclass, field

from fighterlite.sprite import FloatRect, Sprite, Texture


@dataclass(frozen=True)
class AnimationInfo:
    """Where an animation sits on a sprite sheet and how it plays."""

    x: int
    y: int
    width: int
    height: int
    frame_count: int
    frame_time: float
    loop: bool


WALKING = AnimationInfo(320, 0, 80, 80, 4, 0.2, True)
WALKING_WITH_ROCK = AnimationInfo(320, 160, 80, 80, 4, 0.2, True)
STANDING = AnimationInfo(0, 0, 80, 80, 4, 0.2, True)
STANDING_WITH_ROCK = AnimationInfo(240, 160, 80, 80, 0, 0.2, False)
JUMPING = AnimationInfo(0, 520, 80, 80, 4, 0.2, False)


class AnimationNotFoundError(LookupError):
    """Raised when an animation name is not in the table."""


@dataclass
class Animation:
    """A row of frames played back and forth across a sprite sheet."""

    texture: Texture | None = None
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    frame_count: int = 0
    frame_time: float = 0.0
    loop: bool = True
    elapsed_time: float = field(default=0.0, init=False)
    current_frame: int = field(default=0, init=False)
    finished: bool = field(default=False, init=False)
    direction: int = field(default=1, init=False)

    def update(self, delta_time: float) -> None:
        """Advance the animation by the elapsed time, bouncing at the ends."""
        if self.finished or self.frame_count <= 0 or self.frame_time <= 0:
            return
        self.elapsed_time += delta_time
        while self.elapsed_time >= self.frame_time:
            self.elapsed_time -= self.frame_time
            self.current_frame += self.direction
            if self.current_frame >= self.frame_count:
                self.current_frame = self.frame_count - 2
                self.direction = -1
            elif self.current_frame < 0:
                self.current_frame = 1
                self.direction = 1
            if not self.loop and self.current_frame in (self.frame_count - 1, 0):
                self.finished = True
                break

    def apply_to_sprite(self, sprite: Sprite) -> None:
        """Show the current frame on the sprite."""
        if self.texture is None:
            return
        sprite.set_texture(self.texture)
        sprite.texture_rect = FloatRect(
            self.x + self.current_frame * self.width, self.y, self.width, self.height
        )

    def reset(self) -> None:
        self.current_frame = 0
        self.elapsed_time = 0.0
        self.finished = False


_animations: dict[str, AnimationInfo] = {}


def load_animations() -> None:
    """Fill the table of named animations."""
    _animations.update(
        {
            "walking": WALKING,
            "walkingrock": WALKING_WITH_ROCK,
            "standing": STANDING,
            "standingrock": STANDING_WITH_ROCK,
            "jumping": JUMPING,
        }
    )


def get_animation(name: str, texture: Texture | None) -> Animation:
    """Build a fresh animation from the named table entry."""
    try:
        info = _animations[name]
    except KeyError:
        raise AnimationNotFoundError(f"Animation not found: {name}") from None
    return Animation(
        texture,
        info.x,
        info.y,
        info.width,
        info.height,
        info.frame_count,
        info.frame_time,
        info.loop,
    )