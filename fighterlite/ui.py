"""Drawing helpers: full-screen backgrounds, clickable buttons and sprites."""

from __future__ import annotations

from typing import Callable, ClassVar

import pygame

from fighterlite.objects import GameObject
from fighterlite.sprite import FloatRect, Vec2

TRANSPARENT = pygame.Color(0, 0, 0, 0)
OUTLINE_COLOR = pygame.Color(0, 0, 0)
TEXT_COLOR = pygame.Color(255, 255, 255)
OUTLINE_THICKNESS = 2


class Background:
    """Covers the whole screen with a stretched image or a plain colour."""

    def __init__(self, screen_size, source) -> None:
        width, height = screen_size
        self.screen_size = (int(round(width)), int(round(height)))
        self._image: pygame.Surface | None = None
        self._color: pygame.Color | None = None
        if isinstance(source, pygame.Surface):
            image_w, image_h = source.get_size()
            if image_w == 0 or image_h == 0:
                raise ValueError("background image has no size")
            self.scale = (width / image_w, height / image_h)
            self._image = pygame.transform.scale(source, self.screen_size)
        else:
            self._color = pygame.Color(source)
            self.scale = (1.0, 1.0)

    @property
    def uses_image(self) -> bool:
        return self._image is not None

    def draw(self, surface: pygame.Surface) -> None:
        if self._image is not None:
            surface.blit(self._image, (0, 0))
        else:
            surface.fill(self._color, pygame.Rect((0, 0), self.screen_size))


class Button:
    """A labelled rectangle with an outline that reports clicks."""

    _fonts: ClassVar[dict[tuple[str | None, int], pygame.font.Font]] = {}

    def __init__(
        self,
        label: str,
        size,
        position,
        color,
        char_size: int,
        font_path: str | None = None,
    ) -> None:
        self._font = self._load_font(font_path, char_size)
        self.label = label
        self.size = Vec2(*size)
        self.position = Vec2(*position)
        self.color = pygame.Color(color)
        self.text_color = pygame.Color(TEXT_COLOR)
        self._render_text()

    @classmethod
    def _load_font(cls, font_path: str | None, char_size: int) -> pygame.font.Font:
        key = (font_path, char_size)
        font = cls._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(font_path, char_size)
            except (OSError, pygame.error) as exc:
                raise RuntimeError("Font failed to load!") from exc
            cls._fonts[key] = font
        return font

    def _render_text(self) -> None:
        self._text = self._font.render(self.label, True, self.text_color)

    @property
    def bounds(self) -> FloatRect:
        """The clickable area, outline included."""
        t = OUTLINE_THICKNESS
        return FloatRect(
            self.position.x - t,
            self.position.y - t,
            self.size.x + 2 * t,
            self.size.y + 2 * t,
        )

    @property
    def text_center(self) -> Vec2:
        return self.position + self.size / 2.0

    def draw(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(
            round(self.position.x), round(self.position.y), round(self.size.x), round(self.size.y)
        )
        if self.color.a == 255:
            pygame.draw.rect(surface, self.color, rect)
        elif self.color.a > 0:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(self.color)
            surface.blit(overlay, rect.topleft)
        t = OUTLINE_THICKNESS
        pygame.draw.rect(surface, OUTLINE_COLOR, rect.inflate(2 * t, 2 * t), t)
        center = self.text_center
        surface.blit(self._text, self._text.get_rect(center=(round(center.x), round(center.y))))

    def is_clicked(self, mouse_pos) -> bool:
        return self.bounds.contains(mouse_pos)

    def set_color(self, color) -> None:
        self.color = pygame.Color(color)

    def set_text_color(self, color) -> None:
        self.text_color = pygame.Color(color)
        self._render_text()

    def has_valid_font(self) -> bool:
        return self._font is not None

    def set_position(self, position) -> None:
        self.position = Vec2(*position)


class SpriteRenderer:
    """Draws game objects using images looked up by texture name."""

    def __init__(self, load_texture: Callable[[str], pygame.Surface]) -> None:
        self._load_texture = load_texture
        self._images: dict[str, pygame.Surface] = {}

    def image(self, name: str) -> pygame.Surface:
        """The image for a texture name, loaded once."""
        image = self._images.get(name)
        if image is None:
            image = self._load_texture(name)
            self._images[name] = image
        return image

    def draw(self, surface: pygame.Surface, obj: GameObject) -> None:
        sprite = obj.sprite
        if sprite.texture is None:
            return
        rect = sprite.texture_rect
        if rect.width == 0 or rect.height == 0:
            return
        image = self.image(sprite.texture.name)
        area = pygame.Rect(
            int(rect.left), int(rect.top), int(abs(rect.width)), int(abs(rect.height))
        ).clip(image.get_rect())
        if area.width == 0 or area.height == 0:
            return
        scale_x, scale_y = sprite.scale
        if scale_x == 0 or scale_y == 0:
            return
        frame = image.subsurface(area)
        size = (
            max(1, round(area.width * abs(scale_x))),
            max(1, round(area.height * abs(scale_y))),
        )
        if size != area.size:
            frame = pygame.transform.scale(frame, size)
        if scale_x < 0 or scale_y < 0:
            frame = pygame.transform.flip(frame, scale_x < 0, scale_y < 0)
        bounds = sprite.global_bounds()
        surface.blit(frame, (round(bounds.left), round(bounds.top)))