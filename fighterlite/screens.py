"""The game's screens: welcome, menu, loading, character select and battle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Protocol

import pygame

from fighterlite.animation import load_animations
from fighterlite.controller import Controller
from fighterlite.level import Level
from fighterlite.player import Player
from fighterlite.player_states import KeyEvent
from fighterlite.sprite import Vec2
from fighterlite.ui import TRANSPARENT, Background, Button, SpriteRenderer

BACKGROUND_DIR = "resources/state_backgrounds"
RESOURCE_DIR = "resources"
BUTTON_CHAR_SIZE = 30

ImageLoader = Callable[[str], pygame.Surface]


class ScreenManager(Protocol):
    def switch_state(self, next_state: Screen) -> None: ...


def load_image(path: str) -> pygame.Surface:
    """Load an image file from disk."""
    return pygame.image.load(path)


_KEY_NAMES = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_RETURN: "return",
    pygame.K_RSHIFT: "rshift",
    pygame.K_LSHIFT: "lshift",
    pygame.K_ESCAPE: "escape",
}


def _key_event(event: pygame.event.Event) -> KeyEvent:
    return KeyEvent(event.type == pygame.KEYDOWN, _KEY_NAMES.get(event.key, ""))


class Screen(ABC):
    """One screen of the game, owning what it shows and how it reacts."""

    def __init__(
        self, surface: pygame.Surface, manager: ScreenManager, load_image: ImageLoader = load_image
    ) -> None:
        self.surface = surface
        self.manager = manager
        self.load_image = load_image

    @property
    def size(self) -> Vec2:
        width, height = self.surface.get_size()
        return Vec2(float(width), float(height))

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the screen by dt seconds."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""

    @abstractmethod
    def render(self) -> None:
        """Draw the screen onto its surface."""


class _ButtonScreen(Screen):
    """A background picture with one button leading to the next screen."""

    background_file: ClassVar[str]
    label: ClassVar[str]
    error_name: ClassVar[str]

    def __init__(
        self, surface: pygame.Surface, manager: ScreenManager, load_image: ImageLoader = load_image
    ) -> None:
        super().__init__(surface, manager, load_image)
        try:
            image = load_image(f"{BACKGROUND_DIR}/{self.background_file}")
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"From {self.error_name} - bg image not found") from exc
        size = self.size
        self.background = Background(size, image)
        self.start_button = Button(self.label, size / 4.0, size / 2.0, TRANSPARENT, BUTTON_CHAR_SIZE)

    @abstractmethod
    def _next_screen(self) -> Screen:
        """Build the screen the button leads to."""

    def update(self, dt: float) -> None:
        return None

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return
        if self.start_button.is_clicked(Vec2(*event.pos)):
            self.manager.switch_state(self._next_screen())

    def render(self) -> None:
        self.background.draw(self.surface)
        self.start_button.draw(self.surface)


class WelcomeScreen(_ButtonScreen):
    """The first screen shown."""

    background_file = "bg_welcome_state.png"
    label = "to menu state"
    error_name = "WelcomeState"

    def _next_screen(self) -> Screen:
        return MenuScreen(self.surface, self.manager, self.load_image)


class MenuScreen(_ButtonScreen):
    """The main menu."""

    background_file = "bg_win_state.png"
    label = "TO LOADING STATE"
    error_name = "MenuState"

    def _next_screen(self) -> Screen:
        return LoadingScreen(self.surface, self.manager, self.load_image)


class LoadingScreen(_ButtonScreen):
    """Shown while the game gets ready."""

    background_file = "bg_loading_1.png"
    label = "to char select state"
    error_name = "LoadingState"

    def _next_screen(self) -> Screen:
        return CharacterSelectScreen(self.surface, self.manager, self.load_image)


class CharacterSelectScreen(_ButtonScreen):
    """Where the fighters are chosen before the battle."""

    background_file = "bg_cc.png"
    label = "Start Game"
    error_name = "CharcterSelectState"

    def _next_screen(self) -> Screen:
        return InGameScreen(self.surface, self.manager, self.load_image)


class InGameScreen(Screen):
    """The battle itself."""

    LEVEL_BACKGROUND = "lvl1bg"
    PLAYER_NAME = "davis_ani"
    PLAYER_START = Vec2(50.0, 600.0)
    PLAYER_SPEED = 300.0
    PICKABLES = "r"

    def __init__(
        self,
        surface: pygame.Surface,
        manager: ScreenManager,
        load_image: ImageLoader = load_image,
        renderer: SpriteRenderer | None = None,
    ) -> None:
        super().__init__(surface, manager, load_image)
        size = self.size
        self.renderer = renderer or SpriteRenderer(
            lambda name: self.load_image(f"{RESOURCE_DIR}/{name}.png")
        )
        self.level = Level(self.LEVEL_BACKGROUND, size)
        self.player = Player(self.PLAYER_START, self.PLAYER_NAME, self.PLAYER_SPEED)
        self.controller = Controller(Level(self.LEVEL_BACKGROUND, size))
        load_animations()
        self.level.add_pickable_objects(self.PICKABLES)
        self.background = Background(size, self.renderer.image(self.controller.level.background))

    def update(self, dt: float) -> None:
        self.level.update(dt)
        self.level.handle_collisions_with_player(self.player)
        self.controller.update_world(dt)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            self.controller.handle_input(_key_event(event))

    def render(self) -> None:
        self.background.draw(self.surface)
        for obj in self.controller.visible_objects():
            self.renderer.draw(self.surface, obj)