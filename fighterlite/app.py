"""The game's main loop and command entry point."""

from __future__ import annotations

import argparse
from typing import Callable

import pygame

from fighterlite import screens
from fighterlite.screens import Screen, WelcomeScreen

WINDOW_SIZE = (1000, 800)
WINDOW_TITLE = "Little Fighter 2"

ScreenFactory = Callable[[pygame.Surface, "GameManager"], Screen]


class GameManager:
    """Owns the window, feeds events to the current screen and swaps screens."""

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        initial_screen: ScreenFactory | None = None,
        load_image: screens.ImageLoader | None = None,
    ) -> None:
        self._owns_window = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
        self.surface = surface
        self.load_image = load_image or screens.load_image
        self.running = True
        self.next_state: Screen | None = None
        if initial_screen is None:
            self.current_state: Screen = WelcomeScreen(surface, self, self.load_image)
        else:
            self.current_state = initial_screen(surface, self)

    def switch_state(self, next_state: Screen) -> None:
        """Queue the next screen and drop events meant for the old one."""
        self.next_state = next_state
        if pygame.display.get_init():
            pygame.event.clear()

    def process_event(self, event: pygame.event.Event) -> None:
        """Handle one window event, closing on quit or a released Escape."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
            self.running = False
        self.current_state.handle_event(event)
        if self.next_state is not None:
            self.current_state = self.next_state
            self.next_state = None

    def _frame(self, dt: float) -> None:
        self.current_state.update(dt)
        self.surface.fill((0, 0, 0))
        self.current_state.render()

    def run(self) -> None:
        """Run until the window is closed."""
        clock = pygame.time.Clock()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.process_event(event)
                dt = clock.tick() / 1000.0
                self._frame(dt)
                pygame.display.flip()
        finally:
            if self._owns_window:
                pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fighterlite", description="A side-scrolling brawler.")
    parser.parse_args(argv)
    GameManager().run()
    return 0