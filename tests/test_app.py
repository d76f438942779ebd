import pygame
import pytest

from fighterlite.app import GameManager, main
from fighterlite.screens import Screen


class RecordingScreen(Screen):
    def __init__(self, surface, manager):
        super().__init__(surface, manager)
        self.events = []
        self.updates = []

    def update(self, dt):
        self.updates.append(dt)

    def handle_event(self, event):
        self.events.append(event)

    def render(self):
        self.surface.fill((1, 2, 3))


def make_manager():
    return GameManager(pygame.Surface((200, 100)), initial_screen=RecordingScreen)


def test_quit_event_stops_and_is_forwarded():
    manager = make_manager()
    event = pygame.event.Event(pygame.QUIT)
    manager.process_event(event)
    assert manager.running is False
    assert manager.current_state.events == [event]


def test_escape_release_stops():
    manager = make_manager()
    manager.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE))
    assert manager.running is False


def test_other_keys_keep_running():
    manager = make_manager()
    manager.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    manager.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert manager.running is True
    assert len(manager.current_state.events) == 2


def test_switch_state_takes_effect_after_next_event():
    manager = make_manager()
    first = manager.current_state
    second = RecordingScreen(manager.surface, manager)
    manager.switch_state(second)
    assert manager.current_state is first
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)
    manager.process_event(event)
    assert manager.current_state is second
    assert manager.next_state is None
    assert first.events == [event]
    assert second.events == []


def test_frame_updates_and_renders_current_screen():
    manager = make_manager()
    manager._frame(0.5)
    assert manager.current_state.updates == [0.5]
    assert tuple(manager.surface.get_at((0, 0)))[:3] == (1, 2, 3)


def test_default_start_is_welcome_and_click_leads_to_menu():
    paths = []

    def loader(path):
        paths.append(path)
        return pygame.Surface((10, 10))

    surface = pygame.Surface((400, 300))
    manager = GameManager(surface, load_image=loader)
    assert paths == ["resources/state_backgrounds/bg_welcome_state.png"]
    welcome = manager.current_state
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(250, 190))
    manager.process_event(click)
    assert paths == [
        "resources/state_backgrounds/bg_welcome_state.png",
        "resources/state_backgrounds/bg_win_state.png",
    ]
    assert manager.current_state is not welcome
    assert manager.current_state.surface is surface


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0