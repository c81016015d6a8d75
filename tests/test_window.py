import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from littleengine.window import Window


@pytest.fixture
def window():
    win = Window(320, 240, "Test Window")
    yield win
    win.close()


def test_surface_has_requested_size(window):
    assert window.handle.get_size() == (320, 240)


def test_caption_is_title():
    win = Window(160, 120, "Caption Check")
    try:
        assert win.handle.get_size() == (160, 120)
        assert pygame.display.get_caption()[0] == "Caption Check"
    finally:
        win.close()


def test_process_messages_without_quit(window):
    pygame.event.post(pygame.event.Event(pygame.USEREVENT))
    assert window.process_messages() is True


def test_process_messages_stops_on_quit(window):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window.process_messages() is False


def test_close_invalidates_handle():
    win = Window(100, 80, "Closing")
    win.close()
    with pytest.raises(RuntimeError):
        win.handle
    assert win.process_messages() is False


def test_context_manager_closes():
    with Window(64, 48, "Ctx") as win:
        assert win.handle.get_size() == (64, 48)
    assert pygame.display.get_init() is False