"""An operating-system window backed by pygame's display."""

from __future__ import annotations

import pygame


class Window:
    """A visible window that pumps its own event queue."""

    def __init__(self, width: int, height: int, title: str) -> None:
        self.width = width
        self.height = height
        self.title = title
        pygame.display.init()
        self._surface: pygame.Surface | None = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

    @property
    def handle(self) -> pygame.Surface:
        """The display surface backing this window."""
        if self._surface is None:
            raise RuntimeError("window has been closed")
        return self._surface

    def process_messages(self) -> bool:
        """Drain pending events; return False once a quit was requested."""
        if self._surface is None:
            return False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
        return True

    def close(self) -> None:
        """Destroy the window. Safe to call more than once."""
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()