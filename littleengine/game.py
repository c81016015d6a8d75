"""The interface a game implements to be driven by the engine."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Game(ABC):
    """Lifecycle hooks called by :class:`littleengine.app.App`."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the game before the loop starts."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the game by ``delta_time`` seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the current frame."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release resources after the loop ends."""