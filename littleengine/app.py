"""The application that owns the window and drives a game."""

from __future__ import annotations

from littleengine.device import Device
from littleengine.game import Game
from littleengine.log import log_info
from littleengine.timing import Time
from littleengine.window import Window

_WIDTH = 800
_HEIGHT = 600
_TITLE = "App"


class App:
    """Creates the window and device, then runs the game loop."""

    def __init__(self) -> None:
        self._window: Window | None = None
        self._game: Game | None = None

    def init(self, game: Game) -> None:
        """Open the window, bring up the device and initialise ``game``."""
        self._window = Window(_WIDTH, _HEIGHT, _TITLE)
        Device().init()
        self._game = game
        game.init()

    def _require(self) -> tuple[Window, Game]:
        if self._window is None or self._game is None:
            raise RuntimeError("App.init() must be called first")
        return self._window, self._game

    def run(self) -> None:
        """Update the game every frame until the window asks to quit."""
        window, game = self._require()
        timer = Time.instance()
        timer.start()
        log_info("App", "Start running.")
        while window.process_messages():
            timer.tick()
            game.update(timer.delta_time)

    def shutdown(self) -> None:
        """Shut the game down and close the window."""
        window, game = self._require()
        game.shutdown()
        window.close()