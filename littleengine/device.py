"""The rendering device."""

from __future__ import annotations

import pygame

from littleengine.log import log_error, log_info

_TAG = "Render Device"


class Device:
    """Brings up the graphics back end used for rendering."""

    def init(self) -> bool:
        """Initialise the display back end; return whether it succeeded."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            log_error(_TAG, "Display initialisation failed: {}", exc)
            return False
        log_info(_TAG, "Display initialisation succeeded: {}", pygame.display.get_driver())
        return True