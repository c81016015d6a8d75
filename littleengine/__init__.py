"""A small game engine core: frame clock, logging, game interface, window, device and app loop."""

__version__ = "0.1.0"
__all__ = ["app", "device", "game", "log", "timing", "window"]