"""A small real-time strategy game engine: subsystems, an entity registry, a tick loop and a pygame renderer."""

__version__ = "0.1.0"