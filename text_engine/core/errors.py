"""Error taxonomy shared by the world model, actions and effects.

Errors signal programmer-visible misuse (wrong wiring at world-build time,
unknown targets) and are always raised synchronously to the caller.
"""


class GameError(Exception):
    """Base class for every error raised by the engine."""
    pass


class InvalidArgumentError(GameError, ValueError):
    """The caller passed something this object cannot accept."""
    pass


class InvalidStateError(GameError, RuntimeError):
    """An object's own references are inconsistent."""
    pass


__all__ = ["GameError", "InvalidArgumentError", "InvalidStateError"]
