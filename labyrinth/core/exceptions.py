"""Exceptions raised by the labyrinth core."""


class LabyrinthError(Exception):
    """Base exception for all labyrinth errors."""

    pass


class MazeParseError(LabyrinthError, ValueError):
    """Exception raised when maze text cannot be parsed into a grid."""

    pass


class MazeValidationError(LabyrinthError, ValueError):
    """Exception raised when a parsed grid cannot form a maze."""

    pass


class BlockedMoveError(LabyrinthError, RuntimeError):
    """Exception raised when a crawler walks into a tile it cannot enter."""

    pass
