"""Exceptions raised by the domain, service and persistence layers."""


class GameError(Exception):
    """Base class: anything that went wrong while handling a match."""


class InvalidCoordinateError(GameError):
    """Row or column outside of the board."""


class CellOccupiedError(GameError):
    """Attempt to place a letter on a cell that already holds one."""


class IllegalMoveError(GameError):
    """Move submitted while the match does not accept moves (game over)."""


class InvalidNotationError(GameError):
    """Board notation string could not be parsed."""


class GameStateError(GameError):
    """A stored match cannot be turned into a consistent match state."""


class InvalidRequestError(GameError):
    """Incoming request failed validation."""


class RepositoryError(GameError):
    """Requested record does not exist."""


class InvalidLetterError(GameError):
    """Only S and O can be placed on the board."""
