"""Exceptions raised while building a game or applying a move."""

from __future__ import annotations


class OXOError(Exception):
    pass


class GameConfigError(OXOError, ValueError):
    """Raised when a game model is constructed with unusable dimensions."""


class MoveError(OXOError):
    """Base for recoverable move rejections. Nothing is mutated before one is raised."""

    reason = "invalid_move"


class InvalidCellIdentifierError(MoveError):
    """The command does not name a cell on this board."""

    reason = "invalid_cell_identifier"


class MalformedIdentifierError(InvalidCellIdentifierError):
    reason = "malformed_identifier"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Invalid command format: {identifier!r}")


class CellDoesNotExistError(InvalidCellIdentifierError):
    reason = "cell_does_not_exist"

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) does not exist")


class CellAlreadyTakenError(MoveError):
    reason = "cell_already_taken"

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) is already taken")
