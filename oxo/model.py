"""Board, players, and game status: the state the engine reads and mutates."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass, field
from typing import Union

from oxo.errors import GameConfigError

# Letters handed out to players in index order
PLAYER_LETTERS = "XO" + "".join(c for c in string.ascii_uppercase if c not in "XO")
MAX_PLAYERS = len(PLAYER_LETTERS)


class _Unowned(enum.Enum):
    UNOWNED = "unowned"

    def __repr__(self) -> str:
        return "UNOWNED"


UNOWNED = _Unowned.UNOWNED


@dataclass(frozen=True)
class OwnedBy:
    player: int  # player index


CellState = Union[_Unowned, OwnedBy]


@dataclass(frozen=True)
class Player:
    number: int
    letter: str

    def __str__(self) -> str:
        return self.letter


class GameStatus(str, enum.Enum):
    ACTIVE = "active"
    WON = "won"
    DRAWN = "drawn"


@dataclass
class Board:
    rows: int
    cols: int
    cells: list[list[CellState]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise GameConfigError(f"Board must be at least 1x1, got {self.rows}x{self.cols}")
        if not self.cells:
            self.cells = [[UNOWNED] * self.cols for _ in range(self.rows)]

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell_owner(self, row: int, col: int) -> CellState:
        return self.cells[row][col]

    def set_cell_owner(self, row: int, col: int, player: Player) -> None:
        self.cells[row][col] = OwnedBy(player.number)


class GameModel:
    """Players, board and status of one game.

    The winner and the drawn flag are each set once; after either, the status is
    terminal and stays that way.
    """

    def __init__(self, rows: int = 3, cols: int = 3, players: int = 2, win_threshold: int = 3):
        if players < 1 or players > MAX_PLAYERS:
            raise GameConfigError(f"Number of players must be between 1 and {MAX_PLAYERS}, got {players}")
        if win_threshold < 1:
            raise GameConfigError(f"Win threshold must be positive, got {win_threshold}")

        self.board = Board(rows, cols)
        self.players: list[Player] = [Player(i, PLAYER_LETTERS[i]) for i in range(players)]
        self.win_threshold = win_threshold
        self.current_player: Player = self.players[0]
        self._winner: Player | None = None
        self._drawn = False

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    @property
    def number_of_players(self) -> int:
        return len(self.players)

    def get_player_by_number(self, number: int) -> Player:
        return self.players[number]

    def get_cell_owner(self, row: int, col: int) -> Player | None:
        """Owning player of a cell, or None when unowned."""
        cell = self.board.get_cell_owner(row, col)
        if cell is UNOWNED:
            return None
        return self.players[cell.player]

    @property
    def winner(self) -> Player | None:
        return self._winner

    def set_winner(self, player: Player) -> None:
        if self.status is not GameStatus.ACTIVE:
            raise RuntimeError("Game has already finished")
        self._winner = player

    @property
    def is_game_drawn(self) -> bool:
        return self._drawn

    def set_game_drawn(self) -> None:
        if self.status is not GameStatus.ACTIVE:
            raise RuntimeError("Game has already finished")
        self._drawn = True

    @property
    def status(self) -> GameStatus:
        if self._winner is not None:
            return GameStatus.WON
        if self._drawn:
            return GameStatus.DRAWN
        return GameStatus.ACTIVE

    def to_grid(self) -> list[list[str | None]]:
        """Board as rows of player letters, None for unowned cells."""
        return [
            [None if cell is UNOWNED else self.players[cell.player].letter for cell in line]
            for line in self.board.cells
        ]
