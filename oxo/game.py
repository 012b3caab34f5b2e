"""Game logic: move validation, win detection, and turn order."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from oxo.errors import CellAlreadyTakenError, CellDoesNotExistError, MoveError
from oxo.model import GameModel, GameStatus, OwnedBy, Player
from oxo.parser import Coordinate, parse_cell_identifier

logger = logging.getLogger(__name__)

# Forward vector of each line: horizontal, vertical, diagonal ↘, diagonal ↗.
# The backward vector is the negation.
LINES = [
    (0, 1),
    (1, 0),
    (1, 1),
    (-1, 1),
]


@dataclass(frozen=True)
class MoveResult:
    coordinate: Coordinate
    player: Player
    status: GameStatus


class GameEngine:
    def __init__(self, model: GameModel):
        self.model = model
        self.current_player_index: int = 0
        self.occupied_cells: int = 0
        model.current_player = model.get_player_by_number(self.current_player_index)

    @property
    def is_game_over(self) -> bool:
        return self.model.status is not GameStatus.ACTIVE

    def apply(self, identifier: str) -> MoveResult | None:
        """Apply one command for the current player.

        Returns None when the game has already finished; the command is ignored.
        Raises a MoveError subclass, leaving all state untouched, when the
        identifier is malformed, off the board, or names an owned cell.
        """
        if self.is_game_over:
            logger.debug("Ignoring %r: game is over", identifier)
            return None

        try:
            position = parse_cell_identifier(identifier)
            self.validate_move(position.row, position.col)
        except MoveError as exc:
            logger.debug("Rejected %r: %s", identifier, exc)
            raise

        player = self.model.current_player
        self.model.board.set_cell_owner(position.row, position.col, player)
        self.occupied_cells += 1
        logger.debug("Player %s took %s", player, identifier)

        self.update_status(player, position.row, position.col)
        self.next_player()
        return MoveResult(position, player, self.model.status)

    def validate_move(self, row: int, col: int) -> None:
        if not self.model.board.contains(row, col):
            raise CellDoesNotExistError(row, col)
        if self.model.get_cell_owner(row, col) is not None:
            raise CellAlreadyTakenError(row, col)

    def update_status(self, player: Player, row: int, col: int) -> None:
        if self.check_win(player, row, col):
            self.model.set_winner(player)
            logger.info("Player %s wins", player)
        elif self.is_draw():
            self.model.set_game_drawn()
            logger.info("Game drawn after %d moves", self.occupied_cells)

    def check_win(self, player: Player, row: int, col: int) -> bool:
        """Check if the move at (row, col) completes a line of win_threshold cells."""
        for dr, dc in LINES:
            count = 1
            count += self.count_in_direction(player, row, col, dr, dc)
            count += self.count_in_direction(player, row, col, -dr, -dc)
            if count >= self.model.win_threshold:
                return True
        return False

    def count_in_direction(self, player: Player, row: int, col: int, dr: int, dc: int) -> int:
        """Consecutive cells owned by player stepping from (row, col), excluding the start."""
        board = self.model.board
        owned = OwnedBy(player.number)
        count = 0
        r, c = row + dr, col + dc
        while board.contains(r, c) and board.get_cell_owner(r, c) == owned:
            count += 1
            r, c = r + dr, c + dc
        return count

    def is_draw(self) -> bool:
        return self.occupied_cells >= self.model.rows * self.model.cols

    def next_player(self) -> None:
        self.current_player_index = (self.current_player_index + 1) % self.model.number_of_players
        self.model.current_player = self.model.get_player_by_number(self.current_player_index)
