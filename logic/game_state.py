"""
Game state management for variable-size TicTacToe.
Tracks the board history, the current move, and whose turn it is.
"""

import logging
from typing import Optional, List
from dataclasses import dataclass, field

from .board import Board, BoardShape, Player, check_board, empty_board, place
from .board_size import random_board_shape
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import GameResult, WinChecker

logger = logging.getLogger(__name__)


def _default_shape() -> BoardShape:
    return BoardShape.square(GameConfig.MIN_BOARD_SIZE)


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The board shape
    - Every board snapshot since the start (history[0] is the empty board)
    - Which snapshot is on display (current_move)

    Whose turn it is and the game result are derived from the current
    snapshot and never stored. X moves on even moves, O on odd.
    """

    shape: BoardShape = field(default_factory=_default_shape)
    history: List[Board] = field(default_factory=list)
    current_move: int = 0
    config: GameConfig = field(default_factory=GameConfig, repr=False, compare=False)

    def __post_init__(self):
        if not self.history:
            self.history = [empty_board(self.shape)]

        for board in self.history:
            check_board(board, self.shape)

        if not 0 <= self.current_move < len(self.history):
            raise ValueError(
                f"current_move {self.current_move} outside history of length {len(self.history)}"
            )

        self.win_checker = WinChecker(self.config)
        self.validator = MoveValidator()

    @property
    def current_board(self) -> Board:
        return self.history[self.current_move]

    @property
    def current_player(self) -> Player:
        """Player whose turn it is on the current snapshot."""
        return Player.X if self.current_move % 2 == 0 else Player.O

    @property
    def move_count(self) -> int:
        """Number of moves played in the whole history."""
        return len(self.history) - 1

    @property
    def result(self) -> GameResult:
        """Outcome of the current snapshot."""
        return self.win_checker.evaluate(self.current_board, self.shape)

    @property
    def winner(self) -> Optional[Player]:
        return self.result.winner

    @property
    def is_draw(self) -> bool:
        return self.result.is_draw

    @property
    def is_game_over(self) -> bool:
        return self.result.is_decided

    @property
    def status(self) -> str:
        """Next player, or the winner / draw once decided."""
        return self.win_checker.status_text(self.result, self.current_player)

    def apply_move(self, cell: int) -> bool:
        """
        Place the current player's marker on a cell.

        Playing from an earlier snapshot discards every snapshot after it.

        Args:
            cell: Row-major index of the cell.

        Returns:
            True if the move was played, False if it was rejected (state
            is unchanged).
        """
        validation = self.validator.validate_move(self, cell)
        if not validation.is_valid:
            logger.info("Move rejected: %s", validation.error_message)
            return False

        player = self.current_player
        next_board = place(self.current_board, cell, player)

        self.history = self.history[:self.current_move + 1]
        self.history.append(next_board)
        self.current_move = len(self.history) - 1

        logger.debug("%s took cell %d (move %d)", player.symbol, cell, self.current_move)
        return True

    def jump_to(self, index: int) -> bool:
        """
        Show an earlier (or later) snapshot without touching history.

        Args:
            index: History index, 0 <= index < len(history).

        Returns:
            True if the cursor moved, False if the index is out of range.
        """
        if not 0 <= index < len(self.history):
            logger.info(
                "Jump rejected: move %d outside history 0-%d", index, len(self.history) - 1
            )
            return False

        self.current_move = index
        return True

    def new_game(self, shape: Optional[BoardShape] = None):
        """
        Start over on a single empty board.

        Args:
            shape: Board shape for the new game. Random square if not provided.
        """
        self.shape = shape or random_board_shape(config=self.config)
        self.history = [empty_board(self.shape)]
        self.current_move = 0
        logger.debug("New %s game", self.shape)

    def get_empty_cells(self) -> List[int]:
        """Indices of the empty cells on the current board."""
        return [i for i, cell in enumerate(self.current_board) if cell is None]

    def copy(self) -> "GameState":
        """Create a copy of the game state (snapshots are immutable)."""
        return GameState(
            shape=self.shape,
            history=list(self.history),
            current_move=self.current_move,
            config=self.config
        )

    def format_board(self, show_cell_numbers: bool = False) -> str:
        """
        Draw the current board as text.

        Args:
            show_cell_numbers: Show the index of every empty cell.
        """
        width = len(str(self.shape.cell_count - 1))
        separator = "+" + "+".join(["-" * (width + 2)] * self.shape.columns) + "+"

        lines = [separator]
        for row in range(self.shape.rows):
            cells = []
            for col in range(self.shape.columns):
                index = self.shape.index(row, col)
                piece = self.current_board[index]
                if piece is not None:
                    text = piece.symbol
                elif show_cell_numbers:
                    text = str(index)
                else:
                    text = ""
                cells.append(f" {text:^{width}} ")
            lines.append("|" + "|".join(cells) + "|")
            lines.append(separator)

        return "\n".join(lines)

    def print_board(self, show_cell_numbers: bool = False):
        """Print the board and game info to console."""
        print(f"\n{self.shape} board, move {self.current_move} of {self.move_count}")
        print(self.format_board(show_cell_numbers))
        print(f"\n{self.status}")
