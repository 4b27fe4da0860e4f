"""
Win checker for variable-size TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board, BoardShape, Player, check_board
from .config import GameConfig
from .line_generator import Line, lines_for


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of a board position.

    Exactly one of these holds: `winner` is set, `is_draw` is True, or
    the game is still undecided.
    """
    winner: Optional[Player] = None
    is_draw: bool = False
    winning_line: Optional[Line] = None

    @property
    def is_decided(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def is_undecided(self) -> bool:
        return not self.is_decided


UNDECIDED = GameResult()
DRAW = GameResult(is_draw=True)


class WinChecker:
    """
    Checks for win conditions on a board of any shape.

    Win condition: every cell of a row, column, or diagonal of at least
    MIN_LINE_LENGTH cells taken by the same player.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def lines(self, shape: BoardShape) -> Tuple[Line, ...]:
        """All winning lines for a shape (cached)."""
        return lines_for(shape, self.config.MIN_LINE_LENGTH)

    def evaluate(self, board: Board, shape: BoardShape) -> GameResult:
        """
        Decide the outcome of a board.

        Lines are checked rows first, then columns, then diagonals, and
        the first complete line wins.

        Args:
            board: The board to check.
            shape: The board's dimensions.

        Returns:
            GameResult with the winner and line, a draw, or UNDECIDED.

        Raises:
            ValueError: If the board does not fit the shape.
        """
        check_board(board, shape)

        for line in self.lines(shape):
            winner = self._check_line(board, line)
            if winner is not None:
                return GameResult(winner=winner, winning_line=line)

        if all(cell is not None for cell in board):
            return DRAW

        return UNDECIDED

    def _check_line(self, board: Board, line: Line) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The Player holding every cell of the line, None otherwise.
        """
        if not line:
            return None

        first = board[line[0]]
        if first is None:
            return None  # Empty cell, no winner on this line

        for index in line[1:]:
            if board[index] != first:
                return None

        return first

    def check_winner(self, board: Board, shape: BoardShape) -> Optional[Player]:
        """The winning Player, or None if no winner yet."""
        return self.evaluate(board, shape).winner

    def check_draw(self, board: Board, shape: BoardShape) -> bool:
        """True if the board is full and nobody won."""
        return self.evaluate(board, shape).is_draw

    def get_winning_line(self, board: Board, shape: BoardShape) -> Optional[Line]:
        """The completed line as cell indices, or None."""
        return self.evaluate(board, shape).winning_line

    def status_text(self, result: GameResult, next_player: Player) -> str:
        """
        Human-readable status for a result.

        Args:
            result: Outcome of the current board.
            next_player: Whose turn it is if the game is undecided.
        """
        if result.winner is not None:
            return self.config.STATUS_WINNER.format(player=result.winner.symbol)
        if result.is_draw:
            return self.config.STATUS_DRAW
        return self.config.STATUS_NEXT_PLAYER.format(player=next_player.symbol)
