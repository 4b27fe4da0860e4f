"""
Move validator for variable-size TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over (won or drawn)
    2. Cell must be on the board
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: "GameState", cell: int) -> ValidationResult:
        """
        Validate a move on the current board.

        Args:
            game_state: Current game state.
            cell: Row-major index of the cell to take.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is on the board
        if not game_state.shape.contains(cell):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid cell {cell}. Must be 0-{game_state.shape.cell_count - 1}."
                )
            )

        # Check if cell is empty
        occupant = game_state.current_board[cell]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of playable cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
