"""
Game session: the boundary between the game logic and whatever draws it.

The window (or console) reads an immutable RenderSnapshot and reports
user input back through the session's callbacks.
"""

import logging
import random
from typing import Callable, Optional, Tuple
from dataclasses import dataclass

from .board import Board, BoardShape
from .board_size import random_board_shape
from .config import GameConfig
from .game_state import GameState
from .line_generator import Line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveEntry:
    """One entry of the move history list."""
    index: int
    description: str
    is_current: bool


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything needed to draw the game at one point in time."""
    board: Board
    shape: BoardShape
    status: str
    history: Tuple[Board, ...]
    current_move: int
    show_cell_numbers: bool
    winning_line: Optional[Line]
    moves: Tuple[MoveEntry, ...]

    @property
    def is_game_over(self) -> bool:
        return self.winning_line is not None or all(
            cell is not None for cell in self.board
        )


class GameSession:
    """
    One game window's worth of state.

    Owns a single GameState plus the cell-number toggle. Every callback
    returns the new snapshot and notifies the `on_change` listener.
    """

    def __init__(
        self,
        shape: Optional[BoardShape] = None,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None,
        on_change: Optional[Callable[[RenderSnapshot], None]] = None
    ):
        """
        Initialize the session.

        Args:
            shape: Shape of the first game. Random square if not provided.
            rng: Random source for board sizes.
            config: Game configuration. Uses defaults if not provided.
            on_change: Called with the new snapshot after every callback.
        """
        self.config = config or GameConfig()
        self.rng = rng
        self.on_change = on_change
        self.show_cell_numbers = False

        self.game_state = GameState(
            shape=shape or random_board_shape(self.rng, self.config),
            config=self.config
        )
        logger.debug("Session started with a %s board", self.game_state.shape)

    def snapshot(self) -> RenderSnapshot:
        """Build the render snapshot for the current state."""
        state = self.game_state
        return RenderSnapshot(
            board=state.current_board,
            shape=state.shape,
            status=state.status,
            history=tuple(state.history),
            current_move=state.current_move,
            show_cell_numbers=self.show_cell_numbers,
            winning_line=state.result.winning_line,
            moves=self.move_entries()
        )

    def move_entries(self) -> Tuple[MoveEntry, ...]:
        """Labels for the move history list."""
        entries = []
        for move in range(len(self.game_state.history)):
            is_current = move == self.game_state.current_move
            if is_current:
                description = self.config.MOVE_CURRENT_TEXT.format(move=move)
            elif move == 0:
                description = self.config.MOVE_START_TEXT
            else:
                description = self.config.MOVE_JUMP_TEXT.format(move=move)
            entries.append(MoveEntry(index=move, description=description, is_current=is_current))
        return tuple(entries)

    # ==================== CALLBACKS ====================

    def cell_clicked(self, index: int) -> RenderSnapshot:
        """A cell was clicked: play it if the move is legal."""
        self.game_state.apply_move(index)
        return self._changed()

    def history_jump(self, index: int) -> RenderSnapshot:
        """A history entry was clicked: show that snapshot."""
        self.game_state.jump_to(index)
        return self._changed()

    def new_game_requested(self) -> RenderSnapshot:
        """Start a new game on a freshly randomized board."""
        self.game_state.new_game(random_board_shape(self.rng, self.config))
        logger.info("New game on a %s board", self.game_state.shape)
        return self._changed()

    def toggle_cell_numbers(self) -> RenderSnapshot:
        """Show/hide cell numbers in empty cells."""
        self.show_cell_numbers = not self.show_cell_numbers
        return self._changed()

    def key_pressed(self, key: str) -> RenderSnapshot:
        """Keyboard input. Only the toggle key does anything."""
        if key == self.config.TOGGLE_KEY:
            return self.toggle_cell_numbers()
        return self.snapshot()

    def _changed(self) -> RenderSnapshot:
        snapshot = self.snapshot()
        if self.on_change is not None:
            self.on_change(snapshot)
        return snapshot
