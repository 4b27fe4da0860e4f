"""
Logic module for variable-size TicTacToe.
Handles board shapes, win detection, game history, and the render session.
"""

__version__ = "1.0.0"

from .board import Player, BoardShape, empty_board
from .config import GameConfig
from .line_generator import lines_for
from .win_checker import WinChecker, GameResult
from .move_validator import MoveValidator
from .board_size import random_board_size, random_board_shape
from .game_state import GameState
from .session import GameSession, RenderSnapshot, MoveEntry
