"""
Board primitives for variable-size TicTacToe.
Players, board shapes, and immutable board snapshots.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def symbol(self) -> str:
        """The character drawn in a cell taken by this player."""
        return self.value


# A board is a flat, row-major tuple of cells; None means empty
Cell = Optional[Player]
Board = Tuple[Cell, ...]


@dataclass(frozen=True)
class BoardShape:
    """
    Dimensions of a board.

    New games only ever use square shapes, but nothing here relies on
    rows == columns.
    """
    rows: int
    columns: int

    def __post_init__(self):
        for name in ("rows", "columns"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def square(cls, size: int) -> "BoardShape":
        """Create a size x size shape."""
        return cls(rows=size, columns=size)

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def index(self, row: int, col: int) -> int:
        """Row-major cell index of (row, col)."""
        return row * self.columns + col

    def position(self, index: int) -> Tuple[int, int]:
        """(row, col) of a cell index."""
        return divmod(index, self.columns)

    def contains(self, index: int) -> bool:
        return 0 <= index < self.cell_count

    def __str__(self) -> str:
        return f"{self.rows}x{self.columns}"


def empty_board(shape: BoardShape) -> Board:
    """A board of the given shape with every cell empty."""
    return (None,) * shape.cell_count


def place(board: Board, index: int, player: Player) -> Board:
    """Return a copy of `board` with `player` in cell `index`."""
    cells = list(board)
    cells[index] = player
    return tuple(cells)


def check_board(board: Board, shape: BoardShape) -> None:
    """Raise ValueError if the board does not fit the shape."""
    if len(board) != shape.cell_count:
        raise ValueError(
            f"Board has {len(board)} cells, a {shape} board needs {shape.cell_count}"
        )
