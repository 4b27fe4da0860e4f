"""
Tests for the TicTacToe logic modules.
Run with pytest, or directly as a script.
"""

import random
import sys

import pytest

from logic.board import BoardShape, Player, empty_board, place
from logic.board_size import random_board_shape, random_board_size
from logic.game_state import GameState
from logic.line_generator import lines_for, winning_columns, winning_diagonals, winning_rows
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

X, O, _ = Player.X, Player.O, None


def play(state, *cells):
    """Apply moves in order, asserting each one is accepted."""
    for cell in cells:
        assert state.apply_move(cell), f"move {cell} was rejected"
    return state


# ==================== BOARD ====================

def test_board_shape():
    shape = BoardShape.square(4)
    assert shape.cell_count == 16
    assert shape.index(2, 3) == 11
    assert shape.position(11) == (2, 3)
    assert shape.contains(15)
    assert not shape.contains(16)
    assert not shape.contains(-1)
    assert str(shape) == "4x4"


@pytest.mark.parametrize("rows, columns", [(0, 3), (3, -1), (2.5, 3), (True, 3)])
def test_board_shape_rejects_bad_dimensions(rows, columns):
    with pytest.raises(ValueError):
        BoardShape(rows, columns)


def test_place_returns_new_board():
    board = empty_board(BoardShape.square(3))
    new_board = place(board, 4, X)
    assert board[4] is None
    assert new_board[4] == X
    assert len(new_board) == 9


def test_player_opposite():
    assert X.opposite() == O
    assert O.opposite() == X
    assert X.symbol == "X"


# ==================== LINE GENERATOR ====================

def test_lines_3x3():
    shape = BoardShape.square(3)
    assert winning_rows(shape) == [(0, 1, 2), (3, 4, 5), (6, 7, 8)]
    assert winning_columns(shape) == [(0, 3, 6), (1, 4, 7), (2, 5, 8)]
    assert winning_diagonals(shape) == [(0, 4, 8), (2, 4, 6)]


def test_diagonals_4x4():
    assert winning_diagonals(BoardShape.square(4)) == [
        (0, 5, 10, 15), (1, 6, 11), (4, 9, 14),
        (3, 6, 9, 12), (2, 5, 8), (7, 10, 13),
    ]


@pytest.mark.parametrize("size, expected_diagonals", [
    (3, 2), (4, 6), (5, 10), (6, 14), (7, 18), (8, 22),
])
def test_line_counts(size, expected_diagonals):
    shape = BoardShape.square(size)
    lines = lines_for(shape)

    assert len(winning_rows(shape)) == size
    assert len(winning_columns(shape)) == size
    assert len(winning_diagonals(shape)) == expected_diagonals
    assert expected_diagonals == 2 * (2 * size - 5)
    assert len(lines) == 2 * size + expected_diagonals


def test_lines_order_and_minimum_length():
    shape = BoardShape.square(5)
    lines = lines_for(shape)
    assert lines[:5] == tuple(winning_rows(shape))
    assert lines[5:10] == tuple(winning_columns(shape))
    assert all(len(line) >= 3 for line in lines)


def test_diagonals_non_square():
    assert winning_diagonals(BoardShape(3, 5)) == [
        (0, 6, 12), (1, 7, 13), (2, 8, 14),
        (4, 8, 12), (3, 7, 11), (2, 6, 10),
    ]


def test_diagonals_min_length():
    shape = BoardShape.square(3)
    assert len(winning_diagonals(shape, min_length=2)) == 6
    assert len(winning_diagonals(shape, min_length=1)) == 10


def test_lines_are_cached_per_shape():
    assert lines_for(BoardShape.square(4)) is lines_for(BoardShape(4, 4))


# ==================== WIN CHECKER ====================

def test_empty_board_undecided():
    shape = BoardShape.square(3)
    result = WinChecker().evaluate(empty_board(shape), shape)
    assert result.is_undecided
    assert result.winner is None
    assert not result.is_draw


def test_full_board_without_line_is_draw():
    shape = BoardShape.square(3)
    board = (
        X, O, X,
        O, X, O,
        O, X, O,
    )
    checker = WinChecker()
    result = checker.evaluate(board, shape)
    assert result.is_draw
    assert result.is_decided
    assert result.winner is None
    assert checker.check_draw(board, shape)


def test_column_win():
    shape = BoardShape.square(3)
    board = (
        O, X, _,
        O, X, _,
        O, _, X,
    )
    checker = WinChecker()
    assert checker.check_winner(board, shape) == O
    assert checker.get_winning_line(board, shape) == (0, 3, 6)


def test_short_diagonal_win_on_large_board():
    shape = BoardShape.square(5)
    board = list(empty_board(shape))
    for cell in (2, 8, 14):
        board[cell] = X
    board[0] = O
    result = WinChecker().evaluate(tuple(board), shape)
    assert result.winner == X
    assert result.winning_line == (2, 8, 14)


def test_anti_diagonal_win_with_empty_cells():
    shape = BoardShape.square(4)
    board = list(empty_board(shape))
    for cell in (2, 5, 8):
        board[cell] = O
    result = WinChecker().evaluate(tuple(board), shape)
    assert result.winner == O
    assert result.winning_line == (2, 5, 8)


def test_win_on_full_board_is_not_draw():
    shape = BoardShape.square(3)
    board = (
        X, X, X,
        O, O, X,
        X, O, O,
    )
    result = WinChecker().evaluate(board, shape)
    assert result.winner == X
    assert not result.is_draw


def test_mixed_line_is_not_a_win():
    shape = BoardShape.square(4)
    board = (
        X, X, X, O,
        _, _, _, _,
        _, _, _, _,
        _, _, _, _,
    )
    assert WinChecker().evaluate(board, shape).is_undecided


def test_board_shape_mismatch_raises():
    with pytest.raises(ValueError):
        WinChecker().evaluate(empty_board(BoardShape.square(3)), BoardShape.square(4))


def test_status_text():
    checker = WinChecker()
    shape = BoardShape.square(3)
    assert checker.status_text(checker.evaluate(empty_board(shape), shape), O) == "Next player: O"


# ==================== GAME STATE ====================

def test_new_state():
    state = GameState()
    assert state.shape == BoardShape.square(3)
    assert len(state.history) == 1
    assert state.current_move == 0
    assert state.current_player == X
    assert state.status == "Next player: X"


def test_top_row_win():
    state = play(GameState(), 0, 4, 1, 8, 2)
    assert state.winner == X
    assert state.result.winning_line == (0, 1, 2)
    assert state.is_game_over
    assert state.status == "And the winner is: X!"


def test_turns_alternate():
    state = GameState()
    state.apply_move(4)
    assert state.current_player == O
    state.apply_move(0)
    assert state.current_player == X
    assert state.current_board[4] == X
    assert state.current_board[0] == O


def test_occupied_cell_rejected():
    state = play(GameState(), 4)
    board_before = state.current_board

    assert not state.apply_move(4)
    assert state.current_board == board_before
    assert len(state.history) == 2
    assert state.current_player == O


def test_out_of_range_cell_rejected():
    state = GameState()
    assert not state.apply_move(9)
    assert not state.apply_move(-1)
    assert len(state.history) == 1


def test_no_moves_after_win():
    state = play(GameState(), 0, 4, 1, 8, 2)
    board_before = state.current_board

    assert not state.apply_move(3)
    assert state.current_board == board_before
    assert len(state.history) == 6


def test_no_moves_after_draw():
    # X O X / O X X / O X O
    state = play(GameState(), 0, 1, 2, 3, 4, 8, 7, 6, 5)
    assert state.is_draw
    board_before = state.current_board

    assert not state.apply_move(0)
    assert state.current_board == board_before
    assert len(state.history) == 10


def test_draw_game():
    state = play(GameState(), 0, 1, 2, 3, 4, 5, 7, 6)
    assert state.result.is_undecided
    state.apply_move(8)
    # X takes 8 -> 0, 4, 8 diagonal
    assert state.winner == X

    state = play(GameState(), 0, 1, 2, 3, 4, 8, 7, 6, 5)
    assert state.is_draw
    assert state.status == "It's a draw!"


def test_jump_then_move_discards_future():
    state = play(GameState(shape=BoardShape.square(4)), 0, 1, 2, 3, 4)
    assert len(state.history) == 6

    assert state.jump_to(2)
    assert len(state.history) == 6  # jumping alone keeps the future
    assert state.current_player == X

    assert state.apply_move(15)
    assert len(state.history) == 4
    assert state.current_move == 3
    assert state.current_board[15] == X
    assert state.current_board[2] is None


def test_jump_changes_turn():
    state = play(GameState(), 0, 1, 2)
    state.jump_to(1)
    assert state.current_player == O
    assert state.current_board == state.history[1]


def test_jump_out_of_range_is_noop():
    state = play(GameState(), 0, 1)
    assert not state.jump_to(3)
    assert not state.jump_to(-1)
    assert state.current_move == 2


def test_jump_back_before_win_allows_play():
    state = play(GameState(), 0, 4, 1, 8, 2)
    state.jump_to(4)
    assert not state.is_game_over
    assert state.apply_move(6)
    assert len(state.history) == 6
    assert state.winner is None


def test_new_game_resets_history():
    state = play(GameState(), 0, 4, 1)
    state.new_game(BoardShape.square(5))
    assert state.shape == BoardShape.square(5)
    assert state.history == [empty_board(BoardShape.square(5))]
    assert state.current_move == 0
    assert state.current_player == X


def test_new_game_random_size():
    state = GameState()
    for _ in range(20):
        state.new_game()
        assert state.shape.rows in (3, 4, 5, 6)
        assert state.shape.rows == state.shape.columns
        assert len(state.history) == 1
        assert all(cell is None for cell in state.current_board)


def test_history_snapshots_differ_by_one_cell():
    state = play(GameState(shape=BoardShape.square(4)), 5, 6, 9, 10)
    for before, after in zip(state.history, state.history[1:]):
        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert len(changed) == 1
        assert before[changed[0]] is None


def test_invalid_state_rejected():
    with pytest.raises(ValueError):
        GameState(current_move=1)
    with pytest.raises(ValueError):
        GameState(shape=BoardShape.square(4), history=[empty_board(BoardShape.square(3))])


def test_copy_is_independent():
    state = play(GameState(), 0)
    clone = state.copy()
    clone.apply_move(1)
    assert len(state.history) == 2
    assert len(clone.history) == 3


def test_empty_cells():
    state = play(GameState(), 0, 4)
    assert state.get_empty_cells() == [1, 2, 3, 5, 6, 7, 8]


def test_format_board():
    state = play(GameState(), 4)
    text = state.format_board()
    assert "X" in text
    assert "8" not in text

    numbered = state.format_board(show_cell_numbers=True)
    assert "8" in numbered
    assert "4" not in numbered


# ==================== MOVE VALIDATOR ====================

def test_validator_messages():
    validator = MoveValidator()
    state = play(GameState(), 0)

    assert validator.validate_move(state, 1).is_valid

    occupied = validator.validate_move(state, 0)
    assert not occupied.is_valid
    assert "occupied" in occupied.error_message

    out_of_range = validator.validate_move(state, 42)
    assert not out_of_range.is_valid
    assert "Invalid cell" in out_of_range.error_message

    play(state, 3, 1, 4, 2)
    over = validator.validate_move(state, 8)
    assert not over.is_valid
    assert over.error_message == "Game is already over!"
    assert validator.get_valid_moves(state) == []


# ==================== BOARD SIZE ====================

def test_random_board_size_range():
    rng = random.Random(1234)
    sizes = {random_board_size(rng) for _ in range(200)}
    assert sizes == {3, 4, 5, 6}


def test_random_board_shape_is_square():
    shape = random_board_shape(random.Random(7))
    assert shape.rows == shape.columns
    assert 3 <= shape.rows <= 6


def run_all_tests():
    """Run all tests through pytest."""
    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
