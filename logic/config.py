"""
Game configuration for variable-size TicTacToe.
Board size range, win rules, key bindings, and display settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the rules and the look of the window.
    """

    # ==================== BOARD SETTINGS ====================
    # New boards are square, MIN_BOARD_SIZE .. MIN_BOARD_SIZE + BOARD_SIZE_RANGE - 1
    MIN_BOARD_SIZE = 3
    BOARD_SIZE_RANGE = 4  # 3x3, 4x4, 5x5 or 6x6

    # Shortest row/column/diagonal that counts as a win
    MIN_LINE_LENGTH = 3

    # ==================== INPUT SETTINGS ====================
    # Key that shows/hides cell numbers in empty cells
    TOGGLE_KEY = "n"

    # ==================== STATUS TEXT ====================
    STATUS_NEXT_PLAYER = "Next player: {player}"
    STATUS_WINNER = "And the winner is: {player}!"
    STATUS_DRAW = "It's a draw!"

    # Move history list
    MOVE_START_TEXT = "Go to game start"
    MOVE_JUMP_TEXT = "Go to move #{move}"
    MOVE_CURRENT_TEXT = "You are at move {move}"

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    BG_COLOR = "#1a1a2e"
    CELL_EMPTY_BG = "#16213e"
    CELL_FILLED_BG = "#0f0f1a"
    CELL_WIN_BG = "#065f46"
    X_COLOR = "#8acaff"
    O_COLOR = "#ff8a8a"
    NUMBER_COLOR = "#4b5563"
    TEXT_COLOR = "#9ca3af"
    ACCENT_COLOR = "#00d4ff"

    # Cells shrink as the board grows so a 6x6 board still fits
    CELL_FONT_SIZE = {3: 32, 4: 26, 5: 22, 6: 18}
    DEFAULT_CELL_FONT_SIZE = 16
    FONT_FAMILY = "Courier"

    def cell_font_size(self, size: int) -> int:
        """Font size for a board with `size` cells per side."""
        return self.CELL_FONT_SIZE.get(size, self.DEFAULT_CELL_FONT_SIZE)
