"""
TicTacToe UI
A graphical interface for variable-size TicTacToe using Tkinter.

Shows:
- The board (3x3 up to 6x6), with the winning line highlighted
- Game status (next player, winner, or draw)
- Move history; click an entry to go back in time
- Start new game button

Press 'n' to show/hide cell numbers in empty cells.
"""

import logging
import random
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from logic.board import BoardShape
from logic.config import GameConfig
from logic.session import GameSession, RenderSnapshot

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    All game state lives in the GameSession; this class only draws
    snapshots and forwards clicks and key presses.
    """

    def __init__(
        self,
        shape: Optional[BoardShape] = None,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.session = GameSession(
            shape=shape,
            rng=rng,
            config=self.config,
            on_change=self._render
        )

        self.board_cells: List[tk.Button] = []
        self.drawn_shape: Optional[BoardShape] = None

        self._create_ui()
        self._render(self.session.snapshot())

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.BG_COLOR)
        self.root.minsize(700, 500)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.BG_COLOR)
        style.configure('TLabel', background=self.config.BG_COLOR,
                        foreground=self.config.TEXT_COLOR, font=(self.config.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=(self.config.FONT_FAMILY, 14, 'bold'),
                        foreground=self.config.ACCENT_COLOR)
        style.configure('Status.TLabel', font=(self.config.FONT_FAMILY, 12, 'bold'),
                        foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Left panel - move history
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 20))

        ttk.Label(left_frame, text="Moves", style='Title.TLabel').pack(pady=(0, 10))
        self.moves_frame = ttk.Frame(left_frame)
        self.moves_frame.pack(fill=tk.Y)

        # Right panel - status and controls
        right_frame = ttk.Frame(main_frame)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(20, 0))

        ttk.Label(right_frame, text="Status", style='Title.TLabel').pack(pady=(0, 10))
        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.shape_label = ttk.Label(right_frame, text="")
        self.shape_label.pack(pady=5)

        ttk.Label(
            right_frame,
            text=f"Press '{self.config.TOGGLE_KEY}' to toggle cell numbers"
        ).pack(pady=(20, 5))

        tk.Button(
            right_frame,
            text="Start new game",
            font=(self.config.FONT_FAMILY, 11, 'bold'),
            bg='#2d3748',
            fg='white',
            width=16,
            command=self.session.new_game_requested
        ).pack(side=tk.BOTTOM, pady=10)

        # Center - the board
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(side=tk.LEFT, expand=True)

        self.root.bind("<Key>", self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_key(self, event):
        """Forward key presses to the session."""
        self.session.key_pressed(event.char)

    def _build_board(self, shape: BoardShape):
        """(Re)create the grid of cell buttons for a board shape."""
        for cell in self.board_cells:
            cell.destroy()
        self.board_cells = []

        font = (self.config.FONT_FAMILY, self.config.cell_font_size(shape.columns), 'bold')
        for index in range(shape.cell_count):
            row, col = shape.position(index)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=font,
                width=2,
                height=1,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self.session.cell_clicked(i)
            )
            cell.grid(row=row, column=col, padx=3, pady=3)
            self.board_cells.append(cell)

        self.drawn_shape = shape
        logger.debug("Built %s board", shape)

    def _render(self, snapshot: RenderSnapshot):
        """Draw a snapshot."""
        if snapshot.shape != self.drawn_shape:
            self._build_board(snapshot.shape)

        self._update_board_display(snapshot)
        self._update_moves(snapshot)

        self.status_label.configure(text=snapshot.status)
        self.shape_label.configure(text=f"Board: {snapshot.shape}")

    def _update_board_display(self, snapshot: RenderSnapshot):
        """Update the board grid display."""
        winning_line = snapshot.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            piece = snapshot.board[index]

            if piece is None:
                text = str(index) if snapshot.show_cell_numbers else ""
                cell.configure(
                    text=text,
                    bg=self.config.CELL_EMPTY_BG,
                    fg=self.config.NUMBER_COLOR,
                    activebackground='#1f2b4d'
                )
            else:
                fg_color = self.config.X_COLOR if piece.symbol == "X" else self.config.O_COLOR
                bg_color = (
                    self.config.CELL_WIN_BG if index in winning_line
                    else self.config.CELL_FILLED_BG
                )
                cell.configure(
                    text=piece.symbol,
                    bg=bg_color,
                    fg=fg_color,
                    activebackground=bg_color
                )

    def _update_moves(self, snapshot: RenderSnapshot):
        """Rebuild the move history list."""
        for child in self.moves_frame.winfo_children():
            child.destroy()

        for entry in snapshot.moves:
            if entry.is_current:
                ttk.Label(self.moves_frame, text=entry.description, width=20).pack(pady=1)
            else:
                tk.Button(
                    self.moves_frame,
                    text=entry.description,
                    font=(self.config.FONT_FAMILY, 10),
                    bg='#111827',
                    fg=self.config.TEXT_COLOR,
                    width=20,
                    anchor='w',
                    command=lambda i=entry.index: self.session.history_jump(i)
                ).pack(pady=1)

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.INFO)
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
