"""
Main entry point for variable-size TicTacToe.

Opens the Tkinter window by default. With --no-ui the game is played in
the console instead:

    <cell>   take a cell (e.g. 4)
    j <k>    jump to move k
    h        show move history
    n        show/hide cell numbers
    new      start a new game
    q        quit
"""

import argparse
import logging
import random
from typing import Optional, Tuple

from logic.board import BoardShape
from logic.config import GameConfig
from logic.session import GameSession, RenderSnapshot

logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: <cell>, j <move>, h (history), n (numbers), new, q (quit)"


def parse_command(line: str) -> Optional[Tuple[str, Optional[int]]]:
    """
    Parse one line of console input.

    Returns:
        (command, argument) tuple, or None if the line is not a command.
        Commands are "play", "jump", "history", "numbers", "new",
        "help" and "quit".
    """
    parts = line.strip().lower().split()
    if not parts:
        return None

    word = parts[0]

    if len(parts) == 1:
        if word.isdigit():
            return ("play", int(word))
        simple = {
            "h": "history",
            "n": "numbers",
            "new": "new",
            "?": "help",
            "help": "help",
            "q": "quit",
            "quit": "quit",
        }
        if word in simple:
            return (simple[word], None)
        return None

    if len(parts) == 2 and word in ("j", "jump") and parts[1].isdigit():
        return ("jump", int(parts[1]))

    return None


class ConsoleGame:
    """
    Plays TicTacToe in the terminal through a GameSession.
    """

    def __init__(
        self,
        shape: Optional[BoardShape] = None,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None
    ):
        self.session = GameSession(shape=shape, rng=rng, config=config)
        self.is_running = False

    def show(self, snapshot: RenderSnapshot):
        """Print the board and status."""
        self.session.game_state.print_board(snapshot.show_cell_numbers)

    def show_history(self, snapshot: RenderSnapshot):
        """Print the move history list."""
        for entry in snapshot.moves:
            marker = ">" if entry.is_current else " "
            print(f" {marker} {entry.index:>2}: {entry.description}")

    def handle(self, line: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        command = parse_command(line)
        if command is None:
            print(f"Unknown command: {line.strip()!r}")
            print(HELP_TEXT)
            return True

        name, argument = command

        if name == "quit":
            return False
        if name == "help":
            print(HELP_TEXT)
        elif name == "history":
            self.show_history(self.session.snapshot())
        elif name == "play":
            before = self.session.game_state.current_move
            snapshot = self.session.cell_clicked(argument)
            if snapshot.current_move == before:
                print(f"Can't play cell {argument}.")
            self.show(snapshot)
        elif name == "jump":
            snapshot = self.session.history_jump(argument)
            self.show(snapshot)
        elif name == "numbers":
            self.show(self.session.toggle_cell_numbers())
        elif name == "new":
            self.show(self.session.new_game_requested())

        return True

    def start(self):
        """Run the input loop until the player quits."""
        print("\n" + "=" * 60)
        print("   TicTacToe")
        print("=" * 60)
        print(HELP_TEXT)

        self.show(self.session.snapshot())
        self.is_running = True

        while self.is_running:
            try:
                line = input("\n> ")
            except EOFError:
                break
            self.is_running = self.handle(line)


def board_size(value: str) -> int:
    """argparse type for --size."""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number")
    if size < GameConfig.MIN_BOARD_SIZE:
        raise argparse.ArgumentTypeError(
            f"board size must be at least {GameConfig.MIN_BOARD_SIZE}"
        )
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Variable-size TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--size",
        type=board_size,
        default=None,
        help="Board size of the first game (default: random 3-6)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random board sizes"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )

    shape = BoardShape.square(args.size) if args.size else None
    rng = random.Random(args.seed) if args.seed is not None else None

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(shape=shape, rng=rng)
        ui.run()
        return

    game = ConsoleGame(shape=shape, rng=rng)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
