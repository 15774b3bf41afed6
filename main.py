"""
Main entry point for TicTacToe.

By default this launches the Tkinter UI. With --no-ui the board is shown
in a plain OpenCV window instead:

    click a cell      play it
    arrows + Enter    play with the keyboard
    space             next round (after a round ends)
    n                 new game
    r                 reset all scores
    m                 toggle vs Friend / vs CPU
    s                 save screenshot
    q                 quit
"""

import cv2
import time
from typing import Callable, List, Optional, Tuple

from logic.config import GameConfig
from logic.game_state import Mode
from logic.game_engine import (
    GameEngine,
    SelectCell,
    ChangeMode,
    NextRound,
    NewGame,
    ResetScores,
)
from view.config import ViewConfig
from view.board_renderer import BoardRenderer, move_cursor


class TicTacToeWindow:
    """
    OpenCV front-end for TicTacToe.

    Game flow:
    1. A human clicks a cell (or moves the cursor and presses Enter)
    2. The engine applies the move and checks for a result
    3. In CPU mode the AI answers after a short pause
    4. When a round ends, space starts the next one
    """

    def __init__(self, mode: Mode = Mode.HUMAN, debug: bool = False):
        """
        Initialize the window.

        Args:
            mode: HUMAN (two players) or CPU (human vs computer).
            debug: Print engine diagnostics.
        """
        self.game_config = GameConfig()
        self.game_config.DEBUG_MODE = debug
        self.view_config = ViewConfig()
        self.renderer = BoardRenderer(self.view_config)

        # (due time, callback) pairs waiting to run
        self.pending: List[Tuple[float, Callable[[], None]]] = []

        self.engine = GameEngine(
            mode=mode,
            config=self.game_config,
            schedule=self._schedule
        )

        self.cursor: Optional[int] = None
        self.announced_round: Optional[int] = None
        self.is_running = False

    def _schedule(self, delay_ms: int, callback: Callable[[], None]):
        self.pending.append((time.monotonic() + delay_ms / 1000.0, callback))

    def _run_due_callbacks(self):
        now = time.monotonic()
        due = [cb for when, cb in self.pending if when <= now]
        self.pending = [(when, cb) for when, cb in self.pending if when > now]
        for callback in due:
            callback()

    def start(self):
        """Open the window and play until the user quits."""
        print("\nStarting TicTacToe...")
        print("Click a cell to play. Keys: n=new game, space=next round, "
              "r=reset all, m=toggle mode, s=screenshot, q=quit\n")

        cv2.namedWindow(self.view_config.WINDOW_NAME)
        cv2.setMouseCallback(self.view_config.WINDOW_NAME, self._on_mouse)

        self.is_running = True
        self._game_loop()

        cv2.destroyAllWindows()

    def _game_loop(self):
        """Main loop."""
        while self.is_running:
            self._run_due_callbacks()

            snapshot = self.engine.snapshot()
            frame = self.renderer.render(snapshot, cursor=self.cursor)
            cv2.imshow(self.view_config.WINDOW_NAME, frame)

            if snapshot.round_over and self.announced_round != snapshot.round_number:
                self.announced_round = snapshot.round_number
                self._show_round_result()

            # Handle key presses
            key = cv2.waitKeyEx(self.view_config.FRAME_INTERVAL_MS)
            if key != -1:
                self._on_key(key, frame)

    def _on_mouse(self, event, x, y, flags, param):
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        index = self.renderer.cell_at(x, y)
        if index is None:
            return

        self.cursor = index
        self._select(index)

    def _on_key(self, key: int, frame):
        if key in self.view_config.ARROW_KEYS:
            direction = self.view_config.ARROW_KEYS[key]
            self.cursor = 4 if self.cursor is None else move_cursor(self.cursor, direction)
            return

        if key in self.view_config.ENTER_KEYS:
            if self.cursor is not None:
                self._select(self.cursor)
            return

        key = key & 0xFF
        if key == ord('q'):
            print("\nGame quit by user.")
            self.is_running = False
        elif key == ord(' '):
            if self.engine.session.round_over:
                self.engine.dispatch(NextRound())
        elif key == ord('n'):
            print("\nNew game.")
            self.engine.dispatch(NewGame())
        elif key == ord('r'):
            print("\nScores reset.")
            self.engine.dispatch(ResetScores())
        elif key == ord('m'):
            mode = Mode.HUMAN if self.engine.session.mode == Mode.CPU else Mode.CPU
            print(f"\nMode set to: {mode.value}")
            self.engine.dispatch(ChangeMode(mode))
        elif key == ord('s'):
            filename = self.view_config.SCREENSHOT_PATTERN.format(int(time.time()))
            cv2.imwrite(filename, frame)
            print(f"Saved: {filename}")

    def _select(self, index: int):
        result = self.engine.apply_move(index)
        if not result.is_valid and self.game_config.DEBUG_MODE:
            print(f"Ignored: {result.error_message}")

    def _show_round_result(self):
        """Print the finished round."""
        session = self.engine.session

        print("\n" + "="*60)
        print("   ROUND OVER!")
        print("="*60)

        session.print_board()

        print("\nPress space for the next round.")
        print("="*60)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.HUMAN.value,
        help="Play against a friend (human) or the computer (cpu)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Use a plain OpenCV window instead of the Tkinter UI"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine diagnostics"
    )

    args = parser.parse_args()
    mode = Mode(args.mode)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(mode=mode, debug=args.debug)
        ui.run()
        return

    window = TicTacToeWindow(mode=mode, debug=args.debug)

    try:
        window.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
