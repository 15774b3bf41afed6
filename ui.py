"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (rendered with OpenCV, displayed through Pillow)
- Whose turn it is and the scores
- Mode selection (vs Friend / vs CPU)
- A result dialog at the end of every round
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_state import GameSnapshot, Mode
from logic.game_engine import (
    GameEngine,
    SelectCell,
    ChangeMode,
    NextRound,
    NewGame,
    ResetScores,
)
from view.config import ViewConfig
from view.board_renderer import BoardRenderer, move_cursor, status_text


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, mode: Mode = Mode.HUMAN, debug: bool = False):
        """Initialize the UI."""
        self.game_config = GameConfig()
        self.game_config.DEBUG_MODE = debug
        self.view_config = ViewConfig()
        self.renderer = BoardRenderer(self.view_config)

        # Keyboard focus (None until an arrow key is pressed)
        self.cursor: Optional[int] = None

        # Round whose result dialog has already been shown
        self.dialog_round: Optional[int] = None
        self.result_dialog: Optional[tk.Toplevel] = None

        # Create UI
        self._create_ui(mode)

        self.engine = GameEngine(
            mode=mode,
            config=self.game_config,
            schedule=self._schedule
        )
        self._refresh()

    def _create_ui(self, mode: Mode):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('TRadiobutton', background='#1a1a2e', foreground='white', font=('Segoe UI', 10))

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 5))

        # Mode selection
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        self.mode_var = tk.StringVar(value=mode.value)
        for text, value in (("vs Friend", Mode.HUMAN.value), ("vs CPU", Mode.CPU.value)):
            ttk.Radiobutton(
                mode_frame,
                text=text,
                value=value,
                variable=self.mode_var,
                command=self._on_mode_change
            ).pack(side=tk.LEFT, padx=8)

        # Turn and score labels
        info_frame = ttk.Frame(main_frame)
        info_frame.pack(pady=5)

        self.turn_label = ttk.Label(info_frame, text="Turn: -", style='Status.TLabel')
        self.turn_label.pack(side=tk.LEFT, padx=10)

        self.score_label = ttk.Label(info_frame, text="X: 0  O: 0")
        self.score_label.pack(side=tk.LEFT, padx=10)

        # Board canvas
        width, height = self.renderer.image_size
        self.board_canvas = tk.Canvas(
            main_frame,
            width=width,
            height=height,
            bg='#0f0f1a',
            highlightthickness=2,
            highlightbackground='#00d4ff'
        )
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=lambda: self._dispatch(NewGame())
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset all",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=lambda: self._dispatch(ResetScores())
        ).pack(side=tk.LEFT, padx=5)

        # Keyboard support
        for key in ("<Up>", "<Down>", "<Left>", "<Right>"):
            self.root.bind(key, self._on_arrow)
        self.root.bind("<Return>", self._on_select_key)
        self.root.bind("<space>", self._on_select_key)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== ENGINE PLUMBING ====================

    def _schedule(self, delay_ms: int, callback: Callable[[], None]):
        """Pacing hook for the engine: run the CPU move later, then redraw."""
        def run():
            callback()
            self._refresh()

        return self.root.after(delay_ms, run)

    def _dispatch(self, action):
        # A cell click can't change a finished round, so the dialog stays up
        if not isinstance(action, SelectCell):
            self._close_dialog()
        self.engine.dispatch(action)
        self._refresh()

    # ==================== EVENT HANDLERS ====================

    def _on_mode_change(self):
        mode = Mode(self.mode_var.get())
        print(f"Mode set to: {mode.value}")
        self._dispatch(ChangeMode(mode))

    def _on_click(self, event):
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return
        self.cursor = index
        self._dispatch(SelectCell(index))

    def _on_arrow(self, event):
        direction = event.keysym.lower()
        self.cursor = 4 if self.cursor is None else move_cursor(self.cursor, direction)
        self._refresh()

    def _on_select_key(self, event):
        if self.result_dialog is not None or self.cursor is None:
            return
        self._dispatch(SelectCell(self.cursor))

    # ==================== DRAWING ====================

    def _refresh(self):
        """Redraw everything from a fresh snapshot."""
        snapshot = self.engine.snapshot()

        self._update_board_canvas(snapshot)
        self._update_game_info(snapshot)

        if snapshot.round_over and self.dialog_round != snapshot.round_number:
            self.dialog_round = snapshot.round_number
            self._show_result_dialog(snapshot)

    def _update_board_canvas(self, snapshot: GameSnapshot):
        """Render the board and put it on the canvas."""
        frame = self.renderer.render(snapshot, cursor=self.cursor)

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_game_info(self, snapshot: GameSnapshot):
        """Update turn and score labels."""
        self.turn_label.configure(text=status_text(snapshot))

        x_wins, o_wins = snapshot.scores
        self.score_label.configure(text=f"X: {x_wins}  O: {o_wins}")

    def _show_result_dialog(self, snapshot: GameSnapshot):
        """Modal-ish dialog with the round result."""
        dialog = tk.Toplevel(self.root)
        dialog.title("Round over")
        dialog.configure(bg='#1a1a2e')
        dialog.transient(self.root)
        dialog.resizable(False, False)

        ttk.Label(dialog, text=snapshot.result.message, style='Title.TLabel').pack(padx=30, pady=15)

        button_frame = ttk.Frame(dialog)
        button_frame.pack(pady=(0, 15))

        tk.Button(
            button_frame,
            text="Next round",
            font=('Segoe UI', 10, 'bold'),
            bg='#10b981',
            fg='white',
            width=10,
            command=lambda: self._dispatch(NextRound())
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            button_frame,
            text="Close",
            font=('Segoe UI', 10),
            bg='#2d3748',
            fg='white',
            width=10,
            command=self._close_dialog
        ).pack(side=tk.LEFT, padx=5)

        dialog.protocol("WM_DELETE_WINDOW", self._close_dialog)
        self.result_dialog = dialog

    def _close_dialog(self):
        if self.result_dialog is not None:
            self.result_dialog.destroy()
            self.result_dialog = None

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.HUMAN.value,
        help="Play against a friend (human) or the computer (cpu)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine diagnostics"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60)
    print(f"   Mode: {args.mode}")
    print("="*60 + "\n")

    ui = TicTacToeUI(mode=Mode(args.mode), debug=args.debug)
    ui.run()


if __name__ == "__main__":
    main()
