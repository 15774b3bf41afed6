"""
Board renderer for TicTacToe.
Draws a game snapshot into an OpenCV image and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from logic.game_state import GameSnapshot, Mark, Mode
from .config import ViewConfig


def move_cursor(index: int, direction: str) -> int:
    """
    Move the keyboard focus one cell in `direction`.
    Stops at the edges of the grid (no wrapping).

    Args:
        index: Currently focused cell (0-8).
        direction: "up", "down", "left" or "right".

    Returns:
        The newly focused cell.
    """
    row, col = divmod(index, 3)

    if direction == "up" and row > 0:
        return index - 3
    if direction == "down" and row < 2:
        return index + 3
    if direction == "left" and col > 0:
        return index - 1
    if direction == "right" and col < 2:
        return index + 1
    return index


def status_text(snapshot: GameSnapshot) -> str:
    """One-line status: the result, or whose turn it is."""
    if snapshot.round_over and snapshot.result is not None:
        return snapshot.result.message
    if snapshot.cpu_pending:
        return "CPU is thinking..."
    return f"Turn: {snapshot.current.value}"


def mode_text(mode: Mode) -> str:
    return "vs CPU" if mode == Mode.CPU else "vs Friend"


class BoardRenderer:
    """
    Renders the board, the marks, the winning line and a status strip.
    """

    def __init__(self, config: Optional[ViewConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: View configuration. Uses defaults if not provided.
        """
        self.config = config or ViewConfig()

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) of rendered images."""
        size = self.config.BOARD_OUTPUT_SIZE
        return size, size + self.config.STATUS_HEIGHT

    def cell_center(self, index: int) -> Tuple[int, int]:
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, 3)
        return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Convert a point in the rendered image to a cell index.

        Returns:
            Cell index (0-8), or None if the point is off the board.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell_size = self.config.CELL_OUTPUT_SIZE
        row = min(2, y // cell_size)
        col = min(2, x // cell_size)
        return int(row * 3 + col)

    def render(self, snapshot: GameSnapshot, cursor: Optional[int] = None) -> np.ndarray:
        """
        Draw the whole view.

        Args:
            snapshot: State to draw.
            cursor: Cell with keyboard focus, if any.

        Returns:
            BGR image of shape (height, width, 3).
        """
        width, height = self.image_size
        image = np.full((height, width, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        self._draw_cells(image, snapshot)
        self._draw_grid(image)

        for index, mark in enumerate(snapshot.board):
            if mark == Mark.X:
                self._draw_x(image, index)
            elif mark == Mark.O:
                self._draw_o(image, index)

        if snapshot.winning_line is not None:
            self._draw_win_line(image, snapshot.winning_line)

        if cursor is not None:
            self._draw_cursor(image, cursor)

        self._draw_status(image, snapshot)

        return image

    def _cell_rect(self, index: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, 3)
        x1, y1 = col * cell_size, row * cell_size
        return (x1, y1), (x1 + cell_size - 1, y1 + cell_size - 1)

    def _draw_cells(self, image: np.ndarray, snapshot: GameSnapshot):
        win_cells = snapshot.winning_line or ()
        for index in range(9):
            color = self.config.WIN_CELL_COLOR if index in win_cells else self.config.CELL_COLOR
            pt1, pt2 = self._cell_rect(index)
            cv2.rectangle(image, pt1, pt2, color, -1)

    def _draw_grid(self, image: np.ndarray):
        size = self.config.BOARD_OUTPUT_SIZE
        cell_size = self.config.CELL_OUTPUT_SIZE

        for i in range(1, 3):
            # Vertical lines
            cv2.line(
                image,
                (i * cell_size, 0),
                (i * cell_size, size),
                self.config.GRID_COLOR,
                self.config.GRID_WIDTH
            )
            # Horizontal lines
            cv2.line(
                image,
                (0, i * cell_size),
                (size, i * cell_size),
                self.config.GRID_COLOR,
                self.config.GRID_WIDTH
            )

    def _draw_x(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        off = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        color = self.config.X_COLOR
        thickness = self.config.MARK_THICKNESS

        cv2.line(image, (cx - off, cy - off), (cx + off, cy + off), color, thickness, cv2.LINE_AA)
        cv2.line(image, (cx + off, cy - off), (cx - off, cy + off), color, thickness, cv2.LINE_AA)

    def _draw_o(self, image: np.ndarray, index: int):
        radius = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        cv2.circle(
            image,
            self.cell_center(index),
            radius,
            self.config.O_COLOR,
            self.config.MARK_THICKNESS,
            cv2.LINE_AA
        )

    def _draw_win_line(self, image: np.ndarray, line: Tuple[int, int, int]):
        cv2.line(
            image,
            self.cell_center(line[0]),
            self.cell_center(line[2]),
            self.config.WIN_LINE_COLOR,
            self.config.WIN_LINE_WIDTH,
            cv2.LINE_AA
        )

    def _draw_cursor(self, image: np.ndarray, index: int):
        (x1, y1), (x2, y2) = self._cell_rect(index)
        inset = self.config.GRID_WIDTH + 2
        cv2.rectangle(
            image,
            (x1 + inset, y1 + inset),
            (x2 - inset, y2 - inset),
            self.config.CURSOR_COLOR,
            self.config.CURSOR_WIDTH
        )

    def _draw_status(self, image: np.ndarray, snapshot: GameSnapshot):
        top = self.config.BOARD_OUTPUT_SIZE
        font = self.config.FONT
        scale = self.config.FONT_SCALE
        thickness = self.config.FONT_THICKNESS

        cv2.putText(
            image, status_text(snapshot), (15, top + 35),
            font, scale, self.config.TEXT_COLOR, thickness
        )

        x_wins, o_wins = snapshot.scores
        cv2.putText(
            image, f"X: {x_wins}   O: {o_wins}   ({mode_text(snapshot.mode)})", (15, top + 70),
            font, scale * 0.85, self.config.MUTED_TEXT_COLOR, thickness
        )
