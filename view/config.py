"""
View configuration for TicTacToe.
All the settings for drawing the board and handling input.
"""

import cv2


class ViewConfig:
    """
    Configuration class for view settings.
    Change these values to restyle the board!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size of the board image (pixels)
    BOARD_OUTPUT_SIZE = 450
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 150 pixels per cell

    # Status strip under the board (turn, scores, result)
    STATUS_HEIGHT = 90

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (46, 26, 26)
    CELL_COLOR = (62, 33, 22)
    WIN_CELL_COLOR = (40, 90, 40)
    GRID_COLOR = (128, 128, 128)
    X_COLOR = (113, 107, 255)
    O_COLOR = (255, 212, 0)
    WIN_LINE_COLOR = (0, 215, 255)
    CURSOR_COLOR = (255, 255, 255)
    TEXT_COLOR = (255, 255, 255)
    MUTED_TEXT_COLOR = (200, 200, 200)

    # ==================== STROKES ====================
    GRID_WIDTH = 4
    MARK_THICKNESS = 10
    MARK_MARGIN = 35          # Gap between a mark and its cell border
    WIN_LINE_WIDTH = 8
    CURSOR_WIDTH = 3

    FONT = cv2.FONT_HERSHEY_SIMPLEX
    FONT_SCALE = 0.7
    FONT_THICKNESS = 2

    # ==================== WINDOW SETTINGS ====================
    WINDOW_NAME = "TicTacToe"
    SCREENSHOT_PATTERN = "tictactoe_{}.png"

    # Key codes from cv2.waitKeyEx (GTK / Windows)
    ARROW_KEYS = {
        65362: "up", 2490368: "up",
        65364: "down", 2621440: "down",
        65361: "left", 2424832: "left",
        65363: "right", 2555904: "right",
    }
    ENTER_KEYS = (13, 10)

    # Frame interval of the OpenCV loop (milliseconds)
    FRAME_INTERVAL_MS = 15
