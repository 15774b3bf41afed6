"""
View module for TicTacToe.
Draws the board with OpenCV and maps input back to cells.
"""

from .config import ViewConfig
from .board_renderer import BoardRenderer, move_cursor, status_text
