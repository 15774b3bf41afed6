"""
Game configuration for TicTacToe.
All the settings for turn order, the CPU opponent, and scoring.
"""

from .game_state import Mark, Mode


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how rounds are played!
    """

    # ==================== TURN SETTINGS ====================
    # Mark that opens a fresh game (and every round after "New game")
    DEFAULT_STARTING_MARK = Mark.X

    # Mode used when the session starts
    DEFAULT_MODE = Mode.HUMAN

    # ==================== CPU SETTINGS ====================
    # The automated player always plays this mark
    CPU_MARK = Mark.O

    # Pause before the CPU answers (milliseconds, purely cosmetic)
    CPU_MOVE_DELAY_MS = 120

    # ==================== SEARCH SCORES ====================
    # Terminal scores from the CPU's point of view.
    # No depth adjustment: a win is a win, however long it takes.
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
