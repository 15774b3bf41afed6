"""
Logic module for TicTacToe.
Handles game state, rules, scoring, and the AI opponent.
"""

from .game_state import GameSession, GameSnapshot, Mark, Mode, Move, ScoreBoard
from .config import GameConfig
from .win_checker import WinChecker, RoundResult, RoundStatus, evaluate
from .move_validator import MoveValidator, ValidationResult, InvalidMove
from .ai_player import AIPlayer, SearchResult
from .game_engine import (
    GameEngine,
    SelectCell,
    ChangeMode,
    NextRound,
    NewGame,
    ResetScores,
)

__version__ = "1.0.0"
