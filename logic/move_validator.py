"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .game_state import BOARD_CELLS, GameSession, empty_cells


class InvalidMove(Enum):
    """Why a move was refused."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    ROUND_NOT_ACTIVE = "round_not_active"
    AWAITING_OPPONENT = "awaiting_opponent"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[InvalidMove] = None
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


VALID = ValidationResult(is_valid=True)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The round must still be going
    2. The CPU must not be in the middle of answering
    3. The index must be one of the 9 cells
    4. Can only place on empty cells
    """

    def validate_move(self, session: GameSession, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game session.
            index: Cell to place the current mark in (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        # Check if round is over
        if session.round_over:
            return ValidationResult(
                is_valid=False,
                reason=InvalidMove.ROUND_NOT_ACTIVE,
                error_message="Round is already over!"
            )

        # Check if CPU still has to answer
        if session.cpu_pending:
            return ValidationResult(
                is_valid=False,
                reason=InvalidMove.AWAITING_OPPONENT,
                error_message="Wait for the CPU to move!"
            )

        # Check if index is in valid range
        if not (isinstance(index, int) and 0 <= index < BOARD_CELLS):
            return ValidationResult(
                is_valid=False,
                reason=InvalidMove.OUT_OF_RANGE,
                error_message=f"Invalid cell {index!r}. Must be 0-{BOARD_CELLS - 1}."
            )

        # Check if cell is empty
        if not session.is_empty(index):
            return ValidationResult(
                is_valid=False,
                reason=InvalidMove.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {session.board[index].value}"
            )

        return VALID

    def get_valid_moves(self, session: GameSession) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Cell indices, ascending. Empty when no move is allowed.
        """
        if session.round_over or session.cpu_pending:
            return []
        return empty_cells(session.board)


# Quick test
if __name__ == "__main__":
    from .game_state import Mark

    print("Testing MoveValidator...")

    session = GameSession()
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(session, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    session.place(4, Mark.X)

    # Test invalid move (same cell)
    result = validator.validate_move(session, 4)
    print(f"Move 4 again: valid={result.is_valid}, reason={result.reason}")

    # Test out of range
    result = validator.validate_move(session, 12)
    print(f"Move 12: valid={result.is_valid}, reason={result.reason}")

    print(f"Valid moves: {validator.get_valid_moves(session)}")

    print("\nMoveValidator test done!")
