"""
Win checker for TicTacToe.
Classifies a board as still going, won (with the winning line), or drawn.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

from .game_state import BOARD_CELLS, Mark


Line = Tuple[int, int, int]


class RoundStatus(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class RoundResult:
    """Outcome of evaluating a board. Never mutated after creation."""
    status: RoundStatus
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_over(self) -> bool:
        return self.status != RoundStatus.ONGOING

    @property
    def message(self) -> str:
        """End-of-round text for the result dialog."""
        if self.status == RoundStatus.WON:
            return f"{self.winner.value} wins!"
        if self.status == RoundStatus.DRAWN:
            return "It's a draw."
        return "Game in progress"


ONGOING = RoundResult(RoundStatus.ONGOING)
DRAWN = RoundResult(RoundStatus.DRAWN)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, checked in this order
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Sequence[Optional[Mark]]) -> RoundResult:
        """
        Classify a board.

        Args:
            board: 9 cells, row by row. Not modified.

        Returns:
            WON with the mark and line of the first complete line,
            DRAWN if the board is full, ONGOING otherwise.
        """
        if len(board) != BOARD_CELLS:
            raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")

        line = self.get_winning_line(board)
        if line is not None:
            return RoundResult(RoundStatus.WON, winner=board[line[0]], line=line)

        if all(cell is not None for cell in board):
            return DRAWN

        return ONGOING

    def get_winning_line(self, board: Sequence[Optional[Mark]]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line as an index triple, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_winner(self, board: Sequence[Optional[Mark]]) -> Optional[Mark]:
        """The winning mark, or None if no line is complete."""
        line = self.get_winning_line(board)
        return board[line[0]] if line is not None else None

    def check_draw(self, board: Sequence[Optional[Mark]]) -> bool:
        """True if the board is full and nobody completed a line."""
        return self.evaluate(board).status == RoundStatus.DRAWN


_checker = WinChecker()


def evaluate(board: Sequence[Optional[Mark]]) -> RoundResult:
    """Module-level shortcut for WinChecker().evaluate(board)."""
    return _checker.evaluate(board)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    X, O = Mark.X, Mark.O

    # Test 1: Top row
    result = evaluate([X, X, X, O, O, None, None, None, None])
    print(f"Test 1 (row): {result}")
    assert result.winner == X and result.line == (0, 1, 2)

    # Test 2: Full board, no line
    result = evaluate([X, O, X, O, X, O, O, X, O])
    print(f"Test 2 (draw): {result.message}")
    assert result.status == RoundStatus.DRAWN

    # Test 3: Still going
    result = evaluate([X, None, None, None, O, None, None, None, None])
    print(f"Test 3 (ongoing): {result.status.value}")
    assert not result.is_over

    print("\nWinChecker test done!")
