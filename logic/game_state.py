"""
Game state management for TicTacToe.
Tracks the board, current player, scores, and move history.
"""

from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, List, Tuple
from dataclasses import dataclass, field

if TYPE_CHECKING:
    from .win_checker import RoundResult


BOARD_CELLS = 9

Board = List[Optional["Mark"]]


class Mark(Enum):
    """The two player marks."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class Mode(Enum):
    """Who is sitting on the other side of the board."""
    HUMAN = "human"   # Two humans taking turns
    CPU = "cpu"       # Human vs the minimax player


def empty_board() -> Board:
    """A fresh board with all 9 cells empty."""
    return [None] * BOARD_CELLS


def empty_cells(board: Board) -> List[int]:
    """Indices of the empty cells, in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark        # Who made the move
    index: int          # Cell index (0-8)
    move_number: int    # Which move of the round this is (0-8)


@dataclass
class ScoreBoard:
    """Round wins per mark. Lives for the whole session."""

    wins: Dict[Mark, int] = field(
        default_factory=lambda: {Mark.X: 0, Mark.O: 0}
    )

    def __getitem__(self, mark: Mark) -> int:
        return self.wins[mark]

    def record_win(self, mark: Mark):
        self.wins[mark] += 1

    def reset(self):
        for mark in self.wins:
            self.wins[mark] = 0

    def as_tuple(self) -> Tuple[int, int]:
        """(X wins, O wins)"""
        return self.wins[Mark.X], self.wins[Mark.O]


@dataclass
class GameSession:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - The 3x3 board (as 9 cells, row by row)
    - Current turn mark
    - Mode (human vs human, or human vs CPU)
    - Round status and the last evaluated result
    - Scores across rounds
    - Move history for the current round
    """

    # The board - None means empty, otherwise a Mark
    board: Board = field(default_factory=empty_board)

    # Whose turn it is
    current: Mark = Mark.X

    # Who made the first move of this round
    opener: Mark = Mark.X

    mode: Mode = Mode.HUMAN

    # Round status
    round_over: bool = False
    result: Optional["RoundResult"] = None

    scores: ScoreBoard = field(default_factory=ScoreBoard)

    # Move history (current round only)
    moves: List[Move] = field(default_factory=list)

    # Bumped on every new round; stale CPU callbacks compare against it
    round_number: int = 0

    # CPU reply scheduled but not applied yet
    cpu_pending: bool = False

    def is_empty(self, index: int) -> bool:
        return self.board[index] is None

    def place(self, index: int, mark: Mark) -> Move:
        """
        Write a mark into a cell and record it in the history.
        No rule checks here - that's the validator's job.
        """
        self.board[index] = mark
        move = Move(player=mark, index=index, move_number=len(self.moves))
        self.moves.append(move)
        return move

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def clear_round(self):
        """Reset everything that belongs to a single round."""
        self.board = empty_board()
        self.round_over = False
        self.result = None
        self.moves = []
        self.cpu_pending = False
        self.round_number += 1

    def print_board(self):
        """Print the board to console."""
        print("\n  0   1   2")
        print("+---+---+---+")

        for row in range(3):
            row_str = "|"
            for col in range(3):
                mark = self.board[row * 3 + col]
                row_str += f" {mark.value if mark else ' '} |"
            print(f"{row} {row_str}")
            print("+---+---+---+")

        if self.round_over and self.result is not None:
            print(f"\n{self.result.message}")
        else:
            print(f"\nCurrent turn: {self.current.value}")

        x_wins, o_wins = self.scores.as_tuple()
        print(f"Score  X: {x_wins}  O: {o_wins}")


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of a session, handed to the presentation layer.
    """
    board: Tuple[Optional[Mark], ...]
    current: Mark
    mode: Mode
    round_over: bool
    result: Optional["RoundResult"]
    scores: Tuple[int, int]          # (X, O)
    playable: Tuple[bool, ...]
    cpu_pending: bool
    round_number: int

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.result.line if self.result is not None else None


# Quick test
if __name__ == "__main__":
    print("Testing GameSession...")

    session = GameSession()

    # Simulate a few moves (no rule checks here)
    for index in (4, 0, 8):
        print(f"\n{session.current.value} moves to {index}")
        session.place(index, session.current)
        session.current = session.current.opposite()
        session.print_board()

    print(f"\nLast move: {session.last_move}")
    session.clear_round()
    print(f"After clear_round: round {session.round_number}, {len(session.moves)} moves")

    print("\nGame state test done!")
