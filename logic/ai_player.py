"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, NamedTuple, Sequence

from .config import GameConfig
from .game_state import Mark, GameSession, BOARD_CELLS
from .win_checker import WinChecker, RoundStatus


class SearchResult(NamedTuple):
    """Score of a position, plus the move that achieves it (None at terminal positions)."""
    score: int
    index: Optional[int] = None


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI searches the full game tree every time: no pruning, no depth
    limit, no caching. It will win if possible, block the opponent if
    needed, and never lose (at worst, draw).

    Ties are broken by the lowest cell index, so play is fully
    deterministic.
    """

    def __init__(self, player: Mark = Mark.O, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: O)
            config: Game configuration. Uses defaults if not provided.
        """
        self.player = player
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def best_move(self, board: Sequence[Optional[Mark]], player_to_move: Mark) -> SearchResult:
        """
        Find the minimax move for `player_to_move`.

        Args:
            board: Current board. Left untouched; the search runs on a copy.
            player_to_move: Mark whose move it is.

        Returns:
            SearchResult(score, index). Scores are from the AI's point of view.
            At a finished position the index is None.
        """
        if len(board) != BOARD_CELLS:
            raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")

        self.positions_evaluated = 0
        result = self._minimax(list(board), player_to_move)

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {result.index} (score: {result.score})")

        return result

    def _minimax(self, board: list, player_to_move: Mark) -> SearchResult:
        """
        Plain minimax over the full tree.

        Places a mark, recurses, then clears the cell again so every
        sibling branch sees the same board.
        """
        self.positions_evaluated += 1

        # Check terminal states
        result = self.win_checker.evaluate(board)

        if result.status == RoundStatus.WON:
            if result.winner == self.player:
                return SearchResult(self.config.WIN_SCORE)
            return SearchResult(self.config.LOSS_SCORE)
        if result.status == RoundStatus.DRAWN:
            return SearchResult(self.config.DRAW_SCORE)

        maximizing = player_to_move == self.player
        best: Optional[SearchResult] = None

        for index in range(BOARD_CELLS):
            if board[index] is not None:
                continue

            board[index] = player_to_move
            score = self._minimax(board, player_to_move.opposite()).score
            board[index] = None

            # Strict comparison: first index wins ties
            if (best is None
                    or (maximizing and score > best.score)
                    or (not maximizing and score < best.score)):
                best = SearchResult(score, index)

        return best

    def get_best_move(self, session: GameSession) -> Optional[int]:
        """
        Get the AI's move for the current session.

        Returns:
            Cell index of the best move, or None if no moves are available.
        """
        if session.round_over:
            return None

        if all(cell is not None for cell in session.board):
            return None

        return self.best_move(session.board, self.player).index


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    X, O, _ = Mark.X, Mark.O, None
    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = [X, X, _,
             _, O, _,
             _, _, _]
    print("\nAI is O. X is about to win with 2!")
    result = ai.best_move(board, O)
    print(f"AI's move: {result.index} (score {result.score}, {ai.positions_evaluated} positions)")
    assert result.index == 2, f"Expected 2, got {result.index}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = [O, O, _,
             X, X, _,
             X, _, _]
    print("\nAI is O. Can win with 2!")
    result = ai.best_move(board, O)
    print(f"AI's move: {result.index} (score {result.score})")
    assert result == SearchResult(10, 2), f"Expected win at 2, got {result}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
