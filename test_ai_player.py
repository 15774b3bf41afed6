"""
Tests for the minimax AI player.
"""

import random

import pytest

from logic.ai_player import AIPlayer, SearchResult
from logic.game_state import Mark
from logic.win_checker import RoundStatus, evaluate

X, O, _ = Mark.X, Mark.O, None

CORNERS = (0, 2, 6, 8)


@pytest.fixture
def ai():
    return AIPlayer(Mark.O)


def test_answers_center_opening_with_a_corner(ai):
    board = [_, _, _,
             _, X, _,
             _, _, _]

    result = ai.best_move(board, O)

    assert result.index in CORNERS
    assert result.index == 0
    # Forced draw from here
    assert result.score == 0


def test_takes_a_winning_move(ai):
    board = [O, O, _,
             X, X, _,
             X, _, _]

    assert ai.best_move(board, O) == SearchResult(10, 2)


def test_blocks_the_only_threat(ai):
    board = [_, _, _,
             X, X, _,
             O, _, _]

    result = ai.best_move(board, O)

    assert result.index == 5
    assert result.score >= 0


def test_no_preference_for_faster_wins(ai):
    # Cell 5 wins at once, but cell 2 (block + fork) also forces a win
    # and comes first in index order.
    board = [X, X, _,
             O, O, _,
             _, _, X]

    assert ai.best_move(board, O) == SearchResult(10, 2)


@pytest.mark.parametrize("board, expected", [
    ([X, O, X, O, X, O, O, X, O], SearchResult(0)),
    ([O, O, O, X, X, _, X, _, _], SearchResult(10)),
    ([X, X, X, O, O, _, _, _, _], SearchResult(-10)),
])
def test_terminal_positions_have_no_move(ai, board, expected):
    assert ai.best_move(board, X) == expected


def test_minimizer_picks_lowest_score_first_index(ai):
    # X to move (minimizer from O's point of view) can win at 2
    board = [X, X, _,
             O, O, _,
             _, _, _]

    assert ai.best_move(board, X) == SearchResult(-10, 2)


def test_search_leaves_board_untouched(ai):
    board = [X, _, _, _, O, _, _, _, X]
    before = list(board)

    ai.best_move(board, O)

    assert board == before
    assert ai.positions_evaluated > 1


def test_wrong_board_size_is_rejected(ai):
    with pytest.raises(ValueError):
        ai.best_move([None] * 10, O)


def play_random_game(rng: random.Random, ai: AIPlayer, board, to_move: Mark):
    """Random legal moves for the opponent, minimax moves for the AI."""
    board = list(board)
    while not evaluate(board).is_over:
        if to_move == ai.player:
            index = ai.best_move(board, to_move).index
        else:
            index = rng.choice([i for i, cell in enumerate(board) if cell is None])
        board[index] = to_move
        to_move = to_move.opposite()
    return evaluate(board)


@pytest.mark.parametrize("seed", range(20))
def test_never_loses_as_second_player(seed):
    ai = AIPlayer(Mark.O)
    result = play_random_game(random.Random(seed), ai, [None] * 9, X)

    assert result.status in (RoundStatus.DRAWN, RoundStatus.WON)
    if result.status == RoundStatus.WON:
        assert result.winner == O


@pytest.mark.parametrize("seed", range(20))
def test_never_loses_as_first_player(seed):
    ai = AIPlayer(Mark.X)
    # Corner opening, which is what the AI picks on an empty board
    opened = [X, _, _, _, _, _, _, _, _]
    result = play_random_game(random.Random(seed), ai, opened, O)

    assert result.status in (RoundStatus.DRAWN, RoundStatus.WON)
    if result.status == RoundStatus.WON:
        assert result.winner == X


def test_empty_board_opening_is_first_corner():
    ai = AIPlayer(Mark.X)
    assert ai.best_move([None] * 9, X) == SearchResult(0, 0)
