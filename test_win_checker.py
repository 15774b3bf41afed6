"""
Tests for the win checker.
"""

import pytest

from logic.game_state import Mark
from logic.win_checker import WinChecker, RoundResult, RoundStatus, evaluate

X, O, _ = Mark.X, Mark.O, None


def board_with_line(line, mark):
    """Board with `mark` on `line` and the other mark scattered elsewhere."""
    board = [None] * 9
    for index in line:
        board[index] = mark
    others = [i for i in range(9) if i not in line][:2]
    for index in others:
        board[index] = mark.opposite()
    return board


@pytest.mark.parametrize("mark", [X, O])
@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_completed_line_wins(line, mark):
    result = evaluate(board_with_line(line, mark))

    assert result.status == RoundStatus.WON
    assert result.winner == mark
    assert result.line == line


def test_lines_are_in_canonical_order():
    assert WinChecker.WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_first_line_in_order_is_reported():
    # Top row and left column both complete: the row comes first
    board = [X, X, X,
             X, O, O,
             X, O, O]
    assert evaluate(board).line == (0, 1, 2)


def test_full_board_without_line_is_drawn():
    board = [X, O, X,
             O, X, O,
             O, X, O]
    result = evaluate(board)

    assert result.status == RoundStatus.DRAWN
    assert result.winner is None
    assert result.line is None
    assert result.message == "It's a draw."


def test_win_on_last_cell_beats_draw():
    board = [X, O, X,
             O, X, O,
             O, X, X]
    result = evaluate(board)

    assert result.status == RoundStatus.WON
    assert result.line == (0, 4, 8)


@pytest.mark.parametrize("board", [
    [_] * 9,
    [X, _, _, _, _, _, _, _, _],
    [X, X, _, O, O, _, _, _, _],
    [X, O, X, O, X, O, O, X, _],
])
def test_open_board_is_ongoing(board):
    result = evaluate(board)
    assert result.status == RoundStatus.ONGOING
    assert not result.is_over


def test_completing_top_row():
    board = [X, X, _,
             O, O, _,
             _, _, _]
    assert evaluate(board).status == RoundStatus.ONGOING

    board[2] = X
    assert evaluate(board) == RoundResult(RoundStatus.WON, winner=X, line=(0, 1, 2))
    assert evaluate(board).message == "X wins!"


def test_evaluate_is_idempotent_and_pure():
    board = [X, O, _, _, X, _, O, _, _]
    before = list(board)

    first = evaluate(board)
    second = evaluate(board)

    assert first == second
    assert board == before


def test_helpers_agree_with_evaluate():
    checker = WinChecker()
    won = [O, O, O, X, X, _, X, _, _]
    drawn = [X, O, X, O, X, O, O, X, O]

    assert checker.check_winner(won) == O
    assert checker.get_winning_line(won) == (0, 1, 2)
    assert not checker.check_draw(won)

    assert checker.check_winner(drawn) is None
    assert checker.check_draw(drawn)


def test_wrong_board_size_is_rejected():
    with pytest.raises(ValueError):
        evaluate([None] * 8)
