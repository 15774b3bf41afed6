"""
Game engine for TicTacToe.

Owns the session and drives every state change:
- round start / next round / new game / score reset
- applying human moves and answering with the CPU
- win/draw detection and score keeping

Front-ends talk to it through plain method calls or `dispatch(action)`,
and read the state back through `snapshot()`.
"""

from typing import Callable, Optional, Union
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameSession, GameSnapshot, Mark, Mode, BOARD_CELLS
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, RoundResult, RoundStatus
from .ai_player import AIPlayer


# schedule(delay_ms, callback) - same shape as tkinter's Tk.after
Scheduler = Callable[[int, Callable[[], None]], object]


# ==================== ACTIONS ====================

@dataclass(frozen=True)
class SelectCell:
    index: int


@dataclass(frozen=True)
class ChangeMode:
    mode: Mode


@dataclass(frozen=True)
class NextRound:
    pass


@dataclass(frozen=True)
class NewGame:
    pass


@dataclass(frozen=True)
class ResetScores:
    pass


Action = Union[SelectCell, ChangeMode, NextRound, NewGame, ResetScores]


class GameEngine:
    """
    Controller for a TicTacToe session.

    Round flow:
    1. start_round() clears the board and picks who opens
    2. apply_move() places the current mark and checks for a result
    3. In HUMAN mode the turn flips; in CPU mode the AI answers
    4. On a win or draw the round is over until the next start_round()
    """

    def __init__(
        self,
        mode: Optional[Mode] = None,
        config: Optional[GameConfig] = None,
        schedule: Optional[Scheduler] = None
    ):
        """
        Initialize the engine and start the first round.

        Args:
            mode: HUMAN or CPU. Defaults to config.DEFAULT_MODE.
            config: Game configuration. Uses defaults if not provided.
            schedule: Optional delayed-call hook used to pace the CPU's
                reply. Without it the CPU answers immediately.
        """
        self.config = config or GameConfig()
        self.schedule = schedule

        self.cpu_mark = self.config.CPU_MARK
        self.human_mark = self.cpu_mark.opposite()

        self.session = GameSession(
            current=self.config.DEFAULT_STARTING_MARK,
            mode=mode or self.config.DEFAULT_MODE
        )
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.cpu_mark, self.config)

        self.start_round(keep_turn=False)

    # ==================== ROUND LIFECYCLE ====================

    def start_round(self, keep_turn: bool = False):
        """
        Clear the board and start a new round.

        Args:
            keep_turn: Keep the current turn mark instead of going back
                to the default starting mark.
        """
        session = self.session
        session.clear_round()

        if not keep_turn:
            session.current = self.config.DEFAULT_STARTING_MARK
        session.opener = session.current

        self._debug(f"Round {session.round_number} started "
                    f"({session.mode.value}, {session.current.value} opens)")

        if session.mode == Mode.CPU and session.current == self.cpu_mark:
            self._request_cpu_move()

    def next_round(self):
        """
        Move on to the next round.

        HUMAN mode: the player who did not make the last move opens.
        CPU mode: the same mark opens every round.

        Only allowed once the current round is over; mid-round this does
        nothing (use new_game() to abandon a round).

        Returns:
            True if a new round was started.
        """
        session = self.session

        if not session.round_over:
            self._debug("Next round ignored: round still in progress")
            return False

        if session.mode == Mode.HUMAN:
            session.current = session.last_move.player.opposite()
        else:
            session.current = session.opener

        self.start_round(keep_turn=True)
        return True

    def new_game(self):
        """Start over with the default starting mark. Scores are kept."""
        self.start_round(keep_turn=False)

    def reset_scores(self):
        """Zero both scores and start a fresh round."""
        self.session.scores.reset()
        self.session.current = self.config.DEFAULT_STARTING_MARK
        self.start_round(keep_turn=False)

    def set_mode(self, mode: Mode):
        """
        Switch between HUMAN and CPU mode.
        A half-played round is thrown away.
        """
        if mode == self.session.mode:
            return
        self.session.mode = mode
        self.start_round(keep_turn=True)

    # ==================== MOVES ====================

    def apply_move(self, index: int) -> ValidationResult:
        """
        Play the current mark at `index`.

        Invalid moves leave the session untouched and come back as a
        ValidationResult with is_valid=False and a reason.

        Returns:
            ValidationResult for the human move.
        """
        session = self.session

        validation = self.validator.validate_move(session, index)
        if not validation.is_valid:
            self._debug(f"Move rejected: {validation.error_message}")
            return validation

        self._play(index, session.current)

        if session.round_over:
            return validation

        if session.mode == Mode.CPU:
            self._request_cpu_move()
        else:
            session.current = session.current.opposite()

        return validation

    def cpu_move(self, round_number: Optional[int] = None) -> bool:
        """
        Let the AI play its move.

        Args:
            round_number: Round the move was requested in. A callback
                from an earlier round is ignored.

        Returns:
            True if the AI placed a mark.
        """
        session = self.session

        if round_number is not None and round_number != session.round_number:
            return False
        if not session.cpu_pending or session.round_over or session.mode != Mode.CPU:
            return False

        session.cpu_pending = False

        index = self.ai.get_best_move(session)
        if index is None:
            return False

        self._debug(f"CPU plays {self.cpu_mark.value} at {index}")
        self._play(index, self.cpu_mark)

        if not session.round_over:
            session.current = self.human_mark

        return True

    def _request_cpu_move(self):
        session = self.session
        session.cpu_pending = True

        if self.schedule is None:
            self.cpu_move()
            return

        round_number = session.round_number
        self.schedule(
            self.config.CPU_MOVE_DELAY_MS,
            lambda: self.cpu_move(round_number)
        )

    def _play(self, index: int, mark: Mark):
        """Place a mark and end the round if that decided it."""
        session = self.session
        session.place(index, mark)

        result = self.win_checker.evaluate(session.board)
        if result.is_over:
            self._end_round(result)

    def _end_round(self, result: RoundResult):
        session = self.session
        session.round_over = True
        session.result = result
        session.cpu_pending = False

        if result.status == RoundStatus.WON:
            session.scores.record_win(result.winner)

        if self.config.DEBUG_MODE:
            session.print_board()

    # ==================== QUERIES ====================

    def is_playable(self, index: int) -> bool:
        """True if a human could play `index` right now."""
        session = self.session
        return (
            0 <= index < BOARD_CELLS
            and not session.round_over
            and not session.cpu_pending
            and session.is_empty(index)
        )

    @property
    def result(self) -> Optional[RoundResult]:
        return self.session.result

    def snapshot(self) -> GameSnapshot:
        """Immutable copy of everything the presentation layer shows."""
        session = self.session
        return GameSnapshot(
            board=tuple(session.board),
            current=session.current,
            mode=session.mode,
            round_over=session.round_over,
            result=session.result,
            scores=session.scores.as_tuple(),
            playable=tuple(self.is_playable(i) for i in range(BOARD_CELLS)),
            cpu_pending=session.cpu_pending,
            round_number=session.round_number
        )

    def dispatch(self, action: Action) -> GameSnapshot:
        """
        Apply one user intent and return the new state.

        Raises:
            TypeError: for anything that isn't a known action.
        """
        if isinstance(action, SelectCell):
            self.apply_move(action.index)
        elif isinstance(action, ChangeMode):
            self.set_mode(action.mode)
        elif isinstance(action, NextRound):
            self.next_round()
        elif isinstance(action, NewGame):
            self.new_game()
        elif isinstance(action, ResetScores):
            self.reset_scores()
        else:
            raise TypeError(f"Unknown action: {action!r}")

        return self.snapshot()

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(message)


# Quick test
if __name__ == "__main__":
    print("Testing GameEngine...")

    engine = GameEngine(mode=Mode.CPU)

    # Human always takes the first free cell
    while not engine.session.round_over:
        index = engine.session.board.index(None)
        print(f"\nHuman plays {engine.human_mark.value} at {index}")
        engine.apply_move(index)
        engine.session.print_board()

    print(f"\nResult: {engine.result.message}")
    assert engine.result.winner != engine.human_mark

    engine.next_round()
    print(f"Next round opens with {engine.session.current.value}")

    print("\nGameEngine test done!")
