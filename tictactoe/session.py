"""
Game session for TicTacToe.
Ties the board, validator, win checker and AI together for one sitting,
and keeps the score across games.
"""

import threading
from typing import Callable, Optional
from dataclasses import dataclass, field

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import Outcome, WinChecker


@dataclass
class ScoreBoard:
    """Wins and draws for the current session. Not saved anywhere."""
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome):
        if outcome.is_win:
            if outcome.winner == Player.X:
                self.x_wins += 1
            else:
                self.o_wins += 1
        elif outcome.is_draw:
            self.draws += 1

    @property
    def games_played(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def __str__(self) -> str:
        return f"X: {self.x_wins}  O: {self.o_wins}  Draws: {self.draws}"


@dataclass
class PendingAIMove:
    """
    A requested AI move.

    generation is the session generation at request time; if the game
    is reset before the move runs, the result is thrown away.
    """
    generation: int
    done: threading.Event = field(default_factory=threading.Event)
    move: Optional[int] = None
    discarded: bool = False

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.done.wait(timeout)


class GameSession:
    """
    One sitting of TicTacToe games against the AI (or another human).

    Game flow:
    1. Human places a marker
    2. Session checks for a winner / draw
    3. If the game continues, AI picks its move (after an optional delay)
    4. Session applies it and checks again
    """

    def __init__(
        self,
        human_player: Player = GameConfig.HUMAN_PLAYER,
        two_player: bool = False,
        think_delay: float = GameConfig.AI_THINK_DELAY_SECONDS,
        verbose: bool = GameConfig.DEBUG_MODE,
    ):
        """
        Initialize the session.

        Args:
            human_player: Which player the human controls.
            two_player: If True, both sides are human and there's no AI.
            think_delay: Seconds to wait before the AI moves.
            verbose: Print AI search statistics.
        """
        self.human_player = human_player
        self.ai_player = human_player.opposite()
        self.think_delay = think_delay

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = None if two_player else AIPlayer(self.ai_player, verbose=verbose)

        self.scores = ScoreBoard()
        self.game_state = GameState(current_player=GameConfig.FIRST_PLAYER)

        # Bumped on every reset so stale AI moves can be detected
        self.generation = 0
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None

    @property
    def is_ai_turn(self) -> bool:
        return (
            self.ai is not None
            and not self.game_state.is_game_over
            and self.game_state.current_player == self.ai_player
        )

    def new_game(self):
        """Start a fresh game. Scores are kept, pending AI moves are dropped."""
        with self._lock:
            self._drop_pending()
            self.game_state = GameState(current_player=GameConfig.FIRST_PLAYER)

    def play_human_move(self, index: int) -> ValidationResult:
        """
        Apply a human move.

        Args:
            index: Cell index (0-8).

        Returns:
            ValidationResult; the board is unchanged if it is not valid.
        """
        with self._lock:
            if self.is_ai_turn:
                return ValidationResult(
                    is_valid=False,
                    error_message="Wait for the AI to move!"
                )

            result = self.validator.validate_move(self.game_state, index)
            if not result.is_valid:
                return result

            self._apply(index)
            return result

    def play_ai_move(self) -> Optional[int]:
        """Let the AI move right away. Returns the cell it played."""
        with self._lock:
            if not self.is_ai_turn:
                return None

            move = self.ai.get_best_move(self.game_state)
            if move is None:
                print("ERROR: AI could not find a move!")
                return None

            self._apply(move)
            return move

    def ai_hint(self) -> str:
        """Best move for whoever is to play, as a sentence."""
        with self._lock:
            if self.game_state.is_game_over:
                return "Game is already over!"
            advisor = self.ai or AIPlayer(self.game_state.current_player)
            return advisor.get_move_suggestion(self.game_state)

    def request_ai_move(
        self,
        on_done: Optional[Callable[[PendingAIMove], None]] = None
    ) -> PendingAIMove:
        """
        Schedule the AI move after the think delay.

        The move runs on a timer thread. If new_game() is called first,
        the move is discarded and the board is left alone.

        Args:
            on_done: Called with the PendingAIMove once it has run
                (or been found stale).

        Returns:
            The pending move; call wait() to block until it has run.
        """
        with self._lock:
            pending = PendingAIMove(generation=self.generation)

            if self.think_delay <= 0:
                self._finish_ai_move(pending, on_done)
                return pending

            timer = threading.Timer(self.think_delay, self._finish_ai_move, args=(pending, on_done))
            timer.daemon = True
            self._timer = timer
            timer.start()
            return pending

    def _finish_ai_move(
        self,
        pending: PendingAIMove,
        on_done: Optional[Callable[[PendingAIMove], None]]
    ):
        with self._lock:
            if pending.generation != self.generation or not self.is_ai_turn:
                pending.discarded = True
            else:
                pending.move = self.play_ai_move()
            if self._timer is not None and self._timer.args[0] is pending:
                self._timer = None

        pending.done.set()
        if on_done is not None:
            on_done(pending)

    def _apply(self, index: int):
        self.game_state.make_move(index)
        outcome = self.win_checker.update_game_state(self.game_state)
        if outcome.is_over:
            self.scores.record(outcome)

    def cancel(self):
        """Drop any pending AI move (e.g. on quit)."""
        with self._lock:
            self._drop_pending()

    def _drop_pending(self):
        self.generation += 1
        if self._timer is None:
            return

        self._timer.cancel()
        pending = self._timer.args[0]
        self._timer = None

        # A cancelled timer never fires, so release anyone waiting on it
        if not pending.done.is_set():
            pending.discarded = True
            pending.done.set()
