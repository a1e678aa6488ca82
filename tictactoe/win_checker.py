"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

from .game_state import Cell, GameState, Player, check_board, is_full


# All possible winning lines, in the order they are checked
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
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


class OutcomeKind(Enum):
    NO_RESULT = "no_result"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    Only a WIN carries a winner and the three cells that formed the line.
    """
    kind: OutcomeKind
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def no_result(cls) -> "Outcome":
        return cls(OutcomeKind.NO_RESULT)

    @classmethod
    def win(cls, player: Player, line: Tuple[int, int, int]) -> "Outcome":
        return cls(OutcomeKind.WIN, winner=player, line=tuple(line))

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @property
    def is_win(self) -> bool:
        return self.kind is OutcomeKind.WIN

    @property
    def is_draw(self) -> bool:
        return self.kind is OutcomeKind.DRAW

    @property
    def is_over(self) -> bool:
        return self.kind is not OutcomeKind.NO_RESULT

    def __str__(self) -> str:
        if self.is_win:
            return f"Win({self.winner.value}, {list(self.line)})"
        if self.is_draw:
            return "Draw"
        return "NoResult"


def _line_owner(board: Sequence[Cell], line: Tuple[int, int, int]) -> Optional[Player]:
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def evaluate(board: Sequence[Cell]) -> Outcome:
    """
    Evaluate a board.

    Lines are checked in WINNING_LINES order and the first complete
    line decides the winner, so boards with more than one complete line
    still get a single deterministic answer.

    Args:
        board: 9-cell board. Can be empty, full, or mid-game.

    Returns:
        Outcome.win(player, line), Outcome.draw() or Outcome.no_result().

    Raises:
        InvalidBoardError: if the board is malformed.
    """
    check_board(board)
    return outcome_of(board)


def outcome_of(board: Sequence[Cell]) -> Outcome:
    """Same as evaluate() but skips the board shape check."""
    for line in WINNING_LINES:
        owner = _line_owner(board, line)
        if owner is not None:
            return Outcome.win(owner, line)

    if is_full(board):
        return Outcome.draw()

    return Outcome.no_result()


class WinChecker:
    """
    Checks for win conditions on a GameState.

    Win condition: 3 markers of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, game_state: GameState) -> Outcome:
        return evaluate(game_state.board)

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return self.evaluate(game_state).winner

    def check_draw(self, game_state: GameState) -> bool:
        """True if the board is full and nobody has a line."""
        return self.evaluate(game_state).is_draw

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """The winning line as three cell indices, or None."""
        return self.evaluate(game_state).line

    def update_game_state(self, game_state: GameState) -> Outcome:
        """
        Record winner/draw information on the game state.

        Args:
            game_state: The game state to update.

        Returns:
            The outcome that was recorded.
        """
        outcome = self.evaluate(game_state)

        if outcome.is_win:
            game_state.winner = outcome.winner
            game_state.winning_line = outcome.line
            game_state.is_game_over = True
        elif outcome.is_draw:
            game_state.is_draw = True
            game_state.is_game_over = True

        return outcome
