"""
TicTacToe with an unbeatable computer opponent.
Handles game state, rules, outcome evaluation and the minimax AI.

The two entry points the rest of an application needs:
    evaluate(board)  -> Outcome (win with its line, draw, or no result)
    best_move(board) -> optimal cell index for O, or None on a full board
"""

from .game_state import (
    Board,
    GameState,
    InvalidBoardError,
    Move,
    Player,
    empty_board,
    format_board,
    parse_board,
)
from .win_checker import WINNING_LINES, Outcome, OutcomeKind, WinChecker, evaluate
from .ai_player import AIPlayer, SearchMode, SearchResult, best_move, score_moves, search
from .move_validator import MoveValidator, ValidationResult
from .session import GameSession, ScoreBoard
from .config import GameConfig

__version__ = "1.0.0"
