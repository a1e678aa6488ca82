"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Cell, GameState, Player, check_board, get_empty_cells, place, to_row_col
from .win_checker import outcome_of


INFINITY = float('inf')
WIN_SCORE = GameConfig.WIN_SCORE


@dataclass(frozen=True)
class SearchMode:
    """
    Whose turn it is inside the search tree.

    MaximizeFor(O) means O is to move and the score is O's score;
    MinimizeFor(X) means X is to move and is trying to push O's score down.
    """
    mover: Player
    maximizing: bool

    @classmethod
    def maximize_for(cls, player: Player) -> "SearchMode":
        return cls(player, True)

    @classmethod
    def minimize_for(cls, player: Player) -> "SearchMode":
        return cls(player, False)

    @property
    def scoring_player(self) -> Player:
        """The player the scores are measured for."""
        return self.mover if self.maximizing else self.mover.opposite()

    def next(self) -> "SearchMode":
        return SearchMode(self.mover.opposite(), not self.maximizing)

    def __str__(self) -> str:
        kind = "MaximizeFor" if self.maximizing else "MinimizeFor"
        return f"{kind}({self.mover.value})"


@dataclass
class SearchResult:
    """Score of a candidate move, from the searching player's side."""
    move: int
    score: int


@dataclass
class SearchStats:
    """Counters filled in while searching (for debugging)."""
    positions_evaluated: int = 0


def search(
    board: Sequence[Cell],
    depth: int,
    mode: SearchMode,
    alpha: float = -INFINITY,
    beta: float = INFINITY,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Minimax algorithm with alpha-beta pruning.

    Args:
        board: Position to score. Never modified.
        depth: Plies played since the root move.
        mode: Who moves next and whether they maximize or minimize.
        alpha: Best score the maximizer is already assured of.
        beta: Best score the minimizer is already assured of.
        stats: Optional counters to update.

    Returns:
        10 - depth if the scoring player has won, depth - 10 if the
        opponent has won, 0 for a draw, otherwise the minimax value.
    """
    if stats is not None:
        stats.positions_evaluated += 1

    outcome = outcome_of(board)
    if outcome.is_win:
        if outcome.winner == mode.scoring_player:
            return WIN_SCORE - depth  # Win (prefer faster wins)
        return depth - WIN_SCORE  # Loss (prefer slower losses)
    if outcome.is_draw:
        return 0

    child_mode = mode.next()

    if mode.maximizing:
        max_score = -INFINITY
        for index in get_empty_cells(board):
            score = search(place(board, index, mode.mover), depth + 1, child_mode, alpha, beta, stats)
            max_score = max(max_score, score)
            alpha = max(alpha, max_score)
            if beta <= alpha:
                break  # Prune
        return max_score
    else:
        min_score = INFINITY
        for index in get_empty_cells(board):
            score = search(place(board, index, mode.mover), depth + 1, child_mode, alpha, beta, stats)
            min_score = min(min_score, score)
            beta = min(beta, min_score)
            if beta <= alpha:
                break  # Prune
        return min_score


def best_move(
    board: Sequence[Cell],
    side_to_move: Player = Player.O,
    stats: Optional[SearchStats] = None,
) -> Optional[int]:
    """
    Pick the optimal cell for side_to_move.

    Empty cells are tried in ascending order and a later cell only
    replaces the current pick if it scores strictly higher, so the
    lowest index wins ties.

    Args:
        board: 9-cell board with no decided outcome.
        side_to_move: The player the move is chosen for.
        stats: Optional counters to update.

    Returns:
        Cell index (0-8), or None if the board is full.
    """
    check_board(board)

    best: Optional[SearchResult] = None
    alpha = -INFINITY
    reply_mode = SearchMode.minimize_for(side_to_move.opposite())

    for index in get_empty_cells(board):
        # alpha holds the best root score so far; a move that can't beat
        # it comes back at or below alpha
        score = search(place(board, index, side_to_move), 0, reply_mode, alpha, INFINITY, stats)
        if best is None or score > best.score:
            best = SearchResult(move=index, score=score)
            alpha = max(alpha, score)

    return best.move if best is not None else None


def score_moves(board: Sequence[Cell], side_to_move: Player = Player.O) -> List[SearchResult]:
    """
    Exact score of every empty cell, in ascending cell order.

    Each move gets a full alpha-beta window so the scores are the true
    minimax values, not bounds.
    """
    check_board(board)
    reply_mode = SearchMode.minimize_for(side_to_move.opposite())
    return [
        SearchResult(move=index, score=search(place(board, index, side_to_move), 0, reply_mode))
        for index in get_empty_cells(board)
    ]


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Player = Player.O, verbose: bool = GameConfig.DEBUG_MODE):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            verbose: Print search statistics after each move
        """
        self.player = player
        self.verbose = verbose

        # How many positions the last search looked at (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of best move, or None if no moves available.
        """
        self.moves_evaluated = 0

        if game_state.current_player != self.player:
            print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        stats = SearchStats()
        move = best_move(game_state.snapshot(), self.player, stats)
        self.moves_evaluated = stats.positions_evaluated

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {move}")

        return move

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        move = best_move(game_state.snapshot(), game_state.current_player)

        if move is None:
            return "No moves available!"

        row, col = to_row_col(move)
        return f"Place {game_state.current_player.value} at cell {move} (row {row}, col {col})"
