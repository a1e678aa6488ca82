"""
Tests for the minimax AI.
"""

import random
import sys

import pytest

from tictactoe.ai_player import (
    AIPlayer,
    SearchMode,
    SearchStats,
    best_move,
    score_moves,
    search,
)
from tictactoe.game_state import GameState, Player, empty_board, get_empty_cells, parse_board, place
from tictactoe.win_checker import evaluate

X, O = Player.X, Player.O


def plain_minimax(board, depth, mover, scorer):
    """Exhaustive minimax without pruning, for comparison."""
    outcome = evaluate(board)
    if outcome.is_win:
        return 10 - depth if outcome.winner == scorer else depth - 10
    if outcome.is_draw:
        return 0

    scores = [
        plain_minimax(place(board, index, mover), depth + 1, mover.opposite(), scorer)
        for index in get_empty_cells(board)
    ]
    return max(scores) if mover == scorer else min(scores)


def reachable_positions(min_markers=0):
    """Every undecided position reachable from the empty board with X first."""
    seen = set()

    def walk(board, mover):
        key = tuple(board)
        if key in seen:
            return
        seen.add(key)
        if evaluate(board).is_over:
            return
        for index in get_empty_cells(board):
            walk(place(board, index, mover), mover.opposite())

    walk(empty_board(), X)
    return [
        list(key) for key in sorted(seen, key=lambda k: [c.value if c else "." for c in k])
        if not evaluate(list(key)).is_over and sum(c is not None for c in key) >= min_markers
    ]


# ==================== SEARCH MODE ====================

def test_search_mode_alternates():
    mode = SearchMode.maximize_for(O)
    assert mode.scoring_player == O
    reply = mode.next()
    assert reply == SearchMode.minimize_for(X)
    assert reply.scoring_player == O
    assert reply.next() == mode
    assert str(reply) == "MinimizeFor(X)"


# ==================== TERMINAL SCORES ====================

def test_terminal_scores_depend_on_depth():
    o_won = parse_board("OOO|XX.|X..")
    x_won = parse_board("XXX|OO.|O..")
    draw = parse_board("XOX|OXO|OXO")
    mode = SearchMode.minimize_for(X)

    assert search(o_won, 0, mode) == 10
    assert search(o_won, 3, mode) == 7
    assert search(x_won, 0, mode) == -10
    assert search(x_won, 4, mode) == -6
    assert search(draw, 2, mode) == 0


def test_search_leaves_board_untouched():
    board = parse_board("X..|.O.|..X")
    before = list(board)
    search(board, 0, SearchMode.maximize_for(O))
    assert board == before


# ==================== CONCRETE SCENARIOS ====================

def test_empty_board_opens_on_corner_or_center():
    assert best_move(empty_board()) in {0, 2, 4, 6, 8}


def test_blocks_immediate_threat():
    assert best_move(parse_board("XX.|.O.|...")) == 2


def test_own_win_beats_block():
    # X threatens 2, but O can finish row 1 at 5 straight away
    assert best_move(parse_board("XX.|OO.|...")) == 5


def test_takes_winning_move():
    assert best_move(parse_board("OO.|XX.|...")) == 2


def test_prefers_faster_win():
    # O can finish row 0 at 1 right now; nothing else scores as high
    board = parse_board("O.O|XX.|X..")
    assert best_move(board) == 1
    scores = {result.move: result.score for result in score_moves(board)}
    assert scores[1] == 10
    assert max(scores.values()) == 10


def test_lowest_index_wins_ties():
    # All corners and the center draw from the empty board, so 0 comes first
    assert best_move(empty_board()) == 0


def test_full_board_has_no_move():
    assert best_move(parse_board("XOX|OXO|OXO")) is None


def test_single_empty_cell():
    assert best_move(parse_board("XOX|OXO|OX.")) == 8


def test_can_search_for_x():
    assert best_move(parse_board("XX.|OO.|..."), side_to_move=X) == 2
    assert best_move(parse_board("OO.|X..|X.."), side_to_move=X) == 2


def test_best_move_is_idempotent():
    board = parse_board("X..|...|..O")
    board[4] = X
    assert best_move(board) == best_move(board)


def test_stats_count_positions():
    stats = SearchStats()
    best_move(parse_board("X..|.O.|..X"), stats=stats)
    assert stats.positions_evaluated > 0


# ==================== OPTIMAL PLAY ====================

def _o_never_loses(game_board):
    """Let X try every move; O always answers with best_move."""
    for x_move in get_empty_cells(game_board):
        board = place(game_board, x_move, X)
        outcome = evaluate(board)
        assert not (outcome.is_win and outcome.winner == X), board
        if outcome.is_over:
            continue

        o_move = best_move(board)
        assert o_move is not None
        board = place(board, o_move, O)
        if evaluate(board).is_over:
            assert evaluate(board).winner != X
            continue

        _o_never_loses(board)


def test_never_loses_against_any_x_play():
    _o_never_loses(empty_board())


def test_never_loses_against_random_x():
    rng = random.Random(1234)
    for _ in range(50):
        board = empty_board()
        mover = X
        while not evaluate(board).is_over:
            if mover == X:
                index = rng.choice(get_empty_cells(board))
            else:
                index = best_move(board)
            board = place(board, index, mover)
            mover = mover.opposite()
        assert evaluate(board).winner != X


# ==================== PRUNING ====================

def test_pruned_scores_match_exhaustive_search():
    for board in reachable_positions(min_markers=5):
        mover = X if board.count(X) == board.count(O) else O
        expected = [
            plain_minimax(place(board, index, mover), 0, mover.opposite(), mover)
            for index in get_empty_cells(board)
        ]
        results = score_moves(board, mover)
        assert [result.score for result in results] == expected

        # First cell with the top exhaustive score
        assert best_move(board, mover) == get_empty_cells(board)[expected.index(max(expected))]


@pytest.mark.parametrize("board_text", ["....X....", "X...O....", "XO......."])
def test_early_positions_match_exhaustive_search(board_text):
    board = parse_board(board_text)
    mover = X if board.count(X) == board.count(O) else O
    expected = [
        plain_minimax(place(board, index, mover), 0, mover.opposite(), mover)
        for index in get_empty_cells(board)
    ]
    assert [result.score for result in score_moves(board, mover)] == expected
    assert best_move(board, mover) == get_empty_cells(board)[expected.index(max(expected))]


# ==================== AI PLAYER ====================

def test_ai_player_moves_on_its_turn():
    game = GameState()
    game.make_move(0)

    ai = AIPlayer(O)
    move = ai.get_best_move(game)
    assert move == 4
    assert ai.moves_evaluated > 0


def test_ai_player_refuses_out_of_turn(capsys):
    ai = AIPlayer(O)
    assert ai.get_best_move(GameState()) is None
    assert "not O's turn" in capsys.readouterr().out


def test_ai_player_verbose_prints_stats(capsys):
    game = GameState()
    game.make_move(4)
    AIPlayer(O, verbose=True).get_best_move(game)
    assert "positions" in capsys.readouterr().out


def test_move_suggestion():
    game = GameState(board=parse_board("XX.|.O.|..."), current_player=O)
    assert AIPlayer(O).get_move_suggestion(game) == "Place O at cell 2 (row 0, col 2)"

    full = GameState(board=parse_board("XOX|OXO|OXO"))
    assert AIPlayer(O).get_move_suggestion(full) == "No moves available!"


def run_all_tests():
    """Run all tests."""
    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
