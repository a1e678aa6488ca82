"""
Game state management for TicTacToe.
Board helpers, players, and the caller-owned game container.

Board representation: list of 9 cells, row-major
  - None: empty
  - Player.X / Player.O: occupied
"""

from enum import Enum
from typing import Optional, List, Sequence
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


Cell = Optional[Player]
Board = List[Cell]

BOARD_SIZE = 3
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE


class InvalidBoardError(ValueError):
    """Raised when something that is not a 9-cell board is passed in."""


def empty_board() -> Board:
    """A fresh board with all 9 cells empty."""
    return [None] * BOARD_CELLS


def check_board(board: Sequence[Cell]) -> None:
    """
    Make sure a board is well-formed.

    Raises:
        InvalidBoardError: if the board doesn't have 9 cells, or a cell
            is something other than None or a Player.
    """
    if len(board) != BOARD_CELLS:
        raise InvalidBoardError(
            f"Board must have exactly {BOARD_CELLS} cells, got {len(board)}"
        )
    for index, cell in enumerate(board):
        if cell is not None and not isinstance(cell, Player):
            raise InvalidBoardError(f"Cell {index} holds invalid value {cell!r}")


def get_empty_cells(board: Sequence[Cell]) -> List[int]:
    """Indices of all empty cells, in ascending order."""
    return [index for index, cell in enumerate(board) if cell is None]


def is_full(board: Sequence[Cell]) -> bool:
    """True if no empty cell is left."""
    return all(cell is not None for cell in board)


def place(board: Sequence[Cell], index: int, player: Player) -> Board:
    """
    Put a marker on a copy of the board.

    The original board is left untouched.
    """
    new_board = list(board)
    new_board[index] = player
    return new_board


def count_markers(board: Sequence[Cell], player: Player) -> int:
    return sum(1 for cell in board if cell == player)


def side_to_move(board: Sequence[Cell], first_player: Player = Player.X) -> Player:
    """Infer whose turn it is from the marker counts."""
    first = count_markers(board, first_player)
    second = count_markers(board, first_player.opposite())
    return first_player if first == second else first_player.opposite()


def is_reachable(board: Sequence[Cell], first_player: Player = Player.X) -> bool:
    """
    Check the marker counts respect strict alternation.

    The first player has either the same number of markers as the
    second player, or exactly one more.
    """
    first = count_markers(board, first_player)
    second = count_markers(board, first_player.opposite())
    return first - second in (0, 1)


def to_row_col(index: int) -> tuple:
    return divmod(index, BOARD_SIZE)


def to_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def parse_board(text: str) -> Board:
    """
    Build a board from text like "XX.OO....".

    '.', '_' and '-' are empty cells. Spaces, commas, '|' and newlines
    are separators and skipped, so "XX_|OO_|___" works too.

    Raises:
        InvalidBoardError: if the text doesn't describe exactly 9 cells.
    """
    board: Board = []
    for char in text:
        upper = char.upper()
        if upper in ("X", "O"):
            board.append(Player(upper))
        elif char in (".", "_", "-"):
            board.append(None)
        elif char in ("|", "\n", " ", ","):
            continue
        else:
            raise InvalidBoardError(f"Unexpected character {char!r} in board text")

    check_board(board)
    return board


def format_board(board: Sequence[Cell]) -> str:
    """Compact one-line form, e.g. 'XX.OO....'."""
    return "".join(cell.value if cell is not None else "." for cell in board)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Ply number, starting at 0

    @property
    def row(self) -> int:
        return self.index // BOARD_SIZE

    @property
    def col(self) -> int:
        return self.index % BOARD_SIZE


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Current player
    - Move history
    - Game status (ongoing, won, draw)

    The winner is filled in by WinChecker.update_game_state, the state
    itself only enforces empty-cell placement and turn alternation.
    """

    board: Board = field(default_factory=empty_board)

    # Current player's turn
    current_player: Player = Player.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    winning_line: Optional[tuple] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current player's marker at a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= index < BOARD_CELLS:
            print(f"Cell {index} is off the board!")
            return False

        if self.board[index] is not None:
            print(f"Cell {index} is already occupied!")
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves),
        ))

        # Outcome is checked by WinChecker, just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        return get_empty_cells(self.board)

    def snapshot(self) -> Board:
        """A copy of the board for passing to the evaluator or the AI."""
        return list(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
        )

    def render(self) -> str:
        """The board as a small text grid with cell numbers on empty cells."""
        lines = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                index = to_index(row, col)
                cell = self.board[index]
                cells.append(cell.value if cell is not None else str(index))
            lines.append(" " + " | ".join(cells))
            if row < BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.render())

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
