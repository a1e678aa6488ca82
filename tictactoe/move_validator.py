"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import BOARD_CELLS, GameState, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on empty cells inside the board
    2. Players alternate, so only the current player may move
    3. Game must not be over
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place a marker on (0-8).
            player: Who is trying to move. Defaults to the current player.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        if player is not None and player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {game_state.current_player.value}'s turn, not {player.value}'s"
            )

        return ValidationResult(is_valid=True)

    def parse_cell(self, text: str) -> Optional[int]:
        """
        Turn user input into a cell index.

        Accepts a single index ("4") or a row and column ("1 1" / "1,1").

        Returns:
            The index, or None if the text isn't a cell reference.
        """
        parts = text.replace(",", " ").split()
        try:
            numbers = [int(part) for part in parts]
        except ValueError:
            return None

        if len(numbers) == 1:
            return numbers[0]
        if len(numbers) == 2:
            row, col = numbers
            if not (0 <= row <= 2 and 0 <= col <= 2):
                return None
            return row * 3 + col
        return None

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
