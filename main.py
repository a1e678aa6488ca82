"""
Console front end for TicTacToe.

This script ties together:
- Game session (board, turns, scores)
- Logic (outcome evaluation, move validation, AI)

Run this script to play TicTacToe against the computer!
"""

from typing import Optional

from tictactoe.config import GameConfig
from tictactoe.game_state import Player
from tictactoe.session import GameSession


class TicTacToeConsole:
    """
    Terminal controller for a TicTacToe session.

    Game flow:
    1. Human types a cell (0-8, or "row col")
    2. Session applies it and checks for a winner
    3. AI "thinks" for a moment, then plays its best move
    4. Repeat until someone wins or it's a draw, then offer another game
    """

    def __init__(
        self,
        human_player: Player = GameConfig.HUMAN_PLAYER,
        two_player: bool = False,
        think_delay: float = GameConfig.AI_THINK_DELAY_SECONDS,
        verbose: bool = GameConfig.DEBUG_MODE,
    ):
        self.session = GameSession(
            human_player=human_player,
            two_player=two_player,
            think_delay=think_delay,
            verbose=verbose,
        )
        self.two_player = two_player
        self.is_running = False

        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        if two_player:
            print("   Two player mode")
        else:
            print(f"   Human plays: {human_player.value}")
            print(f"   AI plays:    {human_player.opposite().value}")
        print("="*40 + "\n")

    def start(self):
        """Play games until the user quits."""
        print("Enter a cell (0-8 or 'row col'), 'h' for a hint, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        while self.is_running:
            self._game_loop()
            if self.is_running:
                self._show_game_result()
                self.is_running = self._ask_play_again()
                if self.is_running:
                    self.session.new_game()

        self.session.cancel()

    def _game_loop(self):
        """Run one game."""
        game = self.session.game_state
        game.print_board()

        while self.is_running and not self.session.game_state.is_game_over:
            if self.session.is_ai_turn:
                self._ai_move()
                continue

            command = self._read_command()
            if command is None:
                self.is_running = False
            elif command == "r":
                self._reset_game()
            elif command == "h":
                print(self.session.ai_hint())
            else:
                self._process_human_move(command)

    def _read_command(self) -> Optional[str]:
        player = self.session.game_state.current_player.value
        try:
            text = input(f"{player} > ").strip().lower()
        except EOFError:
            return None

        if text == "q":
            print("\nGame quit by user.")
            return None
        return text

    def _process_human_move(self, text: str):
        index = self.session.validator.parse_cell(text)
        if index is None:
            print(f"Don't understand '{text}'. Type a cell number 0-8.")
            return

        result = self.session.play_human_move(index)
        if not result.is_valid:
            print(f"WARNING: {result.error_message}")
            return

        self.session.game_state.print_board()

    def _ai_move(self):
        """Ask the AI for its move and wait for it."""
        print("\n>>> AI is thinking...")

        pending = self.session.request_ai_move()
        pending.wait()

        if pending.discarded or pending.move is None:
            return

        print(f">>> AI plays cell {pending.move}")
        self.session.game_state.print_board()

    def _show_game_result(self):
        """Show the final game result and the running score."""
        game = self.session.game_state

        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        if game.winner:
            if self.two_player:
                print(f"\n{game.winner.value} wins with cells {list(game.winning_line)}!")
            elif game.winner == self.session.human_player:
                print("\nCongratulations! You won!")
            else:
                print("\nAI wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")

        print(f"\nScore - {self.session.scores}")
        print("="*40)

    def _ask_play_again(self) -> bool:
        try:
            answer = input("\nPlay again? [y/n] ").strip().lower()
        except EOFError:
            return False
        return answer in ("", "y", "yes")

    def _reset_game(self):
        """Reset the board for a new round."""
        print("\nResetting game...")
        self.session.new_game()
        self.session.game_state.print_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable AI")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans, no AI"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_THINK_DELAY_SECONDS,
        help="Seconds the AI pauses before moving"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print AI search statistics"
    )

    args = parser.parse_args()

    if args.ai_first:
        human_player = Player.O
    else:
        human_player = Player.X

    console = TicTacToeConsole(
        human_player=human_player,
        two_player=args.two_player,
        think_delay=args.delay,
        verbose=args.debug or GameConfig.DEBUG_MODE,
    )

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        console.session.cancel()
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
