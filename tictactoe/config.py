"""
Game configuration for TicTacToe.
Who plays which side, AI timing, and debug output.
"""

from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override these.
    """

    # ==================== PLAYERS ====================
    HUMAN_PLAYER = Player.X
    AI_PLAYER = Player.O

    # X always opens a game
    FIRST_PLAYER = Player.X

    # ==================== AI SETTINGS ====================
    # Pause before the AI moves so it looks like it's "thinking".
    # Purely cosmetic - the search itself takes milliseconds.
    AI_THINK_DELAY_SECONDS = 0.5

    # Terminal score of a win found on the first ply (see ai_player.search)
    WIN_SCORE = 10

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
