"""
Game configuration for TicTacToe.
Default players and board settings used when no setup has been done.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to alter the defaults of a new game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is always a 3x3 grid
    BOARD_SIZE = 3

    # ==================== PLAYER SETTINGS ====================
    DEFAULT_PLAYER1_NAME = "Player1"
    DEFAULT_PLAYER2_NAME = "Computer"

    # Name put in the second field when the computer box is unticked
    DEFAULT_HUMAN_PLAYER2_NAME = "Player2"

    # Play against the computer unless the setup form says otherwise
    DEFAULT_VS_COMPUTER = True

    # ==================== DEBUG SETTINGS ====================
    # Print engine decisions (computer moves, results) to the console
    VERBOSE = True
