"""
UI configuration for TicTacToe.
All the settings for the window, board and marks.
"""


class UIConfig:
    """
    Configuration class for UI settings.
    Change these values to restyle the game window.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    SETUP_TITLE = "Player Setup"
    BACKGROUND = '#1a1a2e'
    FONT_FAMILY = 'Segoe UI'

    # ==================== BOARD SETTINGS ====================
    # Size of one cell image in pixels (board is 3 cells wide)
    CELL_SIZE_PX = 100
    BOARD_SIZE_PX = CELL_SIZE_PX * 3  # 300px

    CELL_BG = '#16213e'
    CELL_BG_WIN = '#3b3b12'

    # ==================== MARK SETTINGS ====================
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    LINE_COLOR = '#ffd700'

    # Stroke widths in pixels
    MARK_WIDTH = 10
    WIN_LINE_WIDTH = 8

    # Gap between the mark and the cell border
    MARK_PADDING = 18

    # ==================== TIMING ====================
    # Delay before the computer plays, so the human sees their own mark first
    COMPUTER_MOVE_DELAY_MS = 400
