"""
Game configuration for console TicTacToe.
Glyphs, board geometry, prompts and logging settings.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to restyle the console game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed column-major (index = col * 3 + row)
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    CENTER_INDEX = 4
    CORNER_INDICES = (0, 2, 6, 8)

    # ==================== GLYPHS ====================
    HUMAN_GLYPH = "O"
    COMPUTER_GLYPH = "X"
    EMPTY_GLYPH = "*"

    CELL_SEPARATOR = "|"
    ROW_SEPARATOR = "-----"

    # ==================== CONSOLE SETTINGS ====================
    # ANSI: clear screen and move the cursor to the top-left corner
    CLEAR_SCREEN = "\033[2J\033[1;1H"

    DIFFICULTY_PROMPT = "Choose difficulty (1 = Novice, 2 = Intermediate, 3 = Experienced): "
    COLUMN_PROMPT = "Enter the column: "
    ROW_PROMPT = "Enter the row: "

    # ==================== AI SETTINGS ====================
    DEFAULT_DIFFICULTY = 2

    # None seeds the AI from OS entropy; set an int to replay a game
    RANDOM_SEED = None

    # ==================== LOGGING ====================
    # WARNING keeps debug output from scrolling the board off screen
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
