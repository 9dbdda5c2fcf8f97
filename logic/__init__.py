"""
Logic module for console TicTacToe.
Handles the board, rules, and AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .enums import Player, Difficulty
from .errors import (
    TicTacToeError,
    MoveError,
    OutOfRangeError,
    InvalidMoveError,
    NoMovesAvailableError,
)
from .game_state import Board, Cell, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer
