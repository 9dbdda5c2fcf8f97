"""
Move validator for console TicTacToe.
Turns the column/row typed at the console into a legal board move.
"""

from typing import Optional
from dataclasses import dataclass
from .config import GameConfig
from .game_state import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    column: Optional[int] = None    # 0-indexed, set when valid
    row: Optional[int] = None       # 0-indexed, set when valid


class MoveValidator:
    """
    Validates TicTacToe moves entered by the human.

    Rules:
    1. Column and row must be whole numbers
    2. Players count from 1, so both must be 1 to BOARD_SIZE
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        column_text: str,
        row_text: str
    ) -> ValidationResult:
        """
        Validate a move typed at the console.

        Args:
            board: Current board.
            column_text: Column as typed (1-3).
            row_text: Row as typed (1-3).

        Returns:
            ValidationResult; when valid, column and row are 0-indexed.
        """
        try:
            column = int(column_text.strip())
            row = int(row_text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message="Column and row must be numbers."
            )

        # Convert from the 1-indexed form players type
        column -= 1
        row -= 1

        size = GameConfig.BOARD_SIZE
        if not (0 <= column < size and 0 <= row < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({column + 1}, {row + 1}). Must be 1-{size}."
            )

        if board.is_occupied(column, row):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({column + 1}, {row + 1}) is already taken."
            )

        # All checks passed!
        return ValidationResult(is_valid=True, column=column, row=row)
