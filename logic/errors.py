"""
Exceptions raised by the board and the AI player.
"""

from typing import Optional

from .enums import Player


class TicTacToeError(Exception):
    """Base class for every game error."""


class MoveError(TicTacToeError):
    """A move the player can retry (bad coordinates or a taken cell)."""

    def __init__(self, message: str, column: int, row: int):
        super().__init__(message)
        self.column = column
        self.row = row


class OutOfRangeError(MoveError):
    """Coordinates fall outside the 3x3 grid."""

    def __init__(self, column: int, row: int):
        super().__init__(
            f"Invalid position ({column}, {row}). Column and row must be 0-2.",
            column,
            row
        )


class InvalidMoveError(MoveError):
    """The target cell is already occupied."""

    def __init__(self, column: int, row: int, owner: Optional[Player]):
        super().__init__(
            f"Cell ({column}, {row}) is already occupied by {owner.value if owner else 'someone'}",
            column,
            row
        )
        self.owner = owner


class NoMovesAvailableError(TicTacToeError):
    """
    The AI was asked to move on a full board.

    The game loop checks for a draw before every AI turn, so this only
    happens when the caller breaks that protocol.
    """
