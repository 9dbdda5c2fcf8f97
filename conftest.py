"""
Shared fixtures for the TicTacToe tests.
"""

import pytest

from logic.enums import Player
from logic.game_state import Board


H = Player.HUMAN
C = Player.COMPUTER


@pytest.fixture
def make_board():
    """
    Build a board from a 3x3 layout of rows.

    Each entry is Player.HUMAN, Player.COMPUTER or None; the layout reads
    top to bottom, so layout[row][column].
    """
    def _make(layout):
        board = Board()
        for row, cells in enumerate(layout):
            for column, occupant in enumerate(cells):
                if occupant is not None:
                    board.place(column, row, occupant)
        return board

    return _make
