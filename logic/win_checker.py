"""
Win checker for console TicTacToe.
Evaluates the eight winning lines over the board's column-major cells.
"""

from typing import Optional, List, Sequence, Tuple
from .enums import Player


# A board as seen by the checker: 9 occupants in column-major order
# (index = column * 3 + row), None for an empty cell
Occupants = Sequence[Optional[Player]]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as column-major cell indices.
    # Order matters: find_completing_slot returns the first match.
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Columns (storage runs down each column)
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Rows
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def has_won(self, occupants: Occupants, player: Player) -> bool:
        """
        Check if a player owns a complete line.

        Args:
            occupants: The 9 cell occupants, column-major.
            player: The player to check.

        Returns:
            True if any winning line is fully owned by the player.
        """
        return any(
            all(occupants[index] == player for index in line)
            for line in self.WINNING_LINES
        )

    def check_winner(self, occupants: Occupants) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            occupants: The 9 cell occupants, column-major.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(occupants)
        if line is None:
            return None
        return occupants[line[0]]

    def get_winning_line(self, occupants: Occupants) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            occupants: The 9 cell occupants, column-major.

        Returns:
            The first fully owned line as a tuple of indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(occupants, line) is not None:
                return line
        return None

    def _check_line(self, occupants: Occupants, line: Tuple[int, int, int]) -> Optional[Player]:
        """Return the owner of the line if all 3 cells belong to one player."""
        first = occupants[line[0]]
        if first is None:
            return None  # Empty cell, no winner on this line

        if all(occupants[index] == first for index in line):
            return first

        return None

    def is_full(self, occupants: Occupants) -> bool:
        """Check if every cell is occupied (a draw when nobody has won)."""
        return all(occupant is not None for occupant in occupants)

    def find_completing_slot(self, occupants: Occupants, player: Player) -> Optional[int]:
        """
        Find the cell that would complete three-in-a-row for a player.

        Lines are scanned in WINNING_LINES order and cells in line order,
        so the first line holding two of the player's marks and one empty
        cell wins the tie-break.

        Args:
            occupants: The 9 cell occupants, column-major.
            player: The player who would occupy the slot.

        Returns:
            Index of the empty cell, or None if no line is one move from done.
        """
        for line in self.WINNING_LINES:
            owned = 0
            empty: List[int] = []
            for index in line:
                occupant = occupants[index]
                if occupant == player:
                    owned += 1
                elif occupant is None:
                    empty.append(index)

            if owned == 2 and len(empty) == 1:
                return empty[0]

        return None
