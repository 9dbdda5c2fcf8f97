"""
Core enums for console TicTacToe.
"""

from enum import Enum


class Player(Enum):
    """The two players in the game."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.HUMAN else Player.HUMAN


class Difficulty(Enum):
    """AI difficulty levels."""
    NOVICE = 1          # Random moves
    INTERMEDIATE = 2    # Block, then win, then random
    EXPERIENCED = 3     # Center, block, win, then corners

    @classmethod
    def from_choice(cls, choice: str) -> "Difficulty":
        """
        Look up a difficulty from the number typed at the console.

        Args:
            choice: "1", "2" or "3" (surrounding whitespace is ignored).

        Returns:
            The matching Difficulty.

        Raises:
            ValueError: If the choice is not one of the known levels.
        """
        try:
            return cls(int(choice.strip()))
        except ValueError:
            raise ValueError(f"Unknown difficulty {choice!r}. Choose 1, 2 or 3.") from None
