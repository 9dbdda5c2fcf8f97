"""
Console TicTacToe.

This script ties together:
- The board (placing marks, checking wins and draws)
- Move validation for what the human types
- The AI opponent at the chosen difficulty

Run this script to play TicTacToe against the computer!
"""

import logging
import random
from typing import Callable, Optional

from logic.config import GameConfig
from logic.enums import Player, Difficulty
from logic.game_state import Board
from logic.move_validator import MoveValidator
from logic.ai_player import AIPlayer


class TicTacToeGame:
    """
    Main controller for a console game.

    Game flow:
    1. Human (O) enters a column and row
    2. Move is validated and placed
    3. Check for a human win, then a draw
    4. Computer (X) moves at the chosen difficulty
    5. Check for a computer win, then a draw
    6. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        difficulty: Difficulty,
        rng: Optional[random.Random] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[..., None] = print
    ):
        """
        Initialize the game.

        Args:
            difficulty: AI difficulty for this game.
            rng: Random source handed to the AI.
            input_func: Reads one line from the player.
            output_func: Writes text to the console.
        """
        self.board = Board()
        self.validator = MoveValidator()
        self.ai = AIPlayer(difficulty, rng=rng)
        self.input = input_func
        self.output = output_func

        self.winner: Optional[Player] = None
        self.is_draw = False

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    def play(self) -> Optional[Player]:
        """
        Run the game to the end.

        Returns:
            The winner, or None for a draw.
        """
        while not self.is_game_over:
            self._draw()
            self._human_move()

            if self._check_game_over(Player.HUMAN):
                break

            self.ai.play(self.board)
            self._check_game_over(Player.COMPUTER)

        self._show_game_result()
        return self.winner

    def _human_move(self):
        """Prompt until the human enters a legal move, then place it."""
        while True:
            column_text = self.input(GameConfig.COLUMN_PROMPT)
            self.output()
            row_text = self.input(GameConfig.ROW_PROMPT)
            self.output("\n")

            result = self.validator.validate_move(self.board, column_text, row_text)
            if result.is_valid:
                self.board.place(result.column, result.row, Player.HUMAN)
                return

            self.output(result.error_message)

    def _check_game_over(self, player: Player) -> bool:
        """Record a win for the player who just moved, or a draw."""
        if self.board.has_won(player):
            self.winner = player
        elif self.board.is_draw():
            self.is_draw = True
        return self.is_game_over

    def _draw(self):
        self.output(GameConfig.CLEAR_SCREEN, end="")
        self.output(self.board.render())
        self.output("\n\n")

    def _show_game_result(self):
        """Show the final game result."""
        self._draw()

        if self.winner == Player.HUMAN:
            self.output("Congratulations! You won!")
        elif self.winner == Player.COMPUTER:
            self.output("Computer wins! Better luck next time!")
        else:
            self.output("It's a draw! Good game!")


def ask_difficulty(input_func: Callable[[str], str] = input,
                   output_func: Callable[..., None] = print) -> Difficulty:
    """
    Prompt until a difficulty is chosen.

    An empty answer picks GameConfig.DEFAULT_DIFFICULTY.
    """
    while True:
        choice = input_func(GameConfig.DIFFICULTY_PROMPT)
        if not choice.strip():
            return Difficulty(GameConfig.DEFAULT_DIFFICULTY)
        try:
            return Difficulty.from_choice(choice)
        except ValueError as e:
            output_func(e)


def main():
    """Main entry point."""
    logging.basicConfig(level=GameConfig.LOG_LEVEL, format=GameConfig.LOG_FORMAT)

    try:
        difficulty = ask_difficulty()
        game = TicTacToeGame(difficulty, rng=random.Random(GameConfig.RANDOM_SEED))
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
