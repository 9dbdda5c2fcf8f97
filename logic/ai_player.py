"""
AI player for console TicTacToe.
Picks moves with one of three scripted difficulty policies.
"""

import logging
import random
from typing import Optional, List

from .config import GameConfig
from .enums import Player, Difficulty
from .errors import NoMovesAvailableError
from .game_state import Board, Position


logger = logging.getLogger(__name__)


class AIPlayer:
    """
    A scripted TicTacToe opponent.

    Policies by difficulty:
    - NOVICE: a random empty cell.
    - INTERMEDIATE: block the opponent, else complete our own line,
      else random. Blocking comes first even when a win is available.
    - EXPERIENCED: take the center, else block, else win, else a random
      empty corner, else any random empty cell.

    All randomness comes from the injected rng, so a seeded
    random.Random makes every choice reproducible.
    """

    def __init__(
        self,
        difficulty: Difficulty,
        rng: Optional[random.Random] = None,
        player: Player = Player.COMPUTER
    ):
        """
        Initialize the AI player.

        Args:
            difficulty: Which move policy to use for the whole game.
            rng: Random source (default: random.Random seeded from
                GameConfig.RANDOM_SEED).
            player: Which player the AI controls (default: COMPUTER).
        """
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random(GameConfig.RANDOM_SEED)
        self.player = player

    def play(self, board: Board) -> Position:
        """
        Choose a move and put it on the board.

        Returns:
            (column, row) of the placed mark.

        Raises:
            NoMovesAvailableError: If the board is already full.
        """
        column, row = self.choose_move(board)
        board.place(column, row, self.player)
        return (column, row)

    def choose_move(self, board: Board) -> Position:
        """
        Pick a move without changing the board.

        Raises:
            NoMovesAvailableError: If the board is already full.
        """
        if not board.empty_positions():
            raise NoMovesAvailableError(
                f"{self.difficulty.name.title()} AI asked to move on a full board"
            )

        if self.difficulty == Difficulty.NOVICE:
            move, reason = self._random_move(board), "random"
        elif self.difficulty == Difficulty.INTERMEDIATE:
            move, reason = self._intermediate_move(board)
        else:
            move, reason = self._experienced_move(board)

        logger.debug("%s AI chose %s (%s)", self.difficulty.name.title(), move, reason)
        return move

    def _intermediate_move(self, board: Board):
        slot = self._find_tactical_slot(board)
        if slot is not None:
            return slot

        return self._random_move(board), "random"

    def _experienced_move(self, board: Board):
        center = board.cell_at(GameConfig.CENTER_INDEX)
        if center.is_empty:
            return center.position, "center"

        slot = self._find_tactical_slot(board)
        if slot is not None:
            return slot

        corners = [
            board.position_of(index)
            for index in GameConfig.CORNER_INDICES
            if board.cell_at(index).is_empty
        ]
        if corners:
            return self.rng.choice(corners), "corner"

        # Center and all corners taken: only edges remain
        return self._random_move(board), "random edge"

    def _find_tactical_slot(self, board: Board):
        """Block first, then win. Returns (position, reason) or None."""
        block = board.find_completing_slot(self.player.opposite())
        if block is not None:
            return block, "block"

        win = board.find_completing_slot(self.player)
        if win is not None:
            return win, "win"

        return None

    def _random_move(self, board: Board) -> Position:
        """Get a uniformly random empty cell."""
        empty_cells: List[Position] = board.empty_positions()
        return self.rng.choice(empty_cells)
