"""
Board state for console TicTacToe.
Tracks the 9 cells, who owns each one, and the placement history.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Tuple

from .config import GameConfig
from .enums import Player
from .errors import OutOfRangeError, InvalidMoveError
from .win_checker import WinChecker


logger = logging.getLogger(__name__)

Position = Tuple[int, int]  # (column, row), each 0-2


@dataclass(frozen=True)
class Cell:
    """
    One square of the grid.

    The occupant is the only stored state; the glyph is derived from it.
    Cells are immutable: placing a mark swaps in a new Cell.
    """
    column: int                         # Column (0-2)
    row: int                            # Row (0-2)
    occupant: Optional[Player] = None   # None means empty

    @property
    def is_empty(self) -> bool:
        return self.occupant is None

    @property
    def position(self) -> Position:
        return (self.column, self.row)

    @property
    def glyph(self) -> str:
        """The character drawn for this cell."""
        if self.occupant == Player.HUMAN:
            return GameConfig.HUMAN_GLYPH
        if self.occupant == Player.COMPUTER:
            return GameConfig.COMPUTER_GLYPH
        return GameConfig.EMPTY_GLYPH


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    column: int             # Column (0-2)
    row: int                # Row (0-2)
    move_number: int        # Which move this is (0-8)


def _in_range(column: int, row: int) -> bool:
    size = GameConfig.BOARD_SIZE
    return 0 <= column < size and 0 <= row < size


def index_of(column: int, row: int) -> int:
    """Column-major index of a cell."""
    if not _in_range(column, row):
        raise OutOfRangeError(column, row)
    return column * GameConfig.BOARD_SIZE + row


def _empty_grid() -> List[Cell]:
    return [
        Cell(column, row)
        for column in range(GameConfig.BOARD_SIZE)
        for row in range(GameConfig.BOARD_SIZE)
    ]


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored column-major (down column 0, then column 1, ...) and
    always cover the full grid. The only way to change the board is
    place(), which fills an empty cell and records the Move.
    Win and draw checks are delegated to WinChecker.
    """

    _cells: List[Cell] = field(init=False, default_factory=_empty_grid)

    # Placement history
    _moves: List[Move] = field(init=False, default_factory=list)

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """All 9 cells, column-major."""
        return tuple(self._cells)

    @property
    def moves(self) -> Tuple[Move, ...]:
        """Every placement so far, oldest first."""
        return tuple(self._moves)

    def occupants(self) -> List[Optional[Player]]:
        """The 9 occupants in column-major order."""
        return [cell.occupant for cell in self._cells]

    def cell_at(self, index: int) -> Cell:
        """
        Get a cell by its column-major index.

        Raises:
            OutOfRangeError: If index is not 0-8.
        """
        if not 0 <= index < GameConfig.CELL_COUNT:
            size = GameConfig.BOARD_SIZE
            raise OutOfRangeError(index // size, index % size)
        return self._cells[index]

    def position_of(self, index: int) -> Position:
        """(column, row) of the cell at a column-major index."""
        return self.cell_at(index).position

    def get_cell(self, column: int, row: int) -> Cell:
        """Get a cell by coordinates, raising OutOfRangeError off the grid."""
        return self._cells[index_of(column, row)]

    def is_occupied(self, column: int, row: int) -> bool:
        """
        Check if a cell holds a mark.

        Raises:
            OutOfRangeError: If the coordinates are off the grid.
        """
        return not self.get_cell(column, row).is_empty

    def owner_at(self, column: int, row: int) -> Optional[Player]:
        """The player occupying a cell, or None."""
        return self.get_cell(column, row).occupant

    def place(self, column: int, row: int, player: Player) -> Move:
        """
        Put a player's mark on an empty cell.

        Args:
            column: Column index (0-2).
            row: Row index (0-2).
            player: Who is moving.

        Returns:
            The recorded Move.

        Raises:
            OutOfRangeError: If the coordinates are off the grid.
            InvalidMoveError: If the cell is already occupied.
        """
        index = index_of(column, row)
        cell = self._cells[index]

        if not cell.is_empty:
            raise InvalidMoveError(column, row, cell.occupant)

        self._cells[index] = Cell(column, row, player)

        move = Move(
            player=player,
            column=column,
            row=row,
            move_number=len(self._moves)
        )
        self._moves.append(move)

        logger.debug("Move %d: %s -> (%d, %d)", move.move_number, player.value, column, row)
        return move

    def empty_positions(self) -> List[Position]:
        """
        Get all empty cells on the board.

        Returns:
            List of (column, row) tuples in column-major order.
        """
        return [cell.position for cell in self._cells if cell.is_empty]

    def has_won(self, player: Player) -> bool:
        """True if the player owns a full row, column or diagonal."""
        return self.win_checker.has_won(self.occupants(), player)

    def is_draw(self) -> bool:
        """
        True if all 9 cells are occupied.

        This does not look at wins: check has_won() first, since a full
        board with a completed line is a win.
        """
        return self.win_checker.is_full(self.occupants())

    def get_winner(self) -> Optional[Player]:
        """The player owning the first complete line, or None."""
        return self.win_checker.check_winner(self.occupants())

    def get_winning_line(self) -> Optional[List[Position]]:
        """The first completed line as (column, row) positions, or None."""
        line = self.win_checker.get_winning_line(self.occupants())
        if line is None:
            return None
        return [self.position_of(index) for index in line]

    def find_completing_slot(self, player: Player) -> Optional[Position]:
        """
        Find the empty cell that would give a player three-in-a-row.

        Used for offense (the AI's own player) and defense (the opponent,
        i.e. a block).

        Returns:
            (column, row) of the slot in the first matching line, or None.
        """
        index = self.win_checker.find_completing_slot(self.occupants(), player)
        if index is None:
            return None
        return self.position_of(index)

    def snapshot(self) -> List[str]:
        """The 9 glyphs in row-major order, ready for drawing."""
        size = GameConfig.BOARD_SIZE
        return [
            self.get_cell(column, row).glyph
            for row in range(size)
            for column in range(size)
        ]

    def render(self) -> str:
        """
        Draw the board as text.

        Rows are glyphs joined by '|' with '-----' between rows:

            O|*|X
            -----
            *|O|*
            -----
            *|*|X
        """
        size = GameConfig.BOARD_SIZE
        glyphs = self.snapshot()
        rows = [
            GameConfig.CELL_SEPARATOR.join(glyphs[start:start + size])
            for start in range(0, GameConfig.CELL_COUNT, size)
        ]
        return f"\n{GameConfig.ROW_SEPARATOR}\n".join(rows)

    def copy(self) -> "Board":
        """Create a deep copy of the board by replaying its moves."""
        new_board = Board()
        for move in self._moves:
            new_board.place(move.column, move.row, move.player)
        return new_board

    def __str__(self) -> str:
        return self.render()
