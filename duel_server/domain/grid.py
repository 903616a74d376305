"""5x5 grid of cells, each holding a single Piece or None."""

from typing import List, Optional, Tuple

from duel_server.domain.pieces import Kind, Owner, Piece

GRID_SIZE = 5
MIN_INDEX = 0
MAX_INDEX = GRID_SIZE - 1

# Column order of each player's home row at the start of a game.
HOME_ROW_ORDER = (Kind.P1, Kind.P2, Kind.H1, Kind.H2, Kind.P3)

Cell = Optional[Piece]
Position = Tuple[int, int]


class Grid:
    def __init__(self, cells: Optional[List[List[Cell]]] = None):
        if cells is None:
            cells = [[None] * GRID_SIZE for _ in range(GRID_SIZE)]
        if len(cells) != GRID_SIZE or any(len(row) != GRID_SIZE for row in cells):
            raise ValueError(f"grid must be {GRID_SIZE}x{GRID_SIZE}")
        self._cells = [list(row) for row in cells]

    @classmethod
    def starting_layout(cls) -> "Grid":
        """Build the canonical starting grid.

        Row 0 holds player A's pieces, row 4 holds player B's pieces and
        the three rows between them are empty.

        Returns:
            Grid: A new grid with all ten pieces placed
        """
        grid = cls()
        for col, kind in enumerate(HOME_ROW_ORDER):
            grid.place(MIN_INDEX, col, Piece(Owner.A, kind))
            grid.place(MAX_INDEX, col, Piece(Owner.B, kind))
        return grid

    @staticmethod
    def _check_bounds(row: int, col: int):
        if not (MIN_INDEX <= row <= MAX_INDEX and MIN_INDEX <= col <= MAX_INDEX):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")

    def piece_at(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def place(self, row: int, col: int, piece: Cell):
        """Overwrite a cell unconditionally. Passing None empties it."""
        self._check_bounds(row, col)
        self._cells[row][col] = piece

    def find_position(self, piece: Piece) -> Optional[Position]:
        """Find where a piece stands.

        Args:
            piece (Piece): Identity to look for

        Returns:
            Optional[Position]: (row, col) of the piece, None if it was captured
        """
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                if self._cells[row][col] == piece:
                    return row, col
        return None

    def pieces_of(self, owner: Owner) -> List[Piece]:
        return [
            cell
            for row in self._cells
            for cell in row
            if cell is not None and cell.belongs_to(owner)
        ]

    def rows(self) -> List[List[Cell]]:
        return [list(row) for row in self._cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self._cells!r})"
