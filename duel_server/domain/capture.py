from typing import Iterator, List, Tuple

from duel_server.domain.grid import Grid, Position
from duel_server.domain.pieces import Owner, Piece


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def path_between(source: Position, target: Position) -> Iterator[Position]:
    """Yield the cells strictly between source and target.

    Row and column advance together; an axis that already reached the
    target coordinate stays put, so a diagonal shortened by the grid edge
    still ends on the target.
    """
    row, col = source
    target_row, target_col = target
    while True:
        row += _sign(target_row - row)
        col += _sign(target_col - col)
        if (row, col) == (target_row, target_col):
            return
        yield row, col


def resolve_captures(
    grid: Grid, source: Position, target: Position, mover: Owner
) -> List[Tuple[int, int, Piece]]:
    """Remove the opposing pieces a long-range piece passes over.

    Args:
        grid (Grid): Grid to mutate
        source (Position): Cell the piece moves from
        target (Position): Cell the piece moves to
        mover (Owner): Player moving the piece

    Returns:
        List[Tuple[int, int, Piece]]: row, column and identity of every captured piece
    """
    captured = []
    if source == target:
        return captured
    for row, col in path_between(source, target):
        piece = grid.piece_at(row, col)
        if piece is not None and not piece.belongs_to(mover):
            grid.place(row, col, None)
            captured.append((row, col, piece))
    return captured
