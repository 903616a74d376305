"""Movement geometry of every piece kind.

Rule of thumb:
- Directions are tokens sent by the client: L, R, F, B for pawns and Hero1,
  FL, FR, BL, BR for Hero2.
- F/B are relative to the mover: player A advances toward row 4,
  player B advances toward row 0.
- Every axis is clamped into the grid; hitting an edge shortens the move.
"""

from typing import Dict, Tuple

from duel_server.domain.grid import MAX_INDEX, MIN_INDEX, Position
from duel_server.domain.pieces import Kind, Owner

PAWN_STEP = 1
HERO_STEP = 2

# (forward sign, column sign) per direction token; forward is +1, backward -1.
ORTHOGONAL_DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "L": (0, -1),
    "R": (0, 1),
    "F": (1, 0),
    "B": (-1, 0),
}

DIAGONAL_DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "FL": (1, -1),
    "FR": (1, 1),
    "BL": (-1, -1),
    "BR": (-1, 1),
}


def forward_sign(owner: Owner) -> int:
    """Return the row delta of one forward step for the given player."""
    return 1 if owner == Owner.A else -1


def clamp(index: int) -> int:
    return max(MIN_INDEX, min(MAX_INDEX, index))


def directions_for(kind: Kind) -> Dict[str, Tuple[int, int]]:
    if kind == Kind.H2:
        return DIAGONAL_DIRECTIONS
    return ORTHOGONAL_DIRECTIONS


def step_size(kind: Kind) -> int:
    return PAWN_STEP if kind.is_pawn else HERO_STEP


def compute_target(
    row: int, col: int, owner: Owner, kind: Kind, direction: str
) -> Position:
    """Compute the cell a piece would land on.

    Args:
        row (int): Current row of the piece
        col (int): Current column of the piece
        owner (Owner): Player moving the piece, decides what "forward" means
        kind (Kind): Kind of piece, decides step size and allowed directions
        direction (str): Direction token sent by the client

    Returns:
        Position: Clamped (row, col) target. An unknown direction for this
            kind returns the source cell unchanged.
    """
    vector = directions_for(kind).get(direction)
    if vector is None:
        return row, col

    forward, sideways = vector
    distance = step_size(kind)
    new_row = clamp(row + forward * forward_sign(owner) * distance)
    new_col = clamp(col + sideways * distance)
    return new_row, new_col
