from dataclasses import dataclass
from enum import Enum


class Owner(str, Enum):
    A = "A"  # home row is row 0, moves forward toward row 4
    B = "B"  # home row is row 4, moves forward toward row 0

    @property
    def opponent(self) -> "Owner":
        return Owner.B if self is Owner.A else Owner.A


class Kind(str, Enum):
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    H1 = "H1"  # Hero1: 2 cells orthogonal
    H2 = "H2"  # Hero2: 2 cells diagonal

    @property
    def is_pawn(self) -> bool:
        return self in (Kind.P1, Kind.P2, Kind.P3)

    @property
    def is_long_range(self) -> bool:
        """Long-range pieces capture every opposing piece on their path."""
        return self in (Kind.H1, Kind.H2)


@dataclass(frozen=True)
class Piece:
    """A unique piece identity on the grid, e.g. player A's Hero1."""

    owner: Owner
    kind: Kind

    def belongs_to(self, owner: Owner) -> bool:
        return self.owner == owner
