"""Turn order, move application and win detection.

This module owns the authoritative game record. It does not know about
connections: callers serialize access and broadcast the result.

Rule of thumb:
- OK: validation, grid mutation, winner evaluation.
- Not OK: touching WebSockets, JSON, FastAPI, datetime.now(), etc.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from uuid import UUID

from duel_server.domain.capture import resolve_captures
from duel_server.domain.errors import (
    FriendlyOccupied,
    GameOver,
    NotYourTurn,
    PieceNotFound,
)
from duel_server.domain.grid import Grid, Position
from duel_server.domain.movement import compute_target
from duel_server.domain.pieces import Kind, Owner, Piece


@dataclass(frozen=True)
class MoveRecord:
    """One applied move, kept in the game's move log."""

    player: Owner
    kind: Kind
    direction: str
    from_cell: Position
    to_cell: Position
    captured: Tuple[Piece, ...] = ()
    move_id: Optional[UUID] = None


@dataclass
class GameState:
    grid: Grid
    turn: Owner = Owner.A
    winner: Optional[Owner] = None
    moves: List[MoveRecord] = field(default_factory=list)

    @classmethod
    def new(cls) -> "GameState":
        return cls(grid=Grid.starting_layout())

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    def check_for_winner(self) -> Optional[Owner]:
        """Return the winner if one side has no pieces left on the grid."""
        if not self.grid.pieces_of(Owner.A):
            return Owner.B
        if not self.grid.pieces_of(Owner.B):
            return Owner.A
        return None

    def apply_move(
        self,
        player: Owner,
        character: str,
        direction: str,
        move_id: Optional[UUID] = None,
    ) -> MoveRecord:
        """Validate and apply a move for the given player.

        Args:
            player (Owner): Player submitting the move
            character (str): Kind token of the piece to move, e.g. "H1"
            direction (str): Direction token, e.g. "F" or "FL"
            move_id (Optional[UUID]): Identifier stored on the move record

        Raises:
            GameOver: A winner is already set
            NotYourTurn: ``player`` is not the player to move
            PieceNotFound: The piece is not on the grid
            FriendlyOccupied: The target cell holds one of the mover's pieces

        Returns:
            MoveRecord: The move as appended to the move log
        """
        if self.is_finished:
            raise GameOver(f"Game over! Winner: {self.winner.value}")
        if player != self.turn:
            raise NotYourTurn("Not your turn!")

        try:
            kind = Kind(character)
        except ValueError:
            raise PieceNotFound("Character not found!") from None
        piece = Piece(player, kind)
        source = self.grid.find_position(piece)
        if source is None:
            raise PieceNotFound("Character not found!")

        target = compute_target(source[0], source[1], player, kind, direction)
        occupant = self.grid.piece_at(*target)
        if occupant is not None and occupant.belongs_to(player):
            raise FriendlyOccupied(
                "Cannot move to cell occupied by your own piece! "
                f"Cell value: {occupant.owner.value}-{occupant.kind.value}"
            )

        captured = []
        if kind.is_long_range:
            captured.extend(
                captured_piece
                for _, _, captured_piece in resolve_captures(
                    self.grid, source, target, player
                )
            )
        if occupant is not None:
            captured.append(occupant)

        self.grid.place(source[0], source[1], None)
        self.grid.place(target[0], target[1], piece)

        self.winner = self.check_for_winner()
        if self.winner is None:
            self.turn = self.turn.opponent

        record = MoveRecord(
            player=player,
            kind=kind,
            direction=direction,
            from_cell=source,
            to_cell=target,
            captured=tuple(captured),
            move_id=move_id,
        )
        self.moves.append(record)
        return record
