class MoveRejected(Exception):
    """Base class of every reason a move request is refused.

    A rejected move never changes the game state. ``code`` is the stable
    identifier sent to the client next to the human readable message.
    """

    code = "MoveRejected"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GameOver(MoveRejected):
    code = "GameOver"


class NotYourTurn(MoveRejected):
    code = "NotYourTurn"


class PieceNotFound(MoveRejected):
    code = "PieceNotFound"


class FriendlyOccupied(MoveRejected):
    code = "FriendlyOccupied"
