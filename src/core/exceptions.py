"""Exceptions raised at the service / API boundary.

Gameplay itself never raises: interacting out of turn, choosing a target without a selection
and landing on your own piece are all handled as silent no-ops inside BoardState.
"""


class GameError(Exception):
    """Base class for all errors of this application"""


class InvalidRequestError(GameError):
    """Request data could not be interpreted (raised from pydantic validators, propagates as-is)"""


class InvalidLayoutError(GameError):
    """Layout string does not describe an 8x8 board"""


class RepositoryError(GameError):
    """Session could not be found / stored"""


class PieceNotFoundError(GameError):
    """A request referred to a square that holds no piece"""
