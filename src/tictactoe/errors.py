"""
Exceptions raised by the game engine and the search opponent.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class IllegalMove(TicTacToeError, ValueError):
    """Target cell is occupied or the position is off the board."""


class InvalidState(TicTacToeError, ValueError):
    """A supplied board snapshot cannot arise from legal play."""


class SizeMismatch(TicTacToeError, ValueError):
    """Two line counters track a different number of lines."""


class NoLegalMove(TicTacToeError, RuntimeError):
    """A move was requested for a state that has none."""
