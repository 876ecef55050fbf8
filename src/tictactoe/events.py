"""
Events emitted by the game runner and the listener capability that receives them.
"""

import inspect
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

from .game import GameState, PlayerMark


@dataclass(frozen=True)
class BoardUpdated:
    """Emitted for the initial board and after every successful move."""
    state: GameState


@dataclass(frozen=True)
class InvalidMove:
    """Emitted when a player's move is rejected; the same player retries."""
    message: str


@dataclass(frozen=True)
class GameOver:
    """Emitted exactly once when the game ends."""
    is_draw: bool
    winner: Optional[PlayerMark]


GameEvent = Union[BoardUpdated, InvalidMove, GameOver]


def unknown_event(event: object) -> TypeError:
    """Error for consumers whose isinstance chain fell through."""
    return TypeError(f"Unhandled game event: {event!r}")


@runtime_checkable
class GameEventListener(Protocol):
    async def on_event(self, event: GameEvent) -> None:
        ...


class CallbackListener:
    """
    Adapt a plain function (sync or async) into a listener.

    Example:
        listener = CallbackListener(events.append)
    """

    def __init__(self, handler: Callable[[GameEvent], Union[None, Awaitable[None]]]):
        self._handler = handler

    async def on_event(self, event: GameEvent) -> None:
        result = self._handler(event)
        if inspect.isawaitable(result):
            await result
