"""
Asynchronous turn loop driving a game between two players.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .controller import GameController
from .errors import IllegalMove
from .events import BoardUpdated, GameEventListener, GameOver, InvalidMove
from .game import GameState, PlayerMark
from .players import Player

logger = logging.getLogger(__name__)

PlayerFactory = Callable[[], Player]


@dataclass
class GameConfig:
    """Game configuration. Players are factories so each game gets fresh ones."""

    # Players
    player_x: Optional[PlayerFactory]
    player_o: Optional[PlayerFactory]

    # Event sink
    listener: Optional[GameEventListener]

    # Board dimension (also the winning line length)
    board_size: int = 3

    def __post_init__(self):
        if self.player_x is None or not callable(self.player_x):
            raise ValueError("Player X must be configured")
        if self.player_o is None or not callable(self.player_o):
            raise ValueError("Player O must be configured")
        if self.listener is None or not isinstance(self.listener, GameEventListener):
            raise ValueError("Event listener must be configured")
        if self.board_size < 1:
            raise ValueError(f"Board size must be at least 1, got {self.board_size}")


class GameRunner:
    """
    Plays complete games, one turn in flight at a time.

    Example:
        runner = GameRunner(GameConfig(
            player_x=lambda: MinimaxPlayer("Bot"),
            player_o=lambda: RandomPlayer("Rand", seed=0),
            listener=CallbackListener(print),
        ))
        final = asyncio.run(runner.play())
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.game = GameController(config.board_size)

    async def play(self) -> GameState:
        """
        Run a game to completion and return its final state.

        Illegal moves are reported as InvalidMove and the same player is
        asked again; any other error propagates.
        """
        players = {
            PlayerMark.X: self.config.player_x(),
            PlayerMark.O: self.config.player_o(),
        }
        listener = self.config.listener

        self.game.reset()
        logger.info("Game started: %s (X) vs %s (O)", players[PlayerMark.X].name, players[PlayerMark.O].name)
        await listener.on_event(BoardUpdated(self.game.get_state()))

        while not self.game.is_over:
            player = players[self.game.turn]
            move = await player.select_move(self.game.get_state())
            try:
                self.game.play_move(move)
            except IllegalMove as e:
                logger.warning("%s tried an illegal move: %s", player.name, e)
                await listener.on_event(InvalidMove(str(e)))
                continue
            await listener.on_event(BoardUpdated(self.game.get_state()))

        final = self.game.get_state()
        logger.info("Game over: %s", "draw" if final.is_draw else f"{final.winner} wins")
        await listener.on_event(GameOver(final.is_draw, final.winner))
        return final
