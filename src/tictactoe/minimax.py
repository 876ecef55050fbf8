"""
Exact minimax search with alpha-beta pruning.

Provides the provably optimal move for the side to play. Scores are
depth-sensitive so the search prefers the fastest win and the slowest loss.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

from .controller import GameController
from .errors import NoLegalMove
from .game import GameState, PlayerMark, Position

logger = logging.getLogger(__name__)

# Score of an immediate win; each extra ply costs one point
WIN_SCORE = 10


@dataclass(frozen=True)
class SearchResult:
    """Best move at the root, its score and how many nodes were expanded."""
    move: Position
    score: int
    nodes: int


class _Search:
    def __init__(self, maximizing_mark: PlayerMark, pruning: bool):
        self.maximizing_mark = maximizing_mark
        self.pruning = pruning
        self.nodes = 0

    def evaluate(self, winner: Optional[PlayerMark], depth: int) -> int:
        if winner is None:
            return 0
        if winner is self.maximizing_mark:
            return WIN_SCORE - depth
        return depth - WIN_SCORE

    def minimax(
        self,
        game: GameController,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
    ) -> int:
        self.nodes += 1
        if game.is_over:
            return self.evaluate(game.winner, depth)

        if maximizing:
            best = -math.inf
            for move in game.available_moves():
                score = self.minimax(game.with_move(move), depth + 1, False, alpha, beta)
                best = max(best, score)
                alpha = max(alpha, best)
                if self.pruning and beta <= alpha:
                    break
        else:
            best = math.inf
            for move in game.available_moves():
                score = self.minimax(game.with_move(move), depth + 1, True, alpha, beta)
                best = min(best, score)
                beta = min(beta, best)
                if self.pruning and beta <= alpha:
                    break
        return int(best)


def search(state: GameState, pruning: bool = True) -> SearchResult:
    """
    Run minimax from `state` for the side to play.

    Every root move gets a full window; the first move with the best score
    in row-major order wins ties.

    Args:
        state: Position to search from
        pruning: If False, run plain minimax (same result, more nodes)

    Raises:
        NoLegalMove: if the game is over or no cell is empty
    """
    mover = state.next_to_play
    moves = state.available_moves()
    if mover is None or not moves:
        raise NoLegalMove("No legal moves: the game is already over")

    root = GameController.from_state(state)
    s = _Search(mover, pruning)

    best_move: Optional[Position] = None
    best_score = -math.inf
    for move in moves:
        score = s.minimax(root.with_move(move), 0, False, -math.inf, math.inf)
        if score > best_score:
            best_score = score
            best_move = move

    logger.debug(
        "%s search for %s: move=%s score=%d nodes=%d",
        "alpha-beta" if pruning else "minimax", mover, best_move, best_score, s.nodes,
    )
    return SearchResult(best_move, int(best_score), s.nodes)


def minimax_move(state: GameState, pruning: bool = True) -> Position:
    """Optimal move for the side to play in `state`."""
    return search(state, pruning=pruning).move


def iter_reachable_states(size: int = 3) -> Iterator[GameState]:
    """
    Iterate over every distinct state reachable by legal play.

    Breadth-first from the empty board, so states come in order of move
    count. Terminal states are included.

    Yields:
        GameState snapshots, each board exactly once
    """
    start = GameController(size)
    seen = {start.get_state().board}
    queue = deque([start])
    while queue:
        game = queue.popleft()
        yield game.get_state()
        for move in game.available_moves():
            child = game.with_move(move)
            board = child.get_state().board
            if board not in seen:
                seen.add(board)
                queue.append(child)
