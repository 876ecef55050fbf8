"""
Evaluation functions.

Tests search strength against random and exhaustive opponents,
and checks that pruning never changes the chosen move.
"""

from typing import Dict, List, Tuple

from tqdm.auto import tqdm, trange

from .controller import GameController
from .game import BoardState, GameState, PlayerMark, Position
from .minimax import iter_reachable_states, search
from .players import RandomPlayer


def eval_vs_random(
    games: int = 100,
    size: int = 3,
    seed: int = 0,
    progress: bool = False,
) -> Tuple[float, float, float]:
    """
    Evaluate the search opponent vs a random opponent.

    The search side alternates between X and O every game.

    Returns:
        (win_rate, draw_rate, loss_rate) for the search side
    """
    rng_player = RandomPlayer(seed=seed)
    wins = draws = losses = 0

    for g in trange(games, desc="vs random", disable=not progress):
        game = GameController(size)
        search_side = PlayerMark.X if g % 2 == 0 else PlayerMark.O

        while not game.is_over:
            state = game.get_state()
            if game.turn is search_side:
                move = search(state).move
            else:
                move = rng_player.choose(state)
            game.play_move(move)

        if game.is_draw:
            draws += 1
        elif game.winner is search_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return wins / total, draws / total, losses / total


def eval_never_loses(size: int = 3) -> Dict[str, int]:
    """
    Play the search opponent against every legal reply sequence.

    Both sides are covered: the search plays X against all O replies, then
    O against all X replies. Search moves are cached per board.

    Returns:
        Dict with 'games', 'wins', 'draws', 'losses' for the search side
    """
    tally = {"games": 0, "wins": 0, "draws": 0, "losses": 0}
    chosen: Dict[BoardState, Position] = {}

    def walk(game: GameController, search_side: PlayerMark) -> None:
        if game.is_over:
            tally["games"] += 1
            if game.is_draw:
                tally["draws"] += 1
            elif game.winner is search_side:
                tally["wins"] += 1
            else:
                tally["losses"] += 1
            return

        if game.turn is search_side:
            state = game.get_state()
            if state.board not in chosen:
                chosen[state.board] = search(state).move
            walk(game.with_move(chosen[state.board]), search_side)
        else:
            for move in game.available_moves():
                walk(game.with_move(move), search_side)

    for side in (PlayerMark.X, PlayerMark.O):
        walk(GameController(size), side)
    return tally


def eval_pruning_agreement_all_states(
    size: int = 3,
    min_marks: int = 0,
    progress: bool = False,
) -> Dict[str, object]:
    """
    Compare alpha-beta against plain minimax on all reachable states.

    This is exhaustive evaluation over the entire game tree; plain minimax
    from the empty 3x3 board alone expands ~550k nodes, so `min_marks`
    can restrict the check to later positions.

    Returns:
        Dict with 'states', node totals and the raw 'disagreements' list
    """
    states: List[GameState] = [
        s for s in iter_reachable_states(size)
        if not s.is_over and s.board.count() >= min_marks
    ]

    disagreements = []
    pruned_nodes = plain_nodes = 0
    for state in tqdm(states, desc="pruning agreement", disable=not progress):
        pruned = search(state, pruning=True)
        plain = search(state, pruning=False)
        pruned_nodes += pruned.nodes
        plain_nodes += plain.nodes
        if (pruned.move, pruned.score) != (plain.move, plain.score):
            disagreements.append((state, pruned, plain))

    return {
        "states": len(states),
        "pruned_nodes": pruned_nodes,
        "plain_nodes": plain_nodes,
        "disagreements": disagreements,
    }
