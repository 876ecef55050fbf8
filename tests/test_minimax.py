import asyncio
import functools
import unittest
from typing import Tuple

from tictactoe import (
    BoardState,
    GameController,
    GameState,
    MinimaxPlayer,
    NoLegalMove,
    PlayerMark,
    Position,
    iter_reachable_states,
    minimax_move,
    search,
)
from tictactoe.minimax import WIN_SCORE

X, O = PlayerMark.X, PlayerMark.O

LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


def _has_line(cells: Tuple[str, ...], mark: str) -> bool:
    return any(all(cells[i] == mark for i in line) for line in LINES)


@functools.lru_cache(maxsize=None)
def _reference(cells: Tuple[str, ...], mover: str) -> Tuple[int, int]:
    """
    Plain memoized minimax on a flat 3x3 board.

    Returns (score, index of the first best move); a win on the next move
    scores WIN_SCORE and each further ply shifts the score one toward zero.
    """
    opp = "O" if mover == "X" else "X"
    best = None
    for i, v in enumerate(cells):
        if v != " ":
            continue
        child = cells[:i] + (mover,) + cells[i + 1:]
        if _has_line(child, mover):
            score = WIN_SCORE
        elif " " not in child:
            score = 0
        else:
            r, _ = _reference(child, opp)
            score = -r + (r > 0) - (r < 0)
        if best is None or score > best[0]:
            best = (score, i)
    return best


def _flat(state: GameState) -> Tuple[str, ...]:
    return tuple(str(cell) for _, _, cell in state.board.cells())


def _state(rows, mover: PlayerMark) -> GameState:
    return GameState(BoardState.from_rows(rows), mover, False, False, None)


class TestSearch(unittest.TestCase):
    def test_takes_immediate_win(self) -> None:
        state = _state(["XX ", "OO ", "   "], X)
        result = search(state)
        self.assertEqual(result.move, Position(0, 2))
        self.assertEqual(result.score, WIN_SCORE)

    def test_prefers_win_over_block(self) -> None:
        state = _state(["XX ", "OO ", "X  "], O)
        self.assertEqual(minimax_move(state), Position(1, 2))

    def test_blocks_opponent_win(self) -> None:
        state = _state(["XX ", " O ", "   "], O)
        self.assertEqual(minimax_move(state), Position(0, 2))

    def test_prefers_faster_win(self) -> None:
        # X can win now at (1,2) or set up a slower win elsewhere
        state = _state(["X O", "XX ", "O  "], X)
        result = search(state)
        self.assertEqual(result.score, WIN_SCORE)
        self.assertIn(result.move, (Position(1, 2), Position(2, 2)))
        self.assertTrue(GameController.from_state(state).with_move(result.move).is_over)

    def test_empty_board_is_a_draw_with_corner_opening(self) -> None:
        result = search(GameState.initial(3))
        self.assertEqual(result.score, 0)
        self.assertEqual(result.move, Position(0, 0))

    def test_last_cell(self) -> None:
        state = _state(["XOX", "XOO", "OX "], X)
        self.assertEqual(minimax_move(state), Position(2, 2))

    def test_finished_game_raises(self) -> None:
        won = GameState(BoardState.from_rows(["XXX", "OO ", "   "]), None, True, False, X)
        drawn = GameState(BoardState.from_rows(["XOX", "XOO", "OXX"]), None, True, True, None)
        for state in (won, drawn):
            with self.assertRaises(NoLegalMove):
                search(state)

    def test_pruning_expands_fewer_nodes(self) -> None:
        state = _state(["X  ", "   ", "   "], O)
        pruned = search(state, pruning=True)
        plain = search(state, pruning=False)
        self.assertEqual((pruned.move, pruned.score), (plain.move, plain.score))
        self.assertLess(pruned.nodes, plain.nodes)

    def test_search_does_not_touch_state(self) -> None:
        state = _state(["X  ", " O ", "   "], X)
        copy = GameState(state.board, state.next_to_play, state.is_over, state.is_draw, state.winner)
        search(state)
        self.assertEqual(state, copy)

    def test_alpha_beta_matches_plain_minimax_on_every_reachable_state(self) -> None:
        mismatches = []
        checked = 0
        for state in iter_reachable_states(3):
            if state.is_over:
                continue
            checked += 1
            score, index = _reference(_flat(state), str(state.next_to_play))
            result = search(state)
            expected = Position(*divmod(index, 3))
            if (result.move, result.score) != (expected, score):
                mismatches.append((state.board.render(), result, expected, score))
        self.assertEqual(checked, 4520)
        self.assertEqual(mismatches[:3], [])

    def test_plain_search_matches_reference_on_late_states(self) -> None:
        for state in iter_reachable_states(3):
            if state.is_over or state.board.count() < 5:
                continue
            score, index = _reference(_flat(state), str(state.next_to_play))
            result = search(state, pruning=False)
            self.assertEqual(result.move, Position(*divmod(index, 3)))
            self.assertEqual(result.score, score)

    def test_larger_board_endgame(self) -> None:
        state = _state(["XXX ", "OOO ", "XO  ", "O X "], X)
        self.assertEqual(minimax_move(state), Position(0, 3))


class TestReachableStates(unittest.TestCase):
    def test_counts_for_three_by_three(self) -> None:
        states = list(iter_reachable_states(3))
        self.assertEqual(len(states), 5478)
        self.assertEqual(len({s.board for s in states}), 5478)
        self.assertEqual(sum(1 for s in states if s.is_over), 958)
        self.assertEqual(states[0], GameState.initial(3))

    def test_tiny_boards(self) -> None:
        self.assertEqual(len(list(iter_reachable_states(1))), 2)
        # 1 + 4 + 12 + 12 (third move always wins on 2x2)
        self.assertEqual(len(list(iter_reachable_states(2))), 29)


class TestMinimaxPlayer(unittest.TestCase):
    def test_select_move_matches_search(self) -> None:
        player = MinimaxPlayer("bot")
        state = _state(["XX ", " O ", "   "], O)
        move = asyncio.run(player.select_move(state))
        self.assertEqual(move, Position(0, 2))
        self.assertEqual(player.name, "bot")


if __name__ == "__main__":
    unittest.main()
