#!/usr/bin/env python3
"""
Play TicTacToe in the terminal.

Usage:
    python play.py
    python play.py --size 4
"""

import sys
import asyncio
import logging
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import (
    BoardUpdated,
    CallbackListener,
    GameConfig,
    GameOver,
    GameRunner,
    GameState,
    InvalidMove,
    MinimaxPlayer,
    PlayerMark,
    Position,
    RandomPlayer,
)
from tictactoe.events import unknown_event


RED = "\033[31m"
RESET = "\033[0m"


def print_board(state: GameState):
    """Pretty print board with row/column indices."""
    n = state.board.size
    print("\n   " + "   ".join(str(c) for c in range(n)))
    for r, row in enumerate(state.board.rows):
        print(f"{r}  " + " | ".join(str(cell) for cell in row))
        if r < n - 1:
            print("   " + "-+-".join("-" * n))


def print_error(message: str):
    print(f"{RED}X Error: {message}{RESET}")


async def prompt(text: str) -> str:
    return await asyncio.to_thread(input, f"> {text}: ")


class HumanConsolePlayer:
    """Reads 'row col' from stdin until a valid move is entered."""

    def __init__(self, name: str):
        self.name = name

    async def select_move(self, state: GameState) -> Position:
        print(f"\n{self.name}'s turn ({state.next_to_play})")
        while True:
            parts = (await prompt("Enter position (row col, e.g. '0 1')")).split()
            if len(parts) != 2:
                print_error("Invalid input. Please enter two numbers separated by space.")
                continue
            try:
                row, col = int(parts[0]), int(parts[1])
            except ValueError:
                print_error("Invalid numbers. Please enter valid integers.")
                continue
            position = Position(row, col)
            if not state.is_valid_move(position):
                print_error(f"Invalid move. Position {position} is not available.")
                continue
            return position


async def create_player(mark: PlayerMark):
    """Ask for a name and a player type; returns a player factory."""
    print(f"\n=== Configure Player {mark} ===")
    name = (await prompt(f"Enter name for Player {mark}")).strip() or f"Player {mark}"
    while True:
        print("\nSelect player type:")
        print("  1. Human")
        print("  2. Computer (Random)")
        print("  3. Computer (Minimax)")
        choice = (await prompt("Enter choice (1-3)")).strip()
        if choice == "1":
            return lambda: HumanConsolePlayer(name)
        if choice == "2":
            return lambda: RandomPlayer(name)
        if choice == "3":
            return lambda: MinimaxPlayer(name)
        print_error("Invalid choice. Please enter 1, 2, or 3.")


async def run(size: int):
    print("\n=== TIC-TAC-TOE ===")
    player_x = await create_player(PlayerMark.X)
    player_o = await create_player(PlayerMark.O)
    names = {}

    def on_event(event):
        if isinstance(event, BoardUpdated):
            print_board(event.state)
        elif isinstance(event, InvalidMove):
            print_error(event.message)
        elif isinstance(event, GameOver):
            if event.is_draw:
                print("\n=== GAME OVER - DRAW! ===")
            else:
                print(f"\n=== GAME OVER - {event.winner} WINS! ===")
                print(f"Congrats, {names[event.winner]}!")
        else:
            raise unknown_event(event)

    def named(mark, factory):
        def make():
            player = factory()
            names[mark] = player.name
            return player
        return make

    runner = GameRunner(GameConfig(
        player_x=named(PlayerMark.X, player_x),
        player_o=named(PlayerMark.O, player_o),
        listener=CallbackListener(on_event),
        board_size=size,
    ))
    await runner.play()


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe in the terminal")
    parser.add_argument("--size", type=int, default=3, help="Board size (N x N)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run(args.size))
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted")


if __name__ == "__main__":
    main()
