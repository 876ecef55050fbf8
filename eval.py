#!/usr/bin/env python3
"""
Evaluate the minimax opponent.

Usage:
    python eval.py
    python eval.py --games 500 --seed 1
    python eval.py --size 3 --min-marks 0 --verbose
"""

import sys
import logging
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import (
    eval_vs_random,
    eval_never_loses,
    eval_pruning_agreement_all_states,
)


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe minimax opponent")
    parser.add_argument("--size", type=int, default=3, help="Board size")
    parser.add_argument("--games", type=int, default=100, help="Number of games vs random")
    parser.add_argument("--seed", type=int, default=0, help="Random opponent seed")
    parser.add_argument("--min-marks", type=int, default=3,
                        help="Only check pruning on states with at least this many marks")
    parser.add_argument("--skip-exhaustive", action="store_true", help="Skip exhaustive checks")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Board: {args.size}x{args.size}")

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({args.games} games)...")
    w, d, l = eval_vs_random(games=args.games, size=args.size, seed=args.seed, progress=True)
    print(f"  Wins:   {w:.2%}")
    print(f"  Draws:  {d:.2%}")
    print(f"  Losses: {l:.2%}")

    if args.skip_exhaustive:
        return

    # Every opponent reply sequence
    print("\nvs All Reply Sequences...")
    results = eval_never_loses(size=args.size)
    print(f"  Games:  {results['games']}")
    print(f"  Wins:   {results['wins']}")
    print(f"  Draws:  {results['draws']}")
    print(f"  Losses: {results['losses']}")

    # Pruning agreement
    print(f"\nPruning Agreement (states with >= {args.min_marks} marks)...")
    pa = eval_pruning_agreement_all_states(size=args.size, min_marks=args.min_marks, progress=True)
    print(f"  States:        {pa['states']}")
    print(f"  Nodes (a-b):   {pa['pruned_nodes']:,}")
    print(f"  Nodes (plain): {pa['plain_nodes']:,}")
    print(f"  Disagreements: {len(pa['disagreements'])}")
    for state, pruned, plain in pa["disagreements"][:5]:
        print(state.board.render())
        print(f"  alpha-beta {pruned.move} ({pruned.score}) vs minimax {plain.move} ({plain.score})")

    if results["losses"] or pa["disagreements"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
