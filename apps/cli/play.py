# apps/cli/play.py
"""
Human guesses the computer's random code.

Type a guess per line (e.g. 0123); the game answers with black/white pegs.
Scoring uses the same engine as the solvers.
"""

from __future__ import annotations

import argparse
import random
import sys

from mastermind.engine import InvalidGuess, evaluate, parse_code
from mastermind.game import DEFAULT_MAX_TURNS
from mastermind.harness.io import format_code


def main():
    ap = argparse.ArgumentParser(description="mastermind: break the computer's code")
    ap.add_argument("--holes", type=int, default=4)
    ap.add_argument("--colors", type=int, default=6)
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS)
    ap.add_argument("--seed", type=int, help="RNG seed for the secret")
    args = ap.parse_args()

    if args.holes < 1 or args.colors < 1:
        raise SystemExit("--holes and --colors must be >= 1")

    rng = random.Random(args.seed)
    secret = tuple(rng.randrange(args.colors) for _ in range(args.holes))

    print(f"{args.holes} holes, symbols 0..{args.colors - 1}, {args.max_turns} guesses.")
    turn = 0
    while turn < args.max_turns:
        sys.stdout.write(f"guess {turn + 1}> ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            break
        try:
            guess = parse_code(line, args.holes, args.colors)
        except InvalidGuess as e:
            print(f"  {e}")
            continue

        turn += 1
        fb = evaluate(guess, secret)
        print(f"  blacks={fb.blacks} whites={fb.whites}")
        if fb.blacks == args.holes:
            print(f"Solved in {turn} guesses.")
            return

    print(f"Out of guesses. The code was {format_code(secret)}")


if __name__ == "__main__":
    main()
