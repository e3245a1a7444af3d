# apps/cli/solve.py
"""
Computer guesses a secret code.

    $ python -m apps.cli.solve --secret 0123
    $ python -m apps.cli.solve --holes 5 --colors 8 --strategy first_available

Without --secret a random code is drawn (seeded by --seed).
"""

from __future__ import annotations

import argparse
import logging
import random

from mastermind.engine import InvalidGuess, parse_code
from mastermind.game import DEFAULT_MAX_TURNS, Status, new_session
from mastermind.harness.io import format_code
from mastermind.solvers import get_solver_ids


def main():
    ap = argparse.ArgumentParser(description="mastermind: let the computer break a code")
    ap.add_argument("--holes", type=int, default=4)
    ap.add_argument("--colors", type=int, default=6)
    ap.add_argument("--strategy", default="minimax", choices=get_solver_ids())
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS)
    ap.add_argument("--secret", help="code to break, e.g. 0123 or '0 1 2 3'")
    ap.add_argument("--seed", type=int, help="RNG seed for a random secret")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        session = new_session(args.holes, args.colors, args.strategy, args.max_turns)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    if args.secret:
        try:
            secret = parse_code(args.secret, args.holes, args.colors)
        except InvalidGuess as e:
            raise SystemExit(f"Invalid secret: {e}") from e
    else:
        rng = random.Random(args.seed)
        secret = tuple(rng.randrange(args.colors) for _ in range(args.holes))

    err = session.set_hidden_code(secret)
    if err is not None:
        raise SystemExit(f"Invalid secret: {err}")

    print(f"Secret: {format_code(secret)}")
    while True:
        r = session.take_turn()
        print(f"{session.turn_count:>3}  {format_code(r.guess)}  "
              f"blacks={r.feedback.blacks} whites={r.feedback.whites}  "
              f"({len(session.candidates)} candidates)")
        if r.status is Status.WON:
            print(f"Solved in {session.turn_count} guesses.")
            break
        if r.status is Status.LOST:
            print(f"Not solved within {session.max_turns} guesses.")
            break


if __name__ == "__main__":
    main()
