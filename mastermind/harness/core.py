"""
Experiment harness core primitives.

- run_case:  play a single game (one hidden code) on a Session.
- run_sweep: play every possible hidden code (or a seeded sample of them),
             `runs` times over, reusing one Session via reset().
- summarize: average / maximum guesses and the guess-count distribution.

These functions are UI-agnostic so they can be reused by the CLI, a notebook
or a test without changes.
"""

from __future__ import annotations
import logging
import random
import time
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from mastermind.game import DEFAULT_MAX_TURNS, Session, Status

log = logging.getLogger(__name__)


def run_case(session: Session, hidden_code: Sequence[int]) -> Dict:
    """
    Reset `session`, set `hidden_code` and take turns until WON or LOST.

    Returns:
        dict with keys:
            answer (tuple), success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)]), solver_id (str)

    Raises:
        InvalidGuess if `hidden_code` does not fit the session's board.
    """
    session.reset()
    err = session.set_hidden_code(hidden_code)
    if err is not None:
        raise err

    t0 = time.perf_counter()
    result = None
    while result is None or result.status is Status.CONTINUING:
        result = session.take_turn()
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": tuple(hidden_code),
        "success": result.status is Status.WON,
        "guesses": session.turn_count,
        "time_ms": dt,
        "history": [(t.guess, t.feedback) for t in session.history],
        "solver_id": session.strategy,
    }


def run_sweep(
        holes: int,
        colors: int,
        strategy: str,
        *,
        max_turns: int = DEFAULT_MAX_TURNS,
        runs: int = 1,
        sample: Optional[int] = None,
        seed: Optional[int] = None,
        on_case: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Play every hidden code on the board `runs` times with one strategy.

    If `sample` is given, only that many codes are played per run, drawn
    without replacement by a Random seeded with `seed` (same cases each run).
    `on_case` is called with each result as soon as it is available, which
    lets a caller drive a progress display.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1; got {runs}")

    session = Session(holes, colors, strategy=strategy, max_turns=max_turns)
    cases = list(session.all_candidates)
    if sample is not None and sample < len(cases):
        rng = random.Random(seed)
        cases = sorted(rng.sample(cases, sample))

    log.info("sweep %s: %d codes x %d run(s) on %dx%d", strategy, len(cases), runs, holes, colors)

    out: List[Dict] = []
    for run in range(1, runs + 1):
        for code in cases:
            r = run_case(session, code)
            r["run"] = run
            out.append(r)
            if on_case is not None:
                on_case(r)
        log.info("sweep %s: run %d of %d done", strategy, run, runs)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch of results.

    Returns:
        dict with games, wins, losses, average, maximum (guess counts) and
        distribution {guess_count: games}.
    """
    if not results:
        return {"games": 0, "wins": 0, "losses": 0, "average": 0.0, "maximum": 0,
                "distribution": {}}

    guesses = np.asarray([r["guesses"] for r in results], dtype=int)
    wins = int(sum(1 for r in results if r["success"]))
    counts = np.bincount(guesses)

    return {
        "games": int(guesses.size),
        "wins": wins,
        "losses": int(guesses.size) - wins,
        "average": float(guesses.mean()),
        "maximum": int(guesses.max()),
        "distribution": {int(k): int(v) for k, v in enumerate(counts) if v},
    }
