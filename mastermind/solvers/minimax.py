"""
Minimax (worst-case bucket) solver.

Idea:
  For each remaining candidate g, partition the CURRENT candidates by the
  feedback they would give against g. The score of g is the size of its
  largest bucket: how many candidates survive if the answer is as unhelpful
  as possible. Pick the g with the smallest score.
  Tie-break: the lexicographically smallest g.

Only remaining candidates are considered as guesses (no "probe" guesses
outside the candidate set), so results differ from Knuth's published
five-guess figures for 4x6.

Pruning (does not change the answer):
  - a guess is dropped as soon as one of its buckets reaches the best score;
  - the outcome space caps the number of buckets, so ceil(n / |outcomes|)
    is a floor no guess can beat and ends the search.
"""

from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from mastermind.engine import Code, Feedback, evaluate
from .base import BaseSolver, SearchCancelled, register

log = logging.getLogger(__name__)


def worst_bucket(guess: Code, candidates: Sequence[Code], limit: Optional[int] = None) -> int:
    """
    Size of the largest feedback bucket for `guess` over `candidates`.

    If `limit` is given, stop counting once any bucket reaches it and return
    that bucket's size (the exact maximum is then irrelevant to the caller).
    """
    buckets: Dict[Feedback, int] = defaultdict(int)
    worst = 0
    _evaluate = evaluate
    for ans in candidates:
        fb = _evaluate(guess, ans)
        buckets[fb] += 1
        c = buckets[fb]
        if c > worst:
            worst = c
            if limit is not None and worst >= limit:
                return worst
    return worst


def minimax_guess(candidates: Sequence[Code], outcomes: Sequence[Feedback],
                  cancel=None) -> Code:
    """
    Return the candidate with the smallest worst-case bucket.

    Guesses are scanned in ascending order and only a strictly better score
    replaces the incumbent, so ties go to the smallest code.

    Raises:
      ValueError      if `candidates` is empty
      SearchCancelled if `cancel` (a threading.Event) gets set
    """
    if not candidates:
        raise ValueError("no candidates remain; feedback history is inconsistent")

    pool = sorted(candidates)
    n = len(pool)
    if n == 1:
        return pool[0]

    # no guess can produce more buckets than there are outcomes
    floor = -(-n // max(1, len(outcomes)))

    best: Optional[Code] = None
    best_score = n + 1
    for g in pool:
        if cancel is not None and cancel.is_set():
            raise SearchCancelled(f"minimax search cancelled after scoring up to {best}")

        score = worst_bucket(g, pool, limit=best_score)
        if score < best_score:
            best, best_score = g, score
            if best_score <= floor:
                break

    log.debug("minimax: %d candidates -> %s (worst bucket %d)", n, best, best_score)
    return best  # type: ignore[return-value]


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (worst-case bucket)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Code:
        candidates: List[Code] = state["candidates"]
        outcomes: List[Feedback] = state["outcomes"]
        self._require_candidates(candidates)
        return minimax_guess(candidates, outcomes, cancel=state.get("cancel"))
