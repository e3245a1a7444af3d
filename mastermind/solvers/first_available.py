"""
First Available solver.

Strategy:
  - Guess the lexicographically smallest code still consistent with all
    feedback so far.

Notes:
  - Uses min() rather than list position, so the choice does not depend on
    how the caller happens to order the candidates.
  - Baseline strategy; no lookahead at all.
"""

from __future__ import annotations

from typing import List

from mastermind.engine import Code
from .base import BaseSolver, register


@register
class FirstAvailableSolver(BaseSolver):
    id = "first_available"
    name = "First Available"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Code:
        candidates: List[Code] = state["candidates"]
        self._require_candidates(candidates)
        return min(candidates)
