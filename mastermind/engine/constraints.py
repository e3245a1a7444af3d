"""
Candidate filtering given one observed (guess, feedback) pair.

Given:
  - the current candidate list (ascending order)
  - the last guess and the feedback it received

Return:
  - the candidates that would have produced exactly that feedback.

The hidden code always survives: by definition it produces the observed
feedback against the guess.
"""

from typing import Iterable, List, Sequence

from .feedback import Code, Feedback, evaluate


def filter_candidates(candidates: Iterable[Code], guess: Sequence[int],
                      feedback: Feedback) -> List[Code]:
    """
    Keep only candidates c with evaluate(guess, c) == feedback.

    Returns:
      List of consistent candidates (order preserved as in `candidates`).
    """
    expected = Feedback(*feedback)
    return [c for c in candidates if evaluate(guess, c) == expected]
