"""
Mastermind feedback (black/white pegs) for a single (guess, target) pair.

Conventions:
  - blacks : positions where guess and target hold the same symbol
  - whites : further symbols the two codes share, but at different positions

Whites use multiset semantics: a target symbol already matched as a black is
never counted again, and one target symbol can satisfy at most one guess symbol.

Algorithm (two-pass, same shape as Wordle scoring):
  1) First pass counts blacks and collects the unmatched symbols of each code.
  2) Second pass sums, per symbol, the smaller of the two leftover counts.

The result is symmetric: evaluate(a, b) == evaluate(b, a).
"""

from collections import Counter
from typing import NamedTuple, Sequence, Tuple

# A code is an immutable, ordered tuple of symbols in [0, colors)
Code = Tuple[int, ...]


class Feedback(NamedTuple):
    blacks: int
    whites: int

    def __str__(self) -> str:
        return f"{self.blacks}B{self.whites}W"


def _check_lengths(guess: Sequence[int], target: Sequence[int]) -> None:
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target must be the same length (got {len(guess)} and {len(target)})")


def blacks_count(guess: Sequence[int], target: Sequence[int]) -> int:
    """Number of positions where `guess` and `target` hold the same symbol."""
    _check_lengths(guess, target)
    return sum(1 for g, t in zip(guess, target) if g == t)


def whites_count(guess: Sequence[int], target: Sequence[int]) -> int:
    """
    Number of right-symbol, wrong-position matches.

    Equal to sum over symbols of min(leftover_guess[s], leftover_target[s]),
    where the leftovers exclude the positions already counted as blacks.
    """
    _check_lengths(guess, target)
    left_guess: Counter = Counter()
    left_target: Counter = Counter()
    for g, t in zip(guess, target):
        if g != t:
            left_guess[g] += 1
            left_target[t] += 1
    return sum(min(n, left_target[s]) for s, n in left_guess.items())


def evaluate(guess: Sequence[int], target: Sequence[int]) -> Feedback:
    """
    Compute the (blacks, whites) feedback for `guess` against `target`.

    Examples:
      evaluate((0, 0, 1, 1), (0, 1, 2, 3)) -> Feedback(blacks=1, whites=1)
      evaluate((1, 2, 3, 4), (1, 2, 3, 4)) -> Feedback(blacks=4, whites=0)
    """
    _check_lengths(guess, target)

    # Pass 1: blacks, and leftover symbol counts on both sides
    blacks = 0
    left_guess: Counter = Counter()
    left_target: Counter = Counter()
    for g, t in zip(guess, target):
        if g == t:
            blacks += 1
        else:
            left_guess[g] += 1
            left_target[t] += 1

    # Pass 2: each leftover symbol pairs up at most min(count) times
    whites = 0
    for s, n in left_guess.items():
        whites += min(n, left_target[s])

    return Feedback(blacks, whites)
