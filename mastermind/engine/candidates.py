"""
Candidate space for a (holes, colors) board.

- generate_all_candidates: every code, in ascending lexicographic order
- generate_outcome_space:  every (blacks, whites) pair a guess can produce
- opening_guess:           the fixed first guess used by every strategy

These artifacts depend only on the board dimensions, so a Session builds
them once and treats them as read-only afterwards.
"""

from typing import List

from .feedback import Code, Feedback


def _check_dimension(name: str, value: int) -> None:
    if not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be an integer >= 1; got {value!r}")


def generate_all_candidates(holes: int, colors: int) -> List[Code]:
    """
    Enumerate all colors**holes codes by mixed-radix counting.

    Starts from the all-zero code, bumps the last position and carries to
    the left on overflow. The output is therefore sorted lexicographically.
    """
    _check_dimension("holes", holes)
    _check_dimension("colors", colors)

    out: List[Code] = []
    digits = [0] * holes
    total = colors ** holes

    for _ in range(total):
        out.append(tuple(digits))

        # increment the last position and carry leftward
        j = holes - 1
        digits[j] += 1
        while j > 0 and digits[j] == colors:
            digits[j] = 0
            j -= 1
            digits[j] += 1

    return out


def generate_outcome_space(holes: int) -> List[Feedback]:
    """
    All structurally reachable feedback pairs for a board of `holes` positions.

    Every (b, w) with b + w <= holes, except (holes - 1, 1): when all but one
    position are exact matches, the last symbol has no other position to be
    misplaced into. Ordered by blacks, then whites.
    """
    _check_dimension("holes", holes)

    outcomes: List[Feedback] = []
    for b in range(holes + 1):
        for w in range(holes - b + 1):
            if b == holes - 1 and w == 1:
                continue
            outcomes.append(Feedback(b, w))
    return outcomes


def opening_guess(holes: int, colors: int) -> Code:
    """
    First guess of every game: two 0s followed by 1s, e.g. (0, 0, 1, 1).

    With a single color there is no symbol 1, so the guess is all 0s.
    """
    _check_dimension("holes", holes)
    _check_dimension("colors", colors)
    filler = 1 if colors > 1 else 0
    return tuple(0 if i < 2 else filler for i in range(holes))
