"""
Code validation.

This module answers the question: "Is this a legal code for the board?"
A code is valid iff:
  - it has exactly `holes` symbols
  - every symbol is an integer in [0, colors)

`validate_code` reports problems as a returned InvalidGuess value (None when
the code is fine) so a caller can check the result at the call site.
`parse_code` reads user text such as "0123" or "0 1 2 3" and raises.
"""

from typing import Optional, Sequence

from .feedback import Code


class InvalidGuess(ValueError):
    """A code that does not fit the board (wrong length or symbol out of range)."""

    def __init__(self, message: str, code: Sequence = ()):
        super().__init__(message)
        self.code = tuple(code)


def validate_code(code: Sequence, holes: int, colors: int) -> Optional[InvalidGuess]:
    """
    Return None if `code` is valid for a (holes, colors) board, else an
    InvalidGuess describing the first problem found.
    """
    if len(code) != holes:
        return InvalidGuess(f"code must have {holes} symbols; got {len(code)}", code)

    for i, sym in enumerate(code):
        # bool is an int subclass but never a symbol
        if not isinstance(sym, int) or isinstance(sym, bool):
            return InvalidGuess(f"symbol at position {i} is not an integer: {sym!r}", code)
        if sym < 0 or sym >= colors:
            return InvalidGuess(
                f"symbol at position {i} out of range [0, {colors}): {sym}", code)

    return None


def parse_code(text: str, holes: int, colors: int) -> Code:
    """
    Parse and validate a code typed by a user.

    Accepts separated symbols ("0 1 2 3", "0,1,2,3") or, when every symbol is a
    single digit, a compact string ("0123").

    Raises:
      InvalidGuess if the text is not a valid code for the board.
    """
    raw = text.strip().replace(",", " ")
    parts = raw.split() if " " in raw else list(raw)
    try:
        code = tuple(int(p) for p in parts)
    except ValueError as e:
        raise InvalidGuess(f"not a code: {text!r}") from e

    err = validate_code(code, holes, colors)
    if err is not None:
        raise err
    return code
