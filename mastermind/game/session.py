"""
One Mastermind game against one hidden code.

State machine:
    INIT --take_turn--> GUESSING --take_turn--> ... --> WON | LOST

  - INIT:     full candidate set, no turns, hidden code may be (re)set
  - GUESSING: at least one turn taken, game still open
  - WON:      last feedback was all blacks (terminal)
  - LOST:     turn budget used up without a win (terminal)

Each turn:
  1) turn 1 uses the fixed opening guess; later turns first narrow the
     candidates with the previous (guess, feedback), then ask the solver
  2) the guess is scored against the hidden code and recorded

The hidden code is only ever used for scoring; solvers never see it.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from mastermind.engine import (
    Code, Feedback, InvalidGuess, evaluate, filter_candidates,
    generate_all_candidates, generate_outcome_space, opening_guess, validate_code,
)
from mastermind.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

# Guess budget used by the original game boards
DEFAULT_MAX_TURNS = 20


class State(Enum):
    INIT = "init"
    GUESSING = "guessing"
    WON = "won"
    LOST = "lost"


class Status(Enum):
    CONTINUING = "continuing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Turn:
    guess: Code
    feedback: Feedback


@dataclass(frozen=True)
class TurnResult:
    guess: Code
    feedback: Feedback
    status: Status


class Session:
    def __init__(self, holes: int, colors: int, strategy: str = "minimax",
                 max_turns: int = DEFAULT_MAX_TURNS):
        if not isinstance(max_turns, int) or max_turns < 1:
            raise ValueError(f"max_turns must be an integer >= 1; got {max_turns!r}")

        self._solver: BaseSolver = create_solver(strategy)

        # generate_* validate holes/colors
        self._all: Tuple[Code, ...] = tuple(generate_all_candidates(holes, colors))
        self._outcomes: Tuple[Feedback, ...] = tuple(generate_outcome_space(holes))

        self.holes = holes
        self.colors = colors
        self.strategy = strategy
        self.max_turns = max_turns

        self._solver.reset(holes=holes, colors=colors)

        self._hidden: Optional[Code] = None
        self._candidates: List[Code] = list(self._all)
        self._history: List[Turn] = []
        self._state = State.INIT

    # ---- read-only views ----

    @property
    def state(self) -> State:
        return self._state

    @property
    def turn_count(self) -> int:
        return len(self._history)

    @property
    def history(self) -> Tuple[Turn, ...]:
        return tuple(self._history)

    @property
    def candidates(self) -> Tuple[Code, ...]:
        return tuple(self._candidates)

    @property
    def all_candidates(self) -> Tuple[Code, ...]:
        return self._all

    @property
    def outcomes(self) -> Tuple[Feedback, ...]:
        return self._outcomes

    @property
    def hidden_code_set(self) -> bool:
        return self._hidden is not None

    @property
    def finished(self) -> bool:
        return self._state in (State.WON, State.LOST)

    # ---- game control ----

    def set_hidden_code(self, code: Sequence[int]) -> Optional[InvalidGuess]:
        """
        Set the code to be broken.

        Returns None on success, or the InvalidGuess describing why `code`
        does not fit the board; the session is left unchanged in that case.

        Raises:
          RuntimeError if turns were already taken in this game (reset first).
        """
        if self._state is not State.INIT:
            raise RuntimeError("hidden code can only be set before the first turn; call reset()")

        err = validate_code(code, self.holes, self.colors)
        if err is not None:
            log.debug("rejected hidden code %r: %s", code, err)
            return err

        self._hidden = tuple(code)
        return None

    def take_turn(self, cancel=None) -> TurnResult:
        """
        Make one guess, score it and advance the state machine.

        Args:
          cancel: optional threading.Event forwarded to the solver; if it is
                  set mid-search the solver raises SearchCancelled and the
                  session is not modified.
        """
        if self._hidden is None:
            raise RuntimeError("no hidden code set")
        if self.finished:
            raise RuntimeError(f"game is over ({self._state.value}); call reset()")

        if not self._history:
            candidates = self._candidates
            guess = opening_guess(self.holes, self.colors)
        else:
            last = self._history[-1]
            candidates = filter_candidates(self._candidates, last.guess, last.feedback)
            state = {
                "turn": len(self._history) + 1,
                "history": [(t.guess, t.feedback) for t in self._history],
                "candidates": candidates,
                "outcomes": list(self._outcomes),
                "holes": self.holes,
                "colors": self.colors,
                "cancel": cancel,
            }
            guess = tuple(self._solver.next_guess(state))

        fb = evaluate(guess, self._hidden)

        # commit only once the guess has been chosen
        self._candidates = candidates
        self._history.append(Turn(guess, fb))

        if fb.blacks == self.holes:
            self._state = State.WON
            status = Status.WON
        elif len(self._history) >= self.max_turns:
            self._state = State.LOST
            status = Status.LOST
        else:
            self._state = State.GUESSING
            status = Status.CONTINUING

        log.debug("turn %d: guess=%s feedback=%s candidates=%d status=%s",
                  len(self._history), guess, fb, len(candidates), status.value)
        return TurnResult(guess, fb, status)

    def reset(self) -> None:
        """
        Start a new game on the same board and strategy.

        Restores the full candidate set, clears the history and the hidden
        code; the caller supplies a new code with set_hidden_code().
        """
        self._hidden = None
        self._candidates = list(self._all)
        self._history = []
        self._state = State.INIT


def new_session(holes: int, colors: int, strategy: str = "minimax",
                max_turns: int = DEFAULT_MAX_TURNS) -> Session:
    return Session(holes, colors, strategy=strategy, max_turns=max_turns)
