from __future__ import annotations
from typing import Dict, List, Type

from mastermind.engine import Code

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class SearchCancelled(RuntimeError):
    """Raised by a solver when the caller's cancel event is set mid-search."""


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.holes: int = 4
        self.colors: int = 6

    def reset(self, *, holes: int, colors: int) -> None:
        self.holes = int(holes)
        self.colors = int(colors)

    def next_guess(self, state: dict) -> Code:
        """
        Choose the next guess.

        `state` keys: turn, history, candidates (ascending List[Code]),
        outcomes (List[Feedback]), holes, colors, cancel (threading.Event or None).
        """
        raise NotImplementedError("Override in subclass")

    @staticmethod
    def _require_candidates(candidates: List[Code]) -> None:
        if not candidates:
            raise ValueError("no candidates remain; feedback history is inconsistent")
