from .session import (
    DEFAULT_MAX_TURNS, Session, State, Status, Turn, TurnResult, new_session,
)

__all__ = [
    "DEFAULT_MAX_TURNS", "Session", "State", "Status", "Turn", "TurnResult", "new_session",
]
