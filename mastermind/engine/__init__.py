from .feedback import Code, Feedback, evaluate, blacks_count, whites_count
from .candidates import generate_all_candidates, generate_outcome_space, opening_guess
from .constraints import filter_candidates
from .validation import InvalidGuess, validate_code, parse_code

__all__ = [
    "Code", "Feedback", "evaluate", "blacks_count", "whites_count",
    "generate_all_candidates", "generate_outcome_space", "opening_guess",
    "filter_candidates",
    "InvalidGuess", "validate_code", "parse_code",
]
