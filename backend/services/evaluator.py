from __future__ import annotations

from models import Question


def distance_from_target(question: Question, measured: int | float) -> float:
    return abs(question.target - measured)


def is_correct(question: Question, measured: int | float) -> bool:
    """True when the measurement lands within the tolerance (boundary inclusive)."""
    return distance_from_target(question, measured) <= question.tolerance
