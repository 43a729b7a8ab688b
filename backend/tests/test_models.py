from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from models import STARTING_LIVES, GameSession, Question


def _question() -> Question:
    return Question(text="Measure the distance about 40 cm (tolerance 2 cm)", target=40, tolerance=2)


def test_game_session_defaults() -> None:
    session = GameSession(player_id=7, current_question=_question(), generation=1)
    assert session.score == 0
    assert session.lives == STARTING_LIVES == 3
    assert session.questions_answered == 0
    assert isinstance(session.started_at, datetime)
    assert session.started_at.tzinfo is not None
    assert session.is_over is False


def test_game_session_is_over_at_zero_lives() -> None:
    session = GameSession(player_id=7, current_question=_question(), generation=1, lives=0)
    assert session.is_over is True


def test_question_is_immutable() -> None:
    question = _question()
    with pytest.raises(FrozenInstanceError):
        question.target = 99  # type: ignore[misc]
