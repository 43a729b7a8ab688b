"""WebSocket message schemas for the game channel.

Client -> server:
  {"type": "startGame", "playerId": int}

Server -> client:
  {"type": "newQuestion", "question": str, "lives": int, "score": int}
  {"type": "roundResult", "result": "Correct" | "Wrong", "distance": number,
   "newScore": int, "lives": int}
  {"type": "gameOver", "finalScore": int}
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from models import GameSession


class _Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class StartGameMessage(_Message):
    type: Literal["startGame"]
    player_id: int = Field(alias="playerId", gt=0)


class NewQuestionMessage(_Message):
    type: Literal["newQuestion"] = "newQuestion"
    question: str
    lives: int
    score: int


class RoundResultMessage(_Message):
    type: Literal["roundResult"] = "roundResult"
    result: Literal["Correct", "Wrong"]
    distance: int | float
    new_score: int = Field(alias="newScore")
    lives: int


class GameOverMessage(_Message):
    type: Literal["gameOver"] = "gameOver"
    final_score: int = Field(alias="finalScore")


def parse_client_message(raw: str | bytes) -> StartGameMessage | None:
    """Parse an incoming frame; None for anything that is not a valid startGame."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    try:
        return StartGameMessage.model_validate(data)
    except ValidationError:
        return None


def new_question(session: GameSession) -> dict[str, Any]:
    return NewQuestionMessage(
        question=session.current_question.text,
        lives=session.lives,
        score=session.score,
    ).to_payload()


def round_result(session: GameSession, *, correct: bool, measured: int | float) -> dict[str, Any]:
    return RoundResultMessage(
        result="Correct" if correct else "Wrong",
        distance=measured,
        new_score=session.score,
        lives=session.lives,
    ).to_payload()


def game_over(session: GameSession) -> dict[str, Any]:
    return GameOverMessage(final_score=session.score).to_payload()
