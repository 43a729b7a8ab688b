from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat


class _AliasedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PlayerCreateRequest(BaseModel):
    username: str


class PlayerResponse(BaseModel):
    id: int
    username: str


class LatestPlayerResponse(BaseModel):
    """Read by the measuring device to learn whom it is measuring for."""

    user_id: int
    username: str


class SubmitRequest(_AliasedModel):
    player_id: int = Field(alias="playerId")
    distance: int | FiniteFloat


class SubmitResponse(BaseModel):
    status: Literal["Received"] = "Received"
    correct: bool


class LeaderboardRow(_AliasedModel):
    username: str
    high_score: int = Field(alias="highScore")


class ScoreDistributionRow(_AliasedModel):
    score: int
    times_achieved: int = Field(alias="timesAchieved")


class ErrorResponse(BaseModel):
    error: str
    reason: str | None = None
