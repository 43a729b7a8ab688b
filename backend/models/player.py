from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    id: int
    username: str


@dataclass(frozen=True)
class LeaderboardEntry:
    username: str
    high_score: int


@dataclass(frozen=True)
class ScoreBucket:
    score: int
    times_achieved: int
