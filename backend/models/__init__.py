from .player import LeaderboardEntry, Player, ScoreBucket
from .question import TARGET_MAX, TARGET_MIN, TOLERANCE_MAX, TOLERANCE_MIN, Question
from .session import STARTING_LIVES, GameSession

__all__ = [
    "GameSession",
    "STARTING_LIVES",
    "Question",
    "TARGET_MIN",
    "TARGET_MAX",
    "TOLERANCE_MIN",
    "TOLERANCE_MAX",
    "Player",
    "LeaderboardEntry",
    "ScoreBucket",
]
