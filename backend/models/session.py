from dataclasses import dataclass, field
from datetime import datetime, timezone

from .question import Question

STARTING_LIVES = 3


@dataclass
class GameSession:
    player_id: int
    current_question: Question
    generation: int                        # per-player restart counter
    score: int = 0
    lives: int = STARTING_LIVES
    questions_answered: int = 0
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_over(self) -> bool:
        return self.lives <= 0
