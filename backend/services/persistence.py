"""Player and score persistence.

`PersistenceGateway` is what the controller and routes depend on. The in-memory
implementation backs the default app and the tests.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections import Counter
from typing import Protocol

from models import LeaderboardEntry, Player, ScoreBucket

logger = logging.getLogger(__name__)


class PersistenceGateway(Protocol):
    async def find_player(self, player_id: int) -> Player | None: ...

    async def create_player(self, username: str) -> Player: ...

    async def latest_player(self) -> Player | None: ...

    async def save_score(self, player_id: int, score: int) -> bool: ...

    async def top_scores(self, limit: int) -> list[LeaderboardEntry]: ...

    async def score_distribution(self, limit: int) -> list[ScoreBucket]: ...


class InMemoryPersistenceGateway:
    """
    Players and score rows kept in process memory.

    Every login creates a new player row (same as the original INSERT-only
    behaviour), so the leaderboard groups by username.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._ids = itertools.count(1)
        self._players: dict[int, Player] = {}
        self._scores: list[tuple[int, int]] = []  # (player_id, score)

    async def find_player(self, player_id: int) -> Player | None:
        async with self._lock:
            return self._players.get(player_id)

    async def create_player(self, username: str) -> Player:
        async with self._lock:
            player = Player(id=next(self._ids), username=username)
            self._players[player.id] = player
        logger.info("[persistence] Created player %r with id %s", username, player.id)
        return player

    async def latest_player(self) -> Player | None:
        async with self._lock:
            if not self._players:
                return None
            return self._players[max(self._players)]

    async def save_score(self, player_id: int, score: int) -> bool:
        async with self._lock:
            if player_id not in self._players:
                logger.warning("[persistence] Refusing score for unknown player %s", player_id)
                return False
            self._scores.append((player_id, score))
        logger.info("[persistence] Score of %s saved for player %s", score, player_id)
        return True

    async def top_scores(self, limit: int) -> list[LeaderboardEntry]:
        async with self._lock:
            best: dict[str, int] = {}
            for player_id, score in self._scores:
                username = self._players[player_id].username
                best[username] = max(score, best.get(username, score))
        ranked = sorted(best.items(), key=lambda item: (-item[1], item[0]))
        return [LeaderboardEntry(username=u, high_score=s) for u, s in ranked[:limit]]

    async def score_distribution(self, limit: int) -> list[ScoreBucket]:
        async with self._lock:
            counts = Counter(score for _, score in self._scores)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], -item[0]))
        return [ScoreBucket(score=s, times_achieved=n) for s, n in ranked[:limit]]
