"""In-memory game session store. Keyed by player ID."""

from __future__ import annotations

from models import GameSession


class SessionStore:
    def __init__(self) -> None:
        self._sessions: dict[int, GameSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._sessions

    def create(self, player_id: int, session: GameSession) -> None:
        if player_id in self._sessions:
            raise ValueError(f"Session already exists for player {player_id}")
        self._sessions[player_id] = session

    def get(self, player_id: int) -> GameSession | None:
        return self._sessions.get(player_id)

    def replace(self, player_id: int, session: GameSession) -> None:
        self._sessions[player_id] = session

    def remove(self, player_id: int) -> GameSession | None:
        return self._sessions.pop(player_id, None)

    def player_ids(self) -> list[int]:
        return list(self._sessions)
