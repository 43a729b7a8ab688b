"""Errors surfaced through the HTTP boundary. Each carries a status code and reason."""

from __future__ import annotations


class GameError(Exception):
    status_code = 500
    reason = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(GameError):
    status_code = 400
    reason = "bad_request"


class PlayerNotFoundError(GameError):
    status_code = 404
    reason = "unknown_player"

    def __init__(self, player_id: int) -> None:
        super().__init__(f"Invalid playerId. Player with ID {player_id} does not exist.")
        self.player_id = player_id


class NoActiveSessionError(GameError):
    status_code = 404
    reason = "no_active_session"

    def __init__(self, player_id: int) -> None:
        super().__init__("No active game found for this player. Please start a new game.")
        self.player_id = player_id


class ChannelMissingError(GameError):
    status_code = 500
    reason = "channel_missing"

    def __init__(self, player_id: int) -> None:
        super().__init__("Internal server error: Player socket not found.")
        self.player_id = player_id
