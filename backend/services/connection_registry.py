from __future__ import annotations

import logging

from services.channel import PushChannel

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """
    One live push channel per player, with a reverse index for close events.

    All methods are synchronous, so on a single event loop each call is
    observed as one step: the two indexes never disagree between awaits.
    """

    def __init__(self) -> None:
        self._by_player: dict[int, PushChannel] = {}
        self._by_channel: dict[PushChannel, int] = {}

    def __len__(self) -> int:
        return len(self._by_player)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._by_player

    def attach(self, player_id: int, channel: PushChannel) -> None:
        existing = self._by_player.get(player_id)
        if existing is not None and existing is not channel:
            logger.info("[registry] Evicting previous channel %s for player %s", existing.label, player_id)
            self._by_channel.pop(existing, None)
            existing.close()

        previous_owner = self._by_channel.get(channel)
        if previous_owner is not None and previous_owner != player_id:
            self._by_player.pop(previous_owner, None)

        self._by_player[player_id] = channel
        self._by_channel[channel] = player_id

    def lookup_by_player(self, player_id: int) -> PushChannel | None:
        return self._by_player.get(player_id)

    def lookup_by_channel(self, channel: PushChannel) -> int | None:
        return self._by_channel.get(channel)

    def detach(self, player_id: int) -> PushChannel | None:
        channel = self._by_player.pop(player_id, None)
        if channel is not None:
            self._by_channel.pop(channel, None)
        return channel

    def channels(self) -> list[PushChannel]:
        return list(self._by_player.values())
