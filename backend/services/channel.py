from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Any

logger = logging.getLogger(__name__)

_channel_ids = itertools.count(1)


class PushChannel:
    """
    Outbox for one WebSocket connection.

    - push() enqueues without awaiting, so callers can notify while holding a lock
      and messages keep the order they were produced in.
    - close() enqueues a close marker behind any pending messages; the writer loop
      sees it via next_outgoing() returning None and closes the socket.
    - Unbounded: game messages are never dropped.
    """

    def __init__(self, label: str | None = None) -> None:
        self.id = next(_channel_ids)
        self.label = label or f"channel-{self.id}"
        self._queue: asyncio.Queue[dict[str, Any] | None] = asyncio.Queue()
        self._closed = False

    def __repr__(self) -> str:
        return f"PushChannel({self.label!r}, closed={self._closed})"

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, payload: dict[str, Any]) -> bool:
        if self._closed:
            logger.debug("[channel] %s closed; dropping %s", self.label, payload.get("type"))
            return False
        self._queue.put_nowait(payload)
        return True

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(None)

    async def next_outgoing(self) -> dict[str, Any] | None:
        """Next payload to write, or None once the channel has been closed."""
        return await self._queue.get()

    def pending(self) -> list[dict[str, Any]]:
        """Drain queued payloads without awaiting (close marker excluded)."""
        drained: list[dict[str, Any]] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return drained
            if item is not None:
                drained.append(item)
