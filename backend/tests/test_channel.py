from __future__ import annotations

import asyncio

import pytest

from services.channel import PushChannel


@pytest.mark.asyncio
async def test_push_preserves_order_and_close_marker_comes_last() -> None:
    channel = PushChannel("test")
    assert channel.push({"type": "newQuestion"}) is True
    assert channel.push({"type": "roundResult"}) is True
    channel.close()

    first = await asyncio.wait_for(channel.next_outgoing(), timeout=0.5)
    second = await asyncio.wait_for(channel.next_outgoing(), timeout=0.5)
    marker = await asyncio.wait_for(channel.next_outgoing(), timeout=0.5)

    assert first == {"type": "newQuestion"}
    assert second == {"type": "roundResult"}
    assert marker is None


@pytest.mark.asyncio
async def test_push_after_close_is_dropped() -> None:
    channel = PushChannel()
    channel.close()
    channel.close()
    assert channel.closed is True
    assert channel.push({"type": "gameOver"}) is False
    assert channel.pending() == []


def test_channels_get_distinct_labels() -> None:
    a, b = PushChannel(), PushChannel()
    assert a.label != b.label
    assert a != b
