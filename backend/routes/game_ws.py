from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.dependencies import get_ws_controller
from services.channel import PushChannel
from services.messages import parse_client_message

router = APIRouter(tags=["game"])
logger = logging.getLogger(__name__)


async def _write_outgoing(websocket: WebSocket, channel: PushChannel) -> None:
    """Drain the channel to the socket in order; close the socket on the close marker."""
    try:
        while True:
            payload = await channel.next_outgoing()
            if payload is None:
                await websocket.close()
                return
            await websocket.send_json(payload)
    except (WebSocketDisconnect, RuntimeError, OSError) as e:
        logger.info("[game_ws] %s stopped writing: %s", channel.label, e)


@router.websocket("/ws")
async def ws_game(websocket: WebSocket) -> None:
    """
    Game channel for the browser.

    Accepts {"type": "startGame", "playerId": int}; anything else is dropped and
    the connection stays open. Pushes newQuestion / roundResult / gameOver.
    """
    controller = get_ws_controller(websocket)
    await websocket.accept()
    client = websocket.client
    channel = PushChannel(label=f"ws-{client.host}:{client.port}" if client else None)
    logger.info("[game_ws] Client connected: %s", channel.label)
    writer = asyncio.create_task(_write_outgoing(websocket, channel))
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            raw = message.get("text")
            if raw is None:
                raw = message.get("bytes")
            start = parse_client_message(raw)
            if start is None:
                logger.warning("[game_ws] Dropping malformed message on %s: %.80r", channel.label, raw)
                continue
            if await controller.start(start.player_id, channel) is None:
                # Channel was evicted by a newer connection for the same player.
                break
    except (WebSocketDisconnect, RuntimeError):
        pass
    finally:
        logger.info("[game_ws] Client disconnected: %s", channel.label)
        await controller.disconnect(channel)
        channel.close()
        with suppress(asyncio.CancelledError, asyncio.TimeoutError):
            await asyncio.wait_for(writer, timeout=1.0)
