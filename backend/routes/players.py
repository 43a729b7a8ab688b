"""Player login and device lookup."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.dependencies import get_gateway
from app.models import LatestPlayerResponse, PlayerCreateRequest, PlayerResponse
from services import PersistenceGateway
from services.errors import BadRequestError

router = APIRouter(tags=["players"])
logger = logging.getLogger(__name__)


@router.post("/player", response_model=PlayerResponse)
async def create_player(
    body: PlayerCreateRequest,
    gateway: PersistenceGateway = Depends(get_gateway),
) -> PlayerResponse:
    """Log a player in. Every login gets a fresh player id."""
    username = body.username.strip()
    if not username:
        raise BadRequestError("Username cannot be empty.")
    try:
        player = await gateway.create_player(username)
    except Exception as exc:  # noqa: BLE001
        logger.error("[players] create_player failed for %r: %s", username, exc, exc_info=True)
        raise HTTPException(status_code=500, detail=f"A database error occurred: {exc}") from exc
    return PlayerResponse(id=player.id, username=player.username)


@router.get(
    "/player/latest",
    response_model=LatestPlayerResponse,
    responses={404: {"description": "No player has logged in yet"}},
)
async def latest_player(gateway: PersistenceGateway = Depends(get_gateway)):
    """Most recently created player; the measuring device polls this before submitting."""
    player = await gateway.latest_player()
    if player is None:
        return JSONResponse(status_code=404, content={"status": "not_found"})
    return LatestPlayerResponse(user_id=player.id, username=player.username)
