import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.config import get_leaderboard_limit, get_score_distribution_limit
from app.dependencies import get_gateway
from app.models import LeaderboardRow, ScoreDistributionRow
from services import PersistenceGateway

router = APIRouter(tags=["leaderboard"])
logger = logging.getLogger(__name__)


@router.get("/leaderboard", response_model=list[LeaderboardRow])
async def get_leaderboard(
    limit: int | None = Query(None, ge=1, le=100),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> list[LeaderboardRow]:
    """Best score per username, highest first."""
    try:
        entries = await gateway.top_scores(limit or get_leaderboard_limit())
    except Exception as exc:  # noqa: BLE001
        logger.error("[leaderboard] top_scores failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail="Database error while fetching leaderboard.") from exc
    return [LeaderboardRow(username=e.username, high_score=e.high_score) for e in entries]


@router.get("/score-distribution", response_model=list[ScoreDistributionRow])
async def get_score_distribution(
    limit: int | None = Query(None, ge=1, le=100),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> list[ScoreDistributionRow]:
    """Most frequently achieved final scores."""
    try:
        buckets = await gateway.score_distribution(limit or get_score_distribution_limit())
    except Exception as exc:  # noqa: BLE001
        logger.error("[leaderboard] score_distribution failed: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail="Database error while fetching score distribution.") from exc
    return [ScoreDistributionRow(score=b.score, times_achieved=b.times_achieved) for b in buckets]
