from fastapi import APIRouter, Depends

from app.dependencies import get_controller
from app.models import ErrorResponse, SubmitRequest, SubmitResponse
from services import SessionController

router = APIRouter(tags=["game"])


@router.post(
    "/submit",
    response_model=SubmitResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_measurement(
    body: SubmitRequest,
    controller: SessionController = Depends(get_controller),
) -> SubmitResponse:
    """Device submits one measured distance for the player's current question."""
    correct = await controller.submit(body.player_id, body.distance)
    return SubmitResponse(correct=correct)
