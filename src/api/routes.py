"""HTTP endpoints. Thin wrappers: everything of interest happens in the service."""

from fastapi import APIRouter, Depends, status

from src.api.deps import get_service
from src.api.models import RollRequest, ScoreResponse
from src.services.bowling_service import BowlingService

router = APIRouter()


@router.get("/healthcheck")
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post(
    "/roll", response_model=ScoreResponse, status_code=status.HTTP_201_CREATED
)
def roll(
    payload: RollRequest, service: BowlingService = Depends(get_service)
) -> ScoreResponse:
    return service.roll(payload)


@router.get("/score", response_model=ScoreResponse)
def score(service: BowlingService = Depends(get_service)) -> ScoreResponse:
    return service.get_score()
