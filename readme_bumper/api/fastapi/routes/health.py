from fastapi import APIRouter
from pydantic import BaseModel

from readme_bumper.utils.logging import logger

router = APIRouter(tags=["Health"])


class StatusResponse(BaseModel):
    status: str


@router.get("/health", response_model=StatusResponse)
def health_check() -> StatusResponse:
    """Liveness check; not rate limited."""
    logger.debug("Health check endpoint hit")
    return StatusResponse(status="ok")


@router.get("/ping", response_model=StatusResponse)
def ping() -> StatusResponse:
    logger.debug("Ping endpoint hit")
    return StatusResponse(status="pong")
