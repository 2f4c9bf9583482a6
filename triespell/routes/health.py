"""
Health check endpoint for monitoring.
"""
from datetime import datetime, timezone
from fastapi import APIRouter
from triespell.schemas.spellcheck import HealthResponse
from triespell.services.spellcheck import get_spellcheck_service
from triespell.utils.logger import get_logger

logger = get_logger("health")
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check application and dictionary status",
)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    The service stays up without a dictionary (spell-check endpoints answer
    503 in that case), so this reports "degraded" rather than failing.

    Returns:
        HealthResponse with status, dictionary state and timestamp
    """
    service = get_spellcheck_service()
    loaded = service is not None and service.is_loaded()

    if loaded:
        logger.debug("Health check: all systems operational")
    else:
        logger.warning("Health check: dictionary not loaded")

    return HealthResponse(
        status="healthy" if loaded else "degraded",
        dictionary_loaded=loaded,
        word_count=service.word_count() if loaded else 0,
        timestamp=datetime.now(timezone.utc)
    )
