"""
Health Check Routes - Liveness probe.

Returns the success envelope with the configured contact email. It does not
check Gemini connectivity.
"""
from fastapi import APIRouter, Depends

from bfhl.api.dependencies import get_bfhl_service
from bfhl.core.logging_config import get_logger
from bfhl.models.bfhl import BFHLResponse
from bfhl.services.bfhl_service import BFHLService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=BFHLResponse,
    response_model_exclude_none=True,
    summary="Health check endpoint",
)
async def health_check(service: BFHLService = Depends(get_bfhl_service)) -> BFHLResponse:
    """Return 200 with is_success=true and the official email."""
    logger.debug("Health check requested")
    return service.health()
