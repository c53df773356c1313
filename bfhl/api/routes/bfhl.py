"""
BFHL Routes - The single dispatching endpoint.

POST /bfhl accepts a JSON object with exactly one of the keys
fibonacci, prime, lcm, hcf or AI and returns the response envelope.
The body is decoded by hand so key presence can be inspected before any
schema is applied.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from bfhl.api.dependencies import get_bfhl_service
from bfhl.core.exceptions import ValidationError
from bfhl.core.logging_config import get_logger
from bfhl.models.bfhl import BFHLResponse
from bfhl.services.bfhl_service import BFHLService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/bfhl",
    tags=["BFHL"],
    responses={
        400: {"model": BFHLResponse, "description": "Invalid request or AI service failure"},
        500: {"model": BFHLResponse, "description": "Internal server error"},
    },
)


@router.post(
    "",
    response_model=BFHLResponse,
    summary="Run a numeric utility or ask the AI",
    description="""
    Send exactly one of:

    - `{"fibonacci": n}` with 0 <= n <= 1000: the sequence F(0)..F(n)
    - `{"prime": [ints]}`: the primes among the input, order preserved
    - `{"lcm": [ints]}`: least common multiple of a non-empty array
    - `{"hcf": [ints]}`: highest common factor of a non-empty array
    - `{"AI": "question"}`: a one-word answer from Gemini
    """,
)
async def bfhl(request: Request, service: BFHLService = Depends(get_bfhl_service)) -> JSONResponse:
    """Decode the body and hand it to the dispatcher."""
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON")

    envelope = await service.process(payload)
    return JSONResponse(status_code=200, content=envelope.to_dict())
