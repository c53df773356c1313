"""
BFHL Service - Dispatch of /bfhl payloads.

This service orchestrates one request:
1. Validates that exactly one recognized key is present
2. Type-checks the value and builds the query variant
3. Runs the numeric kernel or the AI delegate
4. Wraps the result in a success envelope

Errors are raised as BFHLException subclasses and rendered by the API layer,
so routes stay thin and the service can be tested without HTTP.
"""
from typing import Any, Optional

from starlette.concurrency import run_in_threadpool

from bfhl.core.config import Settings
from bfhl.core.logging_config import get_logger
from bfhl.core.validators import parse_query
from bfhl.llm.client import GeminiClient
from bfhl.models.bfhl import (
    AIQuery,
    BFHLQuery,
    BFHLResponse,
    FibonacciQuery,
    HcfQuery,
    LcmQuery,
    PrimeQuery,
)
from bfhl.numeric import fibonacci, hcf_array, lcm_array, primes_from_array

logger = get_logger(__name__)


class BFHLService:
    """
    Dispatcher for /bfhl payloads.

    Example:
        >>> service = BFHLService(settings)
        >>> envelope = await service.process({"hcf": [8, 12, 16]})
        >>> envelope.data
        4
    """

    def __init__(self, settings: Settings, ai_client: Optional[GeminiClient] = None):
        """
        Initialize the service.

        Args:
            settings: Application settings; official_email goes into every envelope
            ai_client: AI delegate. Built from settings if not provided.
        """
        self.official_email = settings.official_email
        self.ai_client = ai_client or GeminiClient(settings)

        self._handlers = {
            FibonacciQuery: self._run_fibonacci,
            PrimeQuery: self._run_prime,
            LcmQuery: self._run_lcm,
            HcfQuery: self._run_hcf,
            AIQuery: self._run_ai,
        }
        logger.info("BFHLService initialized")

    async def process(self, payload: Any) -> BFHLResponse:
        """
        Handle a decoded /bfhl body.

        Args:
            payload: Decoded JSON body

        Returns:
            Success envelope carrying the operation result

        Raises:
            BFHLException: Any validation, type, domain or upstream failure
        """
        query = parse_query(payload)
        data = await self.execute(query)
        return BFHLResponse.success(self.official_email, data)

    async def execute(self, query: BFHLQuery) -> Any:
        """Run the operation matching the query variant."""
        handler = self._handlers[type(query)]
        logger.info(f"Dispatching {type(query).__name__}")
        return await handler(query)

    # Kernel calls are CPU-bound and run off the event loop

    async def _run_fibonacci(self, query: FibonacciQuery):
        return await run_in_threadpool(fibonacci, query.n)

    async def _run_prime(self, query: PrimeQuery):
        return await run_in_threadpool(primes_from_array, query.values)

    async def _run_lcm(self, query: LcmQuery):
        return await run_in_threadpool(lcm_array, query.values)

    async def _run_hcf(self, query: HcfQuery):
        return await run_in_threadpool(hcf_array, query.values)

    async def _run_ai(self, query: AIQuery):
        return await self.ai_client.ask(query.question)

    def health(self) -> BFHLResponse:
        """Envelope returned by the health probe."""
        return BFHLResponse.success(self.official_email)
