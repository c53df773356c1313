"""Unit tests for the BFHL dispatcher."""

import asyncio
import time
from unittest.mock import patch

import pytest

from bfhl.core.exceptions import (
    DomainError,
    ExternalServiceError,
    PayloadTypeError,
    ValidationError,
)
from bfhl.models import BFHLResponse

TEST_EMAIL = "tester@example.com"


class TestBFHLService:
    """Tests for BFHLService.process()."""

    @pytest.mark.asyncio
    async def test_fibonacci(self, service):
        envelope = await service.process({"fibonacci": 5})

        assert envelope == BFHLResponse(is_success=True, official_email=TEST_EMAIL, data=[0, 1, 1, 2, 3, 5])

    @pytest.mark.asyncio
    async def test_prime(self, service):
        envelope = await service.process({"prime": [1, 2, 3, 4, 5, 6, 7]})

        assert envelope.data == [2, 3, 5, 7]

    @pytest.mark.asyncio
    async def test_lcm_and_hcf(self, service):
        assert (await service.process({"lcm": [4, 6]})).data == 12
        assert (await service.process({"hcf": [8, 12, 16]})).data == 4

    @pytest.mark.asyncio
    async def test_ai_delegates_to_client(self, service, ai_client):
        envelope = await service.process({"AI": "Capital of France?"})

        assert envelope.data == "Paris"
        ai_client.ask.assert_awaited_once_with("Capital of France?")

    @pytest.mark.asyncio
    async def test_ai_failure_propagates(self, service, ai_client):
        ai_client.ask.side_effect = ExternalServiceError("AI service timed out after 30s")

        with pytest.raises(ExternalServiceError):
            await service.process({"AI": "question"})

    @pytest.mark.asyncio
    async def test_unrecognized_extra_keys_ignored(self, service):
        envelope = await service.process({"hcf": [12, 18, 24], "roll_number": "X1"})

        assert envelope.data == 6

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, error",
        [
            ({}, ValidationError),
            ({"fibonacci": 5, "prime": [1, 2]}, ValidationError),
            ({"fibonacci": "5"}, PayloadTypeError),
            ({"fibonacci": 1001}, DomainError),
            ({"lcm": []}, DomainError),
        ],
    )
    async def test_errors(self, service, payload, error):
        with pytest.raises(error):
            await service.process(payload)

    def test_health(self, service):
        assert service.health().to_dict() == {"is_success": True, "official_email": TEST_EMAIL}


class TestConcurrency:
    """One request in flight must not hold up the others."""

    @pytest.mark.asyncio
    async def test_numeric_request_finishes_while_ai_call_is_pending(self, service, ai_client):
        finished = []

        async def slow_answer(question):
            await asyncio.sleep(0.3)
            return "Paris"

        ai_client.ask.side_effect = slow_answer

        async def run(name, payload):
            envelope = await service.process(payload)
            finished.append(name)
            return envelope

        ai_envelope, hcf_envelope = await asyncio.gather(
            run("ai", {"AI": "Capital of France?"}),
            run("hcf", {"hcf": [8, 12, 16]}),
        )

        assert finished == ["hcf", "ai"]
        assert ai_envelope.data == "Paris"
        assert hcf_envelope.data == 4

    @pytest.mark.asyncio
    async def test_kernel_work_runs_off_the_event_loop(self, service):
        def slow_primes(values):
            time.sleep(0.5)
            return [2]

        with patch("bfhl.services.bfhl_service.primes_from_array", side_effect=slow_primes):
            task = asyncio.create_task(service.process({"prime": [2]}))

            started = time.perf_counter()
            await asyncio.sleep(0.05)
            elapsed = time.perf_counter() - started

            assert not task.done()
            assert elapsed < 0.4
            assert (await task).data == [2]

    @pytest.mark.asyncio
    async def test_oversized_prime_rejected_before_running(self, service):
        with pytest.raises(DomainError, match="within"):
            await service.process({"prime": [2 ** 61 - 1]})
