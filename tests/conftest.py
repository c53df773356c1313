# Test configuration
import os
from unittest.mock import AsyncMock, MagicMock

# Environment must be in place before bfhl.api.main builds the module-level app
os.environ["OFFICIAL_EMAIL"] = "tester@example.com"
os.environ["GEMINI_KEY"] = ""
os.environ["GOOGLE_API_KEY"] = ""
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from bfhl.api.main import create_app
from bfhl.core.config import load_settings
from bfhl.llm.client import GeminiClient
from bfhl.services.bfhl_service import BFHLService

TEST_EMAIL = "tester@example.com"


@pytest.fixture
def settings():
    return load_settings()


@pytest.fixture
def ai_client():
    """GeminiClient stand-in whose ask() is an AsyncMock."""
    client = MagicMock(spec=GeminiClient)
    client.ask = AsyncMock(return_value="Paris")
    return client


@pytest.fixture
def service(settings, ai_client):
    return BFHLService(settings, ai_client=ai_client)


@pytest.fixture
def client(settings, service):
    app = create_app(settings, bfhl_service=service)
    return TestClient(app, raise_server_exceptions=False)
