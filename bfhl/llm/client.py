"""
LLM Client for Google Gemini integration.

This module provides the AI delegate used by the "AI" key:
- Prompt construction (one-word answer)
- Async request to Gemini bounded by a timeout
- Extraction of the first token of the reply
- Wrapping every SDK failure into ExternalServiceError

Why a separate client class:
1. Encapsulation - LLM details hidden from the dispatcher
2. Testability - Easy to mock for testing
"""
import asyncio
from typing import Any, Optional

import google.generativeai as genai

from bfhl.core.config import Settings
from bfhl.core.exceptions import ExternalServiceError
from bfhl.core.logging_config import get_logger
from bfhl.llm.prompts import build_one_word_prompt

logger = get_logger(__name__)


def extract_first_token(text: Optional[str]) -> str:
    """
    Return the first whitespace-delimited token of a model reply.

    Raises:
        ExternalServiceError: If the reply is empty or only whitespace
    """
    tokens = (text or "").split()
    if not tokens:
        raise ExternalServiceError("AI service returned an empty answer")
    return tokens[0]


class GeminiClient:
    """
    Client for asking Gemini one-word questions.

    Example:
        >>> client = GeminiClient(settings)
        >>> await client.ask("What is the capital of France?")
        'Paris'
    """

    def __init__(self, settings: Settings, model: Optional[Any] = None):
        """
        Initialize the client.

        Args:
            settings: Application settings (credential, model, timeout)
            model: Optional pre-built model exposing generate_content_async.
                   Built from settings when omitted and a key is configured.
        """
        self.model_name = settings.llm_model
        self.timeout = settings.llm_timeout_seconds
        self._model = model

        if self._model is None and settings.ai_configured():
            genai.configure(api_key=settings.gemini_api_key)
            self._model = genai.GenerativeModel(
                model_name=settings.llm_model,
                generation_config=genai.types.GenerationConfig(
                    temperature=settings.llm_temperature,
                    max_output_tokens=settings.llm_max_tokens,
                ),
            )

        if self._model is None:
            logger.warning("Gemini API key not set; the AI key will be rejected")
        else:
            logger.info(f"Gemini client initialized (model={self.model_name})")

    @property
    def is_configured(self) -> bool:
        return self._model is not None

    async def ask(self, question: str) -> str:
        """
        Ask a question and return a one-word answer.

        Only the awaiting request is suspended while Gemini responds.

        Raises:
            ExternalServiceError: If the client is not configured, the call
                times out, fails, or returns no usable text
        """
        if self._model is None:
            raise ExternalServiceError("AI service is not configured")

        prompt = build_one_word_prompt(question)
        logger.debug(f"Sending prompt to {self.model_name}: {prompt[:80]}")

        try:
            response = await asyncio.wait_for(
                self._model.generate_content_async(prompt),
                timeout=self.timeout,
            )
            # .text raises ValueError when the candidate was blocked
            text = response.text
        except asyncio.TimeoutError:
            logger.error(f"Gemini call timed out after {self.timeout:g}s")
            raise ExternalServiceError(f"AI service timed out after {self.timeout:g}s")
        except Exception as e:
            logger.error(f"Gemini call failed ({self.model_name}): {e}")
            raise ExternalServiceError(f"AI service request failed: {e}") from e

        answer = extract_first_token(text)
        logger.info(f"Gemini answered with {len(text)} chars, kept '{answer}'")
        return answer
