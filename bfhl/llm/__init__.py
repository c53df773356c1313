"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- Async calls to Google Gemini
- Response parsing (first token of the reply)
"""
from bfhl.llm.client import GeminiClient, extract_first_token

__all__ = [
    "GeminiClient",
    "extract_first_token",
]
