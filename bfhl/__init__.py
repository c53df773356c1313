"""
BFHL service root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, validation and error types
- services/  : Request dispatch
- numeric/   : Pure number-theory helpers
- llm/       : Google Gemini integration and prompts
- models/    : Query variants and the response envelope
"""

__version__ = "1.0.0"
