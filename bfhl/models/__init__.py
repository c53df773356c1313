"""
Models module - Request variants and response envelope.

This module defines:
- Query variants: the tagged union a /bfhl payload is parsed into
- Response models: the envelope returned by every endpoint
"""
from bfhl.models.bfhl import (
    FibonacciQuery,
    PrimeQuery,
    LcmQuery,
    HcfQuery,
    AIQuery,
    BFHLQuery,
    BFHLResponse,
)

__all__ = [
    "FibonacciQuery",
    "PrimeQuery",
    "LcmQuery",
    "HcfQuery",
    "AIQuery",
    "BFHLQuery",
    "BFHLResponse",
]
