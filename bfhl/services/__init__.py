"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- Orchestrate between the numeric kernel and the LLM delegate
"""
from bfhl.services.bfhl_service import BFHLService

__all__ = [
    "BFHLService",
]
