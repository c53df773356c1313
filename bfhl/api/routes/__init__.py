"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- bfhl.py     : The dispatching /bfhl endpoint
- health.py   : Health check endpoint
"""
from bfhl.api.routes.bfhl import router as bfhl_router
from bfhl.api.routes.health import router as health_router

__all__ = [
    "bfhl_router",
    "health_router",
]
