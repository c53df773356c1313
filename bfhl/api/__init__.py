"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request decoding
- Response envelopes
- Error handling
- Route definitions

The application itself lives in bfhl.api.main (create_app / app).
"""
