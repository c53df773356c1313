"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Typed errors and their HTTP status codes
- validators.py     : Payload validation and parsing
- audit.py          : Request audit and security header middleware
"""
from bfhl.core.config import get_settings, load_settings, Settings
from bfhl.core.logging_config import setup_logging, get_logger

__all__ = [
    "get_settings",
    "load_settings",
    "Settings",
    "setup_logging",
    "get_logger",
]
