"""
Custom Exceptions - Application-specific error classes.

Every error the service knows how to explain to a client is a subclass of
BFHLException carrying an HTTP status code and an ErrorKind. The API layer
turns them into failure envelopes; anything else becomes a generic 500.
"""
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    """Machine-readable category of a failure."""
    VALIDATION = "validation_error"
    TYPE = "type_error"
    DOMAIN = "domain_error"
    EXTERNAL_SERVICE = "external_service_error"
    INTERNAL = "internal_error"


class BFHLException(Exception):
    """
    Base exception for all service errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_envelope(self, official_email: str) -> Dict[str, Any]:
        """Convert to a failure envelope dict."""
        return {
            "is_success": False,
            "official_email": official_email,
            "error": self.message,
        }


class ValidationError(BFHLException):
    """Raised when the payload does not carry exactly one recognized key."""
    status_code = 400
    error_code = ErrorKind.VALIDATION


class PayloadTypeError(BFHLException):
    """Raised when the value under a recognized key has the wrong shape."""
    status_code = 400
    error_code = ErrorKind.TYPE

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class DomainError(BFHLException):
    """Raised when a value is outside an operation's accepted domain."""
    status_code = 400
    error_code = ErrorKind.DOMAIN


class ExternalServiceError(BFHLException):
    """
    Raised when the generative model call fails or times out.

    Shares status 400 with client errors to keep the public contract, but the
    distinct error_code lets logs and callers tell the two apart.
    """
    status_code = 400
    error_code = ErrorKind.EXTERNAL_SERVICE

    def __init__(self, message: str = "AI service unavailable"):
        super().__init__(message)
