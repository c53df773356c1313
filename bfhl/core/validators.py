"""
Input Validators - Payload validation and parsing utilities.

This module provides:
- Single-key validation of /bfhl payloads
- Per-key type checks producing a typed query variant
- Question sanitization for the AI key
"""
import re
from typing import Any, Optional, Tuple

from bfhl.core.exceptions import DomainError, PayloadTypeError, ValidationError
from bfhl.core.logging_config import get_logger
from bfhl.models.bfhl import (
    AIQuery,
    BFHLQuery,
    FibonacciQuery,
    HcfQuery,
    LcmQuery,
    PrimeQuery,
)

logger = get_logger(__name__)

RECOGNIZED_KEYS = ("fibonacci", "prime", "lcm", "hcf", "AI")

SINGLE_KEY_ERROR = "Request must contain exactly one valid key."

MAX_QUESTION_LENGTH = 2000

# Largest integer a JSON number carries exactly in JavaScript clients; also
# keeps trial division in is_prime below ~1e8 steps per element
MAX_SAFE_INTEGER = 2 ** 53 - 1


def validate_single_key(payload: Any) -> Tuple[bool, Optional[str]]:
    """
    Check that exactly one recognized key is present.

    Unrecognized keys are ignored and do not count.

    Args:
        payload: Decoded JSON body

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(payload, dict):
        return False, SINGLE_KEY_ERROR

    found = [key for key in RECOGNIZED_KEYS if key in payload]
    if len(found) != 1:
        logger.debug(f"Rejected payload with recognized keys: {found}")
        return False, SINGLE_KEY_ERROR

    return True, None


def _as_integer(value: Any) -> Optional[int]:
    """Return value as an int when it is integral, else None."""
    # bool is a subclass of int; JSON true/false are not numbers here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_integer_array(key: str, value: Any) -> Tuple[int, ...]:
    if not isinstance(value, list):
        raise PayloadTypeError(f"{key} must be array", field=key)

    items = []
    for item in value:
        number = _as_integer(item)
        if number is None:
            raise PayloadTypeError(f"{key} must be array of integers", field=key)
        if abs(number) > MAX_SAFE_INTEGER:
            raise DomainError(f"{key} values must be within ±(2^53-1)")
        items.append(number)
    return tuple(items)


def sanitize_question(question: str, max_length: int = MAX_QUESTION_LENGTH) -> str:
    """
    Sanitize a question before it is sent to the model.

    - Removes null bytes
    - Strips and normalizes whitespace
    - Limits length
    """
    cleaned = question.replace("\x00", "")
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return cleaned[:max_length]


def parse_query(payload: dict) -> BFHLQuery:
    """
    Turn a validated payload into its query variant.

    Args:
        payload: A dict that already passed validate_single_key

    Returns:
        The query variant for the recognized key

    Raises:
        ValidationError: If the payload does not have exactly one recognized key
        PayloadTypeError: If the value has the wrong shape for its key
        DomainError: If the AI question is empty after sanitizing
    """
    is_valid, error = validate_single_key(payload)
    if not is_valid:
        raise ValidationError(error)

    if "fibonacci" in payload:
        n = _as_integer(payload["fibonacci"])
        if n is None:
            raise PayloadTypeError("fibonacci must be integer", field="fibonacci")
        return FibonacciQuery(n=n)

    if "prime" in payload:
        return PrimeQuery(values=_as_integer_array("prime", payload["prime"]))

    if "lcm" in payload:
        return LcmQuery(values=_as_integer_array("lcm", payload["lcm"]))

    if "hcf" in payload:
        return HcfQuery(values=_as_integer_array("hcf", payload["hcf"]))

    question = payload["AI"]
    if not isinstance(question, str):
        raise PayloadTypeError("AI must be string", field="AI")

    sanitized = sanitize_question(question)
    if not sanitized:
        raise DomainError("AI question cannot be empty")
    return AIQuery(question=sanitized)
