"""
Request and Response models for the /bfhl API.

Queries are small frozen dataclasses forming a tagged union: the payload is
inspected once at the boundary and turned into exactly one variant, so the
dispatcher never looks at raw keys again.

The response envelope is a Pydantic model shared by /health and /bfhl.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class FibonacciQuery:
    n: int


@dataclass(frozen=True)
class PrimeQuery:
    values: Tuple[int, ...]


@dataclass(frozen=True)
class LcmQuery:
    values: Tuple[int, ...]


@dataclass(frozen=True)
class HcfQuery:
    values: Tuple[int, ...]


@dataclass(frozen=True)
class AIQuery:
    question: str


BFHLQuery = Union[FibonacciQuery, PrimeQuery, LcmQuery, HcfQuery, AIQuery]


class BFHLResponse(BaseModel):
    """
    Uniform response envelope.

    Success envelopes carry `data` and never `error`; failure envelopes carry
    `error` and never `data`. Serialize with exclude_none so the absent
    field is omitted from the JSON body.
    """
    is_success: bool = Field(
        ...,
        description="Whether the request was handled successfully"
    )
    official_email: str = Field(
        ...,
        description="Contact email of the service owner"
    )
    data: Optional[Any] = Field(
        default=None,
        description="Operation result (success only)",
        examples=[[0, 1, 1, 2, 3, 5], 4, "Paris"]
    )
    error: Optional[str] = Field(
        default=None,
        description="Error message (failure only)",
        examples=["Request must contain exactly one valid key."]
    )

    @classmethod
    def success(cls, official_email: str, data: Any = None) -> "BFHLResponse":
        return cls(is_success=True, official_email=official_email, data=data)

    @classmethod
    def failure(cls, official_email: str, error: str) -> "BFHLResponse":
        return cls(is_success=False, official_email=official_email, error=error)

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)
