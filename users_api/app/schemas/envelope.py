"""
Uniform response envelope.

Every endpoint answers with ``{"status", "message", "data"}``.  The
envelope is generic over its payload so each route declares exactly
which shape it returns: nothing, a single ``User``, a list of users or
``HealthInfo``.  ``data`` is left out of the JSON entirely when there
is no payload.
"""

from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

from .user import User

T = TypeVar("T")

SUCCESS = "success"
ERROR = "error"


class HealthInfo(BaseModel):
    """Payload of ``GET /health``."""

    timestamp: str = Field(..., examples=["2024-05-01T12:00:00Z"])
    uptime: str = Field(..., examples=["1h2m3.5s"])


class Envelope(BaseModel, Generic[T]):
    status: Literal["success", "error"]
    message: str
    data: Optional[T] = None

    def to_content(self) -> dict:
        """Return the JSON‑ready dict, omitting ``data`` when empty."""
        return self.model_dump(mode="json", exclude_none=True)


UserEnvelope = Envelope[User]
UserListEnvelope = Envelope[List[User]]
HealthEnvelope = Envelope[HealthInfo]
MessageEnvelope = Envelope[None]


def error(message: str) -> dict:
    """Build an error envelope body (never carries data)."""
    return Envelope(status=ERROR, message=message).to_content()
