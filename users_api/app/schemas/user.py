"""
Pydantic models for user data.

``User`` is the record kept in the store and returned by the API.
``UserPayload`` is what clients send to create or update a user; both
fields default to an empty string, and a ``null`` value is read as
empty too, so that a missing field reaches field validation instead of
failing decoding.
"""

from pydantic import BaseModel, Field, StrictStr, field_validator


class User(BaseModel):
    """A stored user record."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Juan Pérez"])
    email: str = Field(..., examples=["juan@example.com"])


class UserPayload(BaseModel):
    """Request body for ``POST /api/users`` and ``PUT /api/users/{id}``.

    Any ``id`` supplied by the client is ignored: identifiers are
    assigned by the store and never change.
    """

    name: StrictStr = Field("", examples=["Ana"])
    email: StrictStr = Field("", examples=["ana@example.com"])

    @field_validator("name", "email", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        # JSON null leaves the field empty, same as omitting the key.
        return "" if value is None else value
