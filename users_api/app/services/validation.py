"""
Decoding and field validation for user requests.

Decoding turns raw input into typed values and raises ``DecodeError``
when it cannot.  Field validation runs afterwards on the decoded
payload and raises ``ValidationError``.  These functions are pure and
do not touch the store.
"""

from typing import Optional

import pydantic

from ..core.errors import DecodeError, ValidationError
from ..schemas.user import UserPayload

INVALID_ID = "Invalid user ID"
INVALID_JSON = "Invalid JSON format"
MISSING_FIELDS = "Name and email are required"

# Ids are signed 64‑bit integers.
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1

# A top‑level JSON null decodes to an empty payload.
_payload_adapter = pydantic.TypeAdapter(Optional[UserPayload])


def parse_user_id(raw: str) -> int:
    """Parse the ``{id}`` path segment as a base‑10 integer.

    An optional leading sign is accepted; whitespace, underscores and
    anything non‑numeric are rejected, as are values outside the
    signed 64‑bit range.
    """
    body = raw[1:] if raw[:1] in ("+", "-") else raw
    if not body.isascii() or not body.isdigit():
        raise DecodeError(INVALID_ID)
    value = int(raw)
    if not MIN_ID <= value <= MAX_ID:
        raise DecodeError(INVALID_ID)
    return value


def decode_user_payload(raw: bytes) -> UserPayload:
    """Decode a JSON request body into a ``UserPayload``.

    Raises
    ------
    DecodeError
        The body is empty, not valid JSON, neither an object nor
        ``null``, or ``name`` / ``email`` hold a value that is neither a
        string nor ``null``.
    """
    try:
        payload = _payload_adapter.validate_json(raw)
        return payload if payload is not None else UserPayload()
    except pydantic.ValidationError as exc:
        raise DecodeError(INVALID_JSON) from exc


def _require_name_and_email(payload: UserPayload) -> None:
    if payload.name == "" or payload.email == "":
        raise ValidationError(MISSING_FIELDS)


def validate_create(payload: UserPayload) -> None:
    _require_name_and_email(payload)


def validate_update(payload: UserPayload) -> None:
    _require_name_and_email(payload)
