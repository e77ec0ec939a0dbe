"""
Business logic for users.

``UserService`` sits between the HTTP handlers and ``UserStore``.  It
decodes and validates input, performs the store operation and raises
``NotFoundError`` when the target record does not exist.  Handlers get
an instance through the ``get_user_service`` dependency, which reads
the store and settings from ``app.state``.
"""

import logging
from typing import List

from fastapi import Request

from ..core.errors import NotFoundError
from ..core.store import UserStore
from ..schemas.user import User
from .validation import decode_user_payload, parse_user_id, validate_create, validate_update

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


class UserService:
    """Operations on the user collection.

    Parameters
    ----------
    store : UserStore
        The record store to operate on.
    validate_updates : bool
        Whether ``update_user`` enforces non‑empty name and email.
    """

    def __init__(self, store: UserStore, validate_updates: bool = True) -> None:
        self.store = store
        self.validate_updates = validate_updates

    def list_users(self) -> List[User]:
        return self.store.list_users()

    def get_user(self, raw_id: str) -> User:
        user_id = parse_user_id(raw_id)
        user = self.store.get_user(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    def create_user(self, body: bytes) -> User:
        """Decode, validate and store a new user."""
        payload = decode_user_payload(body)
        validate_create(payload)
        user = self.store.add_user(payload.name, payload.email)
        logger.info("Created user %s", user.id)
        return user

    def update_user(self, raw_id: str, body: bytes) -> User:
        """Replace name and email of an existing user.

        The id is parsed before the body is decoded, and the body is
        decoded before the store is consulted, so a bad id wins over a
        bad body and both win over a missing record.
        """
        user_id = parse_user_id(raw_id)
        payload = decode_user_payload(body)
        if self.validate_updates:
            validate_update(payload)
        user = self.store.replace_user(user_id, payload.name, payload.email)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        logger.info("Updated user %s", user.id)
        return user

    def delete_user(self, raw_id: str) -> None:
        user_id = parse_user_id(raw_id)
        if not self.store.remove_user(user_id):
            raise NotFoundError(USER_NOT_FOUND)
        logger.info("Deleted user %s", user_id)


def get_user_service(request: Request) -> UserService:
    """FastAPI dependency returning a service bound to the app's store."""
    state = request.app.state
    return UserService(state.user_store, validate_updates=state.settings.validate_updates)
