"""
In‑memory record store for users.

``UserStore`` owns the users and the id counter.  One instance is
created per application and kept on ``app.state``; nothing lives in
module globals, so every test can start from a fresh store.

Identifiers come from ``next_id`` which only ever grows: an id freed by
a deletion is never handed out again.  All operations take the same
re‑entrant lock so that handlers running on worker threads cannot
interleave a mutation with a read.  Records are returned as copies.
"""

import logging
import threading
from typing import Dict, List, Optional

from ..schemas.user import User

logger = logging.getLogger(__name__)

SEED_USERS = (
    ("Juan Pérez", "juan@example.com"),
    ("María García", "maria@example.com"),
)


class UserStore:
    """Ordered id → ``User`` mapping plus the next‑id counter."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "UserStore":
        """Return a store holding the two sample users (ids 1 and 2)."""
        store = cls()
        for name, email in SEED_USERS:
            store.add_user(name, email)
        return store

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def list_users(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def add_user(self, name: str, email: str) -> User:
        """Assign the next id, store the user and return a copy of it."""
        with self._lock:
            user = User(id=self._next_id, name=name, email=email)
            self._users[user.id] = user
            self._next_id += 1
            logger.debug("Stored user %s", user.id)
            return user.model_copy()

    def replace_user(self, user_id: int, name: str, email: str) -> Optional[User]:
        """Overwrite name and email of an existing user, keeping its id.

        Returns ``None`` and leaves the store untouched when ``user_id``
        is unknown.  Dict assignment to an existing key keeps its
        position, so listing order is unaffected.
        """
        with self._lock:
            if user_id not in self._users:
                return None
            user = User(id=user_id, name=name, email=email)
            self._users[user_id] = user
            return user.model_copy()

    def remove_user(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None
