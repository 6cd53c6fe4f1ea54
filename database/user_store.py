"""
In-memory store for user profiles.

Profiles keep insertion order.  New ids are derived from the *last*
profile in the collection (``last.id + 1``, or 1 when empty), not from
the maximum id ever issued, so deleting the tail profile and creating a
new one hands out the same id again.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from database.models import UserProfile, is_adult

logger = logging.getLogger(__name__)


class UserStore:
    """Ordered collection of ``UserProfile`` records guarded by a lock."""

    def __init__(self) -> None:
        self._users: List[UserProfile] = []
        self._lock = threading.Lock()

    def _next_id_locked(self) -> int:
        return self._users[-1].id + 1 if self._users else 1

    def _index_of(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def next_id(self) -> int:
        with self._lock:
            return self._next_id_locked()

    def list(self) -> List[UserProfile]:
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get(self, user_id: int) -> Optional[UserProfile]:
        with self._lock:
            index = self._index_of(user_id)
            return None if index is None else self._users[index].model_copy()

    def create(self, fields: Dict[str, Any]) -> UserProfile:
        """Append a profile built from validated ``fields``; ``adult`` is derived."""
        with self._lock:
            user = UserProfile(
                id=self._next_id_locked(),
                name=fields["name"],
                email=fields["email"],
                age=fields["age"],
                role=fields["role"],
                adult=is_adult(fields["age"]),
            )
            self._users.append(user)
        logger.debug("Created user %d", user.id)
        return user.model_copy()

    def update(self, user_id: int, fields: Dict[str, Any]) -> Optional[UserProfile]:
        """
        Overwrite only the supplied ``fields`` of profile ``user_id``.

        ``adult`` is re-derived from the resulting age even when the
        update did not touch ``age``.  Returns ``None`` for unknown ids.
        """
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            user = self._users[index]
            for key in ("name", "email", "age", "role"):
                if key in fields:
                    setattr(user, key, fields[key])
            user.adult = is_adult(user.age)
            updated = user.model_copy()
        logger.debug("Updated user %d (%s)", user_id, ", ".join(sorted(fields)) or "no fields")
        return updated

    def delete(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
        logger.debug("Deleted user %d", user_id)
        return True

    def clear(self) -> None:
        with self._lock:
            count = len(self._users)
            self._users = []
        logger.info("Deleted all users (%d removed)", count)
