"""
In-memory credential store backing register / login.

Credentials use their own id sequence (last + 1), independent of the
user-profile store.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from database.models import Credential

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """Raised when registering an email that already has a credential."""


class CredentialStore:
    def __init__(self) -> None:
        self._credentials: List[Credential] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._credentials)

    def find_by_email(self, email: str) -> Optional[Credential]:
        with self._lock:
            for credential in self._credentials:
                if credential.email == email:
                    return credential
        return None

    def exists(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def add(self, email: str, password_hash: str) -> Credential:
        """
        Store a new credential.

        The uniqueness check is repeated under the lock so two concurrent
        registrations of one email cannot both succeed.
        """
        with self._lock:
            if any(c.email == email for c in self._credentials):
                raise DuplicateEmailError(email)
            next_id = self._credentials[-1].id + 1 if self._credentials else 1
            credential = Credential(id=next_id, email=email, password_hash=password_hash)
            self._credentials.append(credential)
        logger.debug("Stored credential %d", credential.id)
        return credential
