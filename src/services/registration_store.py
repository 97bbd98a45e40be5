"""
Registration store - append-only list of registered users
"""

import logging
import threading
from typing import List

from models.registration import RegisteredUser

logger = logging.getLogger(__name__)


class RegistrationStore:
    """Keeps registered users in insertion order. Duplicate names are accepted."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[RegisteredUser] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def add_new_registered_user(self, item: RegisteredUser) -> None:
        with self._lock:
            self._users.append(item.model_copy())
            total = len(self._users)
        logger.info(f"Registered user '{item.name}' ({total} registrations)")

    def list_items(self) -> List[RegisteredUser]:
        with self._lock:
            return [user.model_copy() for user in self._users]
