from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Tuple

from app.errors import DuplicateEmail, NotFound
from app.models import User
from app.validation import UNSET, parse_user_id, validate_new_user

logger = logging.getLogger("user_registry")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRegistry:
    """Thread-safe in-memory user registry.

    Storage semantics:
    - Records live only in the API process memory (cleared on restart).
    - Kept in insertion order; ids are assigned sequentially from 1.
    - E-mail addresses are unique after normalization (trimmed, lower-cased).

    Records are immutable once admitted. There is no update or delete.
    """

    def __init__(self, *, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or _utcnow
        self._lock = threading.Lock()
        self._users: List[User] = []
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def create(self, *, name: Any, email: Any, age: Any = UNSET) -> User:
        new_user = validate_new_user(name=name, email=email, age=age)

        # Duplicate check and insert must not interleave with another create.
        with self._lock:
            if any(u.email == new_user.email for u in self._users):
                raise DuplicateEmail()

            user = User(
                id=self._next_id,
                name=new_user.name,
                email=new_user.email,
                age=new_user.age,
                created_at=self._clock(),
            )
            self._users.append(user)
            self._next_id += 1

        logger.info("Created user id=%s", user.id)
        return user

    def get_by_id(self, raw_id: Any, *, strict: bool = False) -> User:
        user_id = parse_user_id(raw_id, strict=strict)
        with self._lock:
            for u in self._users:
                if u.id == user_id:
                    return u
        raise NotFound()

    def list_all(self) -> Tuple[List[User], int]:
        with self._lock:
            users = list(self._users)
        return users, len(users)
