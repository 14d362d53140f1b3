"""In-memory user repository.

Stands in for a database: returns raw entity graphs exactly as a data access
layer would, including fields no caller should see without projection.
"""

from datetime import datetime, timezone
from typing import Any

_ACME = {"id": "org-1", "name": "Acme Inc.", "taxId": "TX-12345"}

_SEED_USERS: list[dict[str, Any]] = [
    {
        "id": "user-1",
        "name": "John Doe",
        "email": "john@example.com",
        "createdAt": datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc),
        "passwordHash": "$2b$12$not-a-real-hash",
        "organization": _ACME,
        "posts": [
            {"id": "post-1", "title": "Hello World", "draft": False},
            {"id": "post-2", "title": "Draft Post", "draft": True},
        ],
        "internalNotes": "VIP customer",
    },
    {
        "id": "user-2",
        "name": "Jane Roe",
        "email": "jane@example.com",
        "createdAt": datetime(2024, 3, 2, 14, 0, tzinfo=timezone.utc),
        "passwordHash": "$2b$12$also-not-a-real-hash",
        "organization": _ACME,
        "posts": [],
        "internalNotes": None,
    },
]


class UserRepository:
    """Read-only access to user records."""

    def __init__(self, users: list[dict[str, Any]] | None = None):
        self._users = users if users is not None else _SEED_USERS

    def list(self, skip: int = 0, limit: int | None = None) -> list[dict[str, Any]]:
        """Return users in insertion order with offset pagination."""
        end = None if limit is None else skip + limit
        return self._users[skip:end]

    def count(self) -> int:
        return len(self._users)

    def get(self, user_id: str) -> dict[str, Any] | None:
        for user in self._users:
            if user.get("id") == user_id:
                return user
        return None


_repository = UserRepository()


def get_user_repository() -> UserRepository:
    """FastAPI dependency returning the shared repository."""
    return _repository
