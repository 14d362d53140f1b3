"""Data access for API resources."""

from tierview.repositories.users import UserRepository

__all__ = ["UserRepository"]
