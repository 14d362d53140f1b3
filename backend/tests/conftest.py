"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- The User / Organization / Post schemas and matching raw data
- HTTP client for API testing with known bearer tokens
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tierview.config import settings
from tierview.main import app
from tierview.resource import resource_schema

TEST_USER_TOKEN = "test-user-token"
TEST_ADMIN_TOKEN = "test-admin-token"


# =============================================================================
# Schema Fixtures
# =============================================================================


@pytest.fixture
def org_schema():
    """Organization schema with an admin-only tax id."""
    return (
        resource_schema("Org")
        .public("id", str)
        .public("name", str)
        .admin("taxId", str)
        .build()
    )


@pytest.fixture
def post_schema():
    """Post schema with an authenticated-only draft flag."""
    return (
        resource_schema("Post")
        .public("id", str)
        .public("title", str)
        .authenticated("draft", bool)
        .build()
    )


@pytest.fixture
def user_schema(org_schema, post_schema):
    """User schema mixing scalars, has_one and has_many at every level."""
    return (
        resource_schema("User")
        .public("id", str)
        .public("name", str)
        .authenticated("email", str)
        .has_one("organization", org_schema, "public")
        .has_many("posts", post_schema, "authenticated")
        .admin("internalNotes", str)
        .build()
    )


@pytest.fixture
def user_data() -> dict:
    """Raw user graph including fields hidden from lower levels."""
    return {
        "id": "user-1",
        "name": "John Doe",
        "email": "john@example.com",
        "organization": {"id": "org-1", "name": "Acme Inc.", "taxId": "TX-12345"},
        "posts": [
            {"id": "post-1", "title": "Hello World", "draft": False},
            {"id": "post-2", "title": "Draft Post", "draft": True},
        ],
        "internalNotes": "VIP customer",
    }


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest.fixture
def api_tokens(monkeypatch):
    """Configure known tokens for the authenticated and admin levels."""
    monkeypatch.setattr(settings, "api_key", TEST_USER_TOKEN)
    monkeypatch.setattr(settings, "admin_api_key", TEST_ADMIN_TOKEN)


@pytest_asyncio.fixture
async def client(api_tokens):
    """Async test client for the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def user_headers() -> dict:
    return {"Authorization": f"Bearer {TEST_USER_TOKEN}"}


@pytest.fixture
def admin_headers() -> dict:
    return {"Authorization": f"Bearer {TEST_ADMIN_TOKEN}"}
