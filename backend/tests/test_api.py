"""Tests for the user and schema discovery API routes."""

import pytest


class TestListUsers:
    """Tests for GET /api/users."""

    @pytest.mark.asyncio
    async def test_public_list(self, client):
        response = await client.get("/api/users")

        assert response.status_code == 200
        data = response.json()
        assert data["access_level"] == "public"
        assert data["total"] == 2
        assert data["items"][0] == {
            "id": "user-1",
            "name": "John Doe",
            "organization": {"id": "org-1", "name": "Acme Inc."},
        }

    @pytest.mark.asyncio
    async def test_authenticated_list(self, client, user_headers):
        response = await client.get("/api/users", headers=user_headers)

        items = response.json()["items"]
        assert set(items[0]) == {"id", "name", "email", "createdAt", "organization", "posts"}
        assert items[1]["posts"] == []

    @pytest.mark.asyncio
    async def test_admin_list(self, client, admin_headers):
        response = await client.get("/api/users", headers=admin_headers)

        first = response.json()["items"][0]
        assert first["internalNotes"] == "VIP customer"
        assert first["organization"]["taxId"] == "TX-12345"

    @pytest.mark.asyncio
    async def test_raw_only_fields_never_returned(self, client, admin_headers):
        response = await client.get("/api/users", headers=admin_headers)
        assert all("passwordHash" not in item for item in response.json()["items"])

    @pytest.mark.asyncio
    async def test_pagination(self, client):
        response = await client.get("/api/users", params={"skip": 1, "limit": 1})

        data = response.json()
        assert [item["id"] for item in data["items"]] == ["user-2"]
        assert data["skip"] == 1
        assert data["limit"] == 1

    @pytest.mark.asyncio
    async def test_invalid_limit(self, client):
        response = await client.get("/api/users", params={"limit": 0})
        assert response.status_code == 422


class TestGetUser:
    """Tests for GET /api/users/{user_id}."""

    @pytest.mark.asyncio
    async def test_public_user(self, client):
        response = await client.get("/api/users/user-1")

        assert response.status_code == 200
        assert response.json() == {
            "id": "user-1",
            "name": "John Doe",
            "organization": {"id": "org-1", "name": "Acme Inc."},
        }

    @pytest.mark.asyncio
    async def test_authenticated_user(self, client, user_headers):
        response = await client.get("/api/users/user-1", headers=user_headers)

        data = response.json()
        assert data["email"] == "john@example.com"
        assert data["posts"][1] == {"id": "post-2", "title": "Draft Post", "draft": True}
        assert "taxId" not in data["organization"]
        assert "internalNotes" not in data

    @pytest.mark.asyncio
    async def test_not_found(self, client):
        response = await client.get("/api/users/nobody")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    @pytest.mark.asyncio
    async def test_bad_token(self, client):
        response = await client.get(
            "/api/users/user-1", headers={"Authorization": "Bearer wrong"}
        )
        assert response.status_code == 401


class TestSchemas:
    """Tests for the schema discovery routes."""

    @pytest.mark.asyncio
    async def test_list_schemas(self, client):
        response = await client.get("/api/schemas")

        assert response.json() == {
            "resources": ["organization", "post", "user"],
            "levels": ["public", "authenticated", "admin"],
        }

    @pytest.mark.asyncio
    async def test_get_schema_defaults_to_public(self, client):
        response = await client.get("/api/schemas/user")

        assert response.status_code == 200
        assert set(response.json()["properties"]) == {"id", "name", "organization"}

    @pytest.mark.asyncio
    async def test_get_schema_at_admin(self, client):
        response = await client.get("/api/schemas/organization", params={"level": "admin"})
        assert set(response.json()["properties"]) == {"id", "name", "taxId"}

    @pytest.mark.asyncio
    async def test_unknown_resource(self, client):
        response = await client.get("/api/schemas/invoice")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_level(self, client):
        response = await client.get("/api/schemas/user", params={"level": "root"})
        assert response.status_code == 422
