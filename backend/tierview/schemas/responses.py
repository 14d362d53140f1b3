"""Pydantic response envelopes for projected resources."""

from typing import Any

from pydantic import BaseModel


class ProjectedListResponse(BaseModel):
    """Paginated list of projected resources."""

    items: list[dict[str, Any]]
    total: int
    skip: int
    limit: int
    access_level: str
