"""Schema discovery routes.

Publishes the JSON schema of each resource's projected output per access
level, so clients can see which fields each level receives.
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Query, status

from tierview.resource import AccessLevel, output_json_schema
from tierview.schemas import SCHEMAS

router = APIRouter(prefix="/schemas", tags=["schemas"])


@router.get("")
async def list_schemas() -> dict[str, list[str]]:
    """List resource names and the levels they can be described at."""
    return {
        "resources": sorted(SCHEMAS),
        "levels": [level.label for level in AccessLevel],
    }


@router.get("/{name}")
async def get_schema(
    name: str,
    level: str = Query("public"),
) -> dict[str, Any]:
    """Return the output JSON schema of a resource at one access level.

    Raises:
        HTTPException: 404 for unknown resources, 422 for unknown levels.
    """
    schema = SCHEMAS.get(name)
    if schema is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown resource: {name}",
        )
    try:
        access_level = AccessLevel.coerce(level)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e
    return output_json_schema(schema, access_level)
