"""User API routes.

Every response is projected at the caller's access level, so the same
endpoint serves public, authenticated and admin views of a user.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tierview.auth import resolve_access_level
from tierview.repositories.users import UserRepository, get_user_repository
from tierview.resource import AccessLevel, project_result
from tierview.schemas import ProjectedListResponse, UserSchema

router = APIRouter(prefix="/users", tags=["users"])


# Pagination defaults
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100


@router.get("", response_model=ProjectedListResponse)
async def list_users(
    level: AccessLevel = Depends(resolve_access_level),
    repository: UserRepository = Depends(get_user_repository),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> ProjectedListResponse:
    """List users projected for the caller.

    Args:
        skip: Number of records to skip (pagination offset).
        limit: Maximum number of records to return.

    Returns:
        Paginated list of projected users.
    """
    users = repository.list(skip=skip, limit=limit)
    return ProjectedListResponse(
        items=project_result(users, UserSchema, level),
        total=repository.count(),
        skip=skip,
        limit=limit,
        access_level=level.label,
    )


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    level: AccessLevel = Depends(resolve_access_level),
    repository: UserRepository = Depends(get_user_repository),
) -> dict[str, Any]:
    """Get a single user projected for the caller.

    Raises:
        HTTPException: 404 if the user does not exist.
    """
    user = repository.get(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return project_result(user, UserSchema, level)
