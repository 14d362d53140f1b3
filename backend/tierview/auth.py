"""Bearer token authentication mapped to access levels.

Requests without credentials are public. A token matching ``API_KEY`` is
authenticated, one matching ``ADMIN_API_KEY`` is admin. Any other token is
rejected rather than silently downgraded.
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tierview.config import settings
from tierview.resource import AccessLevel

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _matches(token: str, expected: str) -> bool:
    # Unconfigured keys never match, so the sentinel cannot be used as a token
    if not settings.is_configured(expected):
        return False
    return secrets.compare_digest(token.encode(), expected.encode())


async def resolve_access_level(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AccessLevel:
    """Resolve the caller's access level from the Authorization header.

    Returns:
        PUBLIC without credentials, otherwise the level the token grants.

    Raises:
        HTTPException: 401 if a token is supplied but not recognised.
    """
    if credentials is None:
        return AccessLevel.PUBLIC

    token = credentials.credentials
    if _matches(token, settings.admin_api_key):
        return AccessLevel.ADMIN
    if _matches(token, settings.api_key):
        return AccessLevel.AUTHENTICATED

    logger.info("Rejected request with unrecognised bearer token")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
    )
