"""Resource schemas exposed by the API."""

from tierview.schemas.responses import ProjectedListResponse
from tierview.schemas.users import OrganizationSchema, PostSchema, UserSchema

# Schemas addressable by name from the schema discovery endpoint
SCHEMAS = {
    "organization": OrganizationSchema,
    "post": PostSchema,
    "user": UserSchema,
}

__all__ = [
    "OrganizationSchema",
    "PostSchema",
    "ProjectedListResponse",
    "SCHEMAS",
    "UserSchema",
]
