"""User, organization and post resource schemas.

Declared leaf-first: nested schemas are built before the schemas that
reference them.
"""

from datetime import datetime

from tierview.resource import resource_schema

OrganizationSchema = (
    resource_schema("Organization")
    .public("id", str)
    .public("name", str)
    .admin("taxId", str)
    .build()
)

PostSchema = (
    resource_schema("Post")
    .public("id", str)
    .public("title", str)
    .authenticated("draft", bool)
    .build()
)

UserSchema = (
    resource_schema("User")
    .public("id", str)
    .public("name", str)
    .authenticated("email", str)
    .authenticated("createdAt", datetime)
    .has_one("organization", OrganizationSchema, "public")
    .has_many("posts", PostSchema, "authenticated")
    .admin("internalNotes", str)
    .build()
)
