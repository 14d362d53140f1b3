"""Resource and collection projection handles.

Wraps raw data together with a schema and exposes one projection method per
access level.

Example:
    user = repository.get(user_id)
    resource(user, UserSchema).for_public()        # public fields only
    resource(user, UserSchema).for_admin()         # every field
    resource(user, UserSchema.authenticated)       # projected dict directly

    resource_collection(users, UserSchema).for_authenticated()
"""

from collections.abc import Mapping
from typing import Any, Iterable

from tierview.resource.projector import project, project_collection
from tierview.resource.safety import is_collection
from tierview.resource.schema import ResourceSchema, TaggedResourceSchema
from tierview.resource.visibility import AccessLevel


class Resource:
    """A single raw entity paired with the schema that governs it."""

    def __init__(self, data: Any, schema: ResourceSchema, *, max_depth: int | None = None):
        self._data = data
        self._schema = schema
        self._max_depth = max_depth

    def for_public(self) -> dict[str, Any]:
        """Project for anonymous callers (public fields only)."""
        return self.for_level(AccessLevel.PUBLIC)

    for_anonymous = for_public

    def for_authenticated(self) -> dict[str, Any]:
        """Project for signed-in callers (public and authenticated fields)."""
        return self.for_level(AccessLevel.AUTHENTICATED)

    def for_admin(self) -> dict[str, Any]:
        """Project for admins (all fields)."""
        return self.for_level(AccessLevel.ADMIN)

    def for_level(self, level: AccessLevel | str) -> dict[str, Any]:
        return project(self._data, self._schema, level, max_depth=self._max_depth)

    def for_context(self, ctx: Any) -> dict[str, Any]:
        """Project at the level implied by a request context.

        See ``level_from_context`` for how the level is derived.
        """
        return self.for_level(level_from_context(ctx))


class ResourceCollection:
    """A list of raw entities projected with one schema."""

    def __init__(
        self,
        items: Iterable[Any] | None,
        schema: ResourceSchema,
        *,
        max_depth: int | None = None,
    ):
        self._items = list(items) if is_collection(items) else []
        self._schema = schema
        self._max_depth = max_depth

    def for_public(self) -> list[dict[str, Any]]:
        return self.for_level(AccessLevel.PUBLIC)

    for_anonymous = for_public

    def for_authenticated(self) -> list[dict[str, Any]]:
        return self.for_level(AccessLevel.AUTHENTICATED)

    def for_admin(self) -> list[dict[str, Any]]:
        return self.for_level(AccessLevel.ADMIN)

    def for_level(self, level: AccessLevel | str) -> list[dict[str, Any]]:
        return project_collection(self._items, self._schema, level, max_depth=self._max_depth)

    def for_context(self, ctx: Any) -> list[dict[str, Any]]:
        return self.for_level(level_from_context(ctx))

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


def resource(data: Any, schema: ResourceSchema | TaggedResourceSchema):
    """Project or wrap a single entity.

    With a tagged schema (``UserSchema.public``) the projected dict is
    returned directly. With a plain schema a ``Resource`` handle is returned
    so the caller can pick the level.
    """
    if isinstance(schema, TaggedResourceSchema):
        return schema.project(data)
    return Resource(data, schema)


def resource_collection(
    items: Iterable[Any] | None, schema: ResourceSchema | TaggedResourceSchema
):
    """Project or wrap a list of entities. See ``resource``."""
    if isinstance(schema, TaggedResourceSchema):
        return schema.project_many(items)
    return ResourceCollection(items, schema)


def project_result(
    result: Any,
    schema: ResourceSchema,
    level: AccessLevel | str,
    *,
    max_depth: int | None = None,
) -> dict[str, Any] | list[dict[str, Any]]:
    """Project a handler's return value.

    Lists and tuples are projected as collections, anything else as a
    single entity.
    """
    if isinstance(result, (list, tuple)):
        return project_collection(result, schema, level, max_depth=max_depth)
    return project(result, schema, level, max_depth=max_depth)


def _lookup(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def level_from_context(ctx: Any) -> AccessLevel:
    """Derive an access level from an already-authenticated request context.

    The context may be a mapping or an object. Checked in order:

    1. an explicit ``access_level`` entry;
    2. ``is_admin`` set to True;
    3. a ``user`` whose ``roles`` include ``"admin"``;
    4. any non-null ``user``;
    5. ``auth.is_authenticated`` set to True.

    Anything else is public.
    """
    explicit = _lookup(ctx, "access_level")
    if explicit is not None:
        try:
            return AccessLevel.coerce(explicit)
        except ValueError:
            return AccessLevel.PUBLIC

    if _lookup(ctx, "is_admin") is True:
        return AccessLevel.ADMIN

    user = _lookup(ctx, "user")
    roles = _lookup(user, "roles")
    if isinstance(roles, (list, tuple, set, frozenset)) and "admin" in roles:
        return AccessLevel.ADMIN

    if user is not None:
        return AccessLevel.AUTHENTICATED

    if _lookup(_lookup(ctx, "auth"), "is_authenticated") is True:
        return AccessLevel.AUTHENTICATED

    return AccessLevel.PUBLIC
