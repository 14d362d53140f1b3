"""Resource schema builder.

Schemas declare which fields of an entity are visible at each access level,
including nested ``has_one`` / ``has_many`` relations. They are built once at
startup and shared, read-only, by every request.

Example:
    OrgSchema = (
        resource_schema("Organization")
        .public("id", str)
        .public("name", str)
        .admin("tax_id", str)
        .build()
    )

    UserSchema = (
        resource_schema("User")
        .public("id", str)
        .authenticated("email", str)
        .has_one("organization", OrgSchema, "public")
        .build()
    )

    UserSchema.public.project(user)   # {"id": ..., "organization": {...}}

Nested schemas must be built before they are referenced, so schemas are
declared leaf-first. Projection depth is capped by ``max_depth`` (see
``tierview.resource.projector``), defaulting to
``settings.max_projection_depth``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from tierview.resource.errors import (
    BuilderFinalizedError,
    DuplicateFieldError,
    InvalidFieldError,
    UnbuiltSchemaError,
)
from tierview.resource.fields import Cardinality, FieldDefinition, RelationField, ScalarField
from tierview.resource.projector import project, project_collection
from tierview.resource.safety import is_dangerous_key
from tierview.resource.visibility import AccessLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceSchema:
    """An immutable, ordered set of field definitions."""

    fields: tuple[FieldDefinition, ...]
    name: str | None = None

    def __post_init__(self) -> None:
        """Apply the builder's checks to schemas constructed directly."""
        object.__setattr__(self, "fields", tuple(self.fields))
        seen: set[str] = set()
        for f in self.fields:
            if not isinstance(f, (ScalarField, RelationField)):
                raise InvalidFieldError(f"Not a field definition: {f!r}")
            if not isinstance(f.name, str) or not f.name:
                raise InvalidFieldError(f"Field name must be a non-empty string, got {f.name!r}")
            if f.name in seen:
                raise DuplicateFieldError(f.name)
            if not isinstance(f.level, AccessLevel):
                raise InvalidFieldError(f"Field {f.name!r} has unknown access level {f.level!r}")
            if isinstance(f, RelationField):
                if not isinstance(f.schema, ResourceSchema):
                    raise UnbuiltSchemaError(f.name, f.schema)
                if not isinstance(f.cardinality, Cardinality):
                    raise InvalidFieldError(
                        f"Relation {f.name!r} has unknown cardinality {f.cardinality!r}"
                    )
            seen.add(f.name)

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get(self, name: str) -> FieldDefinition | None:
        """Look up a field definition by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def tagged(self, level: AccessLevel | str) -> TaggedResourceSchema:
        """Pair this schema with a fixed access level."""
        return TaggedResourceSchema(self, AccessLevel.coerce(level))

    @property
    def public(self) -> TaggedResourceSchema:
        return TaggedResourceSchema(self, AccessLevel.PUBLIC)

    @property
    def authenticated(self) -> TaggedResourceSchema:
        return TaggedResourceSchema(self, AccessLevel.AUTHENTICATED)

    @property
    def admin(self) -> TaggedResourceSchema:
        return TaggedResourceSchema(self, AccessLevel.ADMIN)


@dataclass(frozen=True)
class TaggedResourceSchema:
    """A resource schema bound to one access level.

    Created via ``Schema.public``, ``Schema.authenticated`` or
    ``Schema.admin``. Projection calls delegate to the projector.
    """

    schema: ResourceSchema
    level: AccessLevel

    @property
    def fields(self) -> tuple[FieldDefinition, ...]:
        return self.schema.fields

    def project(self, data: Any, *, max_depth: int | None = None) -> dict[str, Any]:
        return project(data, self.schema, self.level, max_depth=max_depth)

    def project_many(
        self, items: Iterable[Any] | None, *, max_depth: int | None = None
    ) -> list[dict[str, Any]]:
        return project_collection(items, self.schema, self.level, max_depth=max_depth)


class ResourceSchemaBuilder:
    """Accumulates field definitions and freezes them into a ResourceSchema.

    Every method returns the builder so calls can be chained. Once
    ``build()`` has been called the builder refuses further changes.
    """

    def __init__(self, name: str | None = None):
        self._name = name
        self._fields: list[FieldDefinition] = []
        self._names: set[str] = set()
        self._built = False

    # --- core registration -------------------------------------------------

    def add_field(
        self, name: str, level: AccessLevel | str, annotation: Any = Any
    ) -> ResourceSchemaBuilder:
        """Register a scalar field."""
        self._check_open("add_field")
        self._register(
            ScalarField(
                name=self._check_name(name),
                level=self._level(level),
                annotation=annotation,
            )
        )
        return self

    def add_has_one(
        self, name: str, level: AccessLevel | str, schema: ResourceSchema
    ) -> ResourceSchemaBuilder:
        """Register a single nested entity (projected as a dict or None)."""
        self._check_open("add_has_one")
        self._register(self._relation(name, level, schema, Cardinality.ONE))
        return self

    def add_has_many(
        self, name: str, level: AccessLevel | str, schema: ResourceSchema
    ) -> ResourceSchemaBuilder:
        """Register a list of nested entities (projected as a list of dicts)."""
        self._check_open("add_has_many")
        self._register(self._relation(name, level, schema, Cardinality.MANY))
        return self

    # --- fluent shorthands -------------------------------------------------

    def public(self, name: str, annotation: Any = Any) -> ResourceSchemaBuilder:
        return self.add_field(name, AccessLevel.PUBLIC, annotation)

    def authenticated(self, name: str, annotation: Any = Any) -> ResourceSchemaBuilder:
        return self.add_field(name, AccessLevel.AUTHENTICATED, annotation)

    def admin(self, name: str, annotation: Any = Any) -> ResourceSchemaBuilder:
        return self.add_field(name, AccessLevel.ADMIN, annotation)

    def field(
        self, name: str, annotation: Any, level: AccessLevel | str
    ) -> ResourceSchemaBuilder:
        return self.add_field(name, level, annotation)

    def has_one(
        self, name: str, schema: ResourceSchema, level: AccessLevel | str
    ) -> ResourceSchemaBuilder:
        return self.add_has_one(name, level, schema)

    def has_many(
        self, name: str, schema: ResourceSchema, level: AccessLevel | str
    ) -> ResourceSchemaBuilder:
        return self.add_has_many(name, level, schema)

    # --- finalization ------------------------------------------------------

    def build(self) -> ResourceSchema:
        """Freeze the accumulated fields into an immutable ResourceSchema."""
        self._check_open("build")
        self._built = True
        return ResourceSchema(fields=tuple(self._fields), name=self._name)

    # --- internals ---------------------------------------------------------

    def _check_open(self, method: str) -> None:
        if self._built:
            raise BuilderFinalizedError(method)

    def _check_name(self, name: str) -> str:
        if not isinstance(name, str) or not name:
            raise InvalidFieldError(f"Field name must be a non-empty string, got {name!r}")
        if name in self._names:
            raise DuplicateFieldError(name)
        if is_dangerous_key(name):
            logger.warning(
                "Schema %s declares field %r, which is never included in projected output",
                self._name or "<anonymous>",
                name,
            )
        return name

    @staticmethod
    def _level(level: AccessLevel | str) -> AccessLevel:
        try:
            return AccessLevel.coerce(level)
        except ValueError as e:
            raise InvalidFieldError(str(e)) from e

    def _relation(
        self,
        name: str,
        level: AccessLevel | str,
        schema: ResourceSchema,
        cardinality: Cardinality,
    ) -> RelationField:
        if not isinstance(schema, ResourceSchema):
            raise UnbuiltSchemaError(name, schema)
        return RelationField(
            name=self._check_name(name),
            level=self._level(level),
            schema=schema,
            cardinality=cardinality,
        )

    def _register(self, definition: FieldDefinition) -> None:
        self._fields.append(definition)
        self._names.add(definition.name)


def resource_schema(name: str | None = None) -> ResourceSchemaBuilder:
    """Create a new, empty schema builder."""
    return ResourceSchemaBuilder(name)


def is_resource_schema(value: Any) -> bool:
    """Return True for built (untagged) resource schemas."""
    return isinstance(value, ResourceSchema)


def is_tagged_resource_schema(value: Any) -> bool:
    """Return True for schemas bound to an access level."""
    return isinstance(value, TaggedResourceSchema)
