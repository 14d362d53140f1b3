"""Recursive projection of raw entity data.

Given raw data, a schema and an access level, builds a fresh output value
containing only the fields visible at that level. Nested relations are
projected at the same level as their parent.

Projection never raises. Malformed input degrades to an empty value at the
point where it goes wrong:

- a missing or non-object ``has_one`` value becomes ``None``;
- a missing or non-list ``has_many`` value becomes ``[]`` and non-object
  entries are dropped;
- an entity that is its own ancestor on the current path becomes ``{}``;
- an entity deeper than ``max_depth`` becomes ``{}``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

from tierview.config import settings
from tierview.resource.fields import RelationField
from tierview.resource.safety import (
    MISSING,
    is_collection,
    is_dangerous_key,
    is_plain_object,
    is_sequence,
    new_container,
    read_value,
)
from tierview.resource.visibility import AccessLevel, is_visible

if TYPE_CHECKING:
    from tierview.resource.schema import ResourceSchema

logger = logging.getLogger(__name__)


def project(
    data: Any,
    schema: ResourceSchema,
    level: AccessLevel | str,
    *,
    max_depth: int | None = None,
) -> dict[str, Any]:
    """Project a single entity.

    Args:
        data: Raw entity (mapping or pydantic model). Anything else is
            treated as an entity with no fields present.
        schema: Schema describing the entity.
        level: Access level of the caller.
        max_depth: Deepest nesting level that is still projected. Defaults
            to ``settings.max_projection_depth``.

    Returns:
        A new dict with only the visible fields.
    """
    level = AccessLevel.coerce(level)
    limit = _resolve_max_depth(max_depth)
    if not is_plain_object(data):
        data = {}
    return _project_object(data, schema, level, [], 0, limit)


def project_collection(
    items: Iterable[Any] | None,
    schema: ResourceSchema,
    level: AccessLevel | str,
    *,
    max_depth: int | None = None,
) -> list[dict[str, Any]]:
    """Project each item independently, each with its own ancestor stack.

    Anything that is not a collection (None, a string, a single mapping) is
    treated as absent and yields an empty list.
    """
    if not is_collection(items):
        return []
    return [project(item, schema, level, max_depth=max_depth) for item in items]


def _resolve_max_depth(max_depth: int | None) -> int:
    if max_depth is None:
        return settings.max_projection_depth
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    return max_depth


def _project_object(
    raw: Any,
    schema: ResourceSchema,
    level: AccessLevel,
    ancestors: list[int],
    depth: int,
    max_depth: int,
) -> dict[str, Any]:
    if depth > max_depth:
        logger.debug("Projection depth %d exceeds limit %d, truncating", depth, max_depth)
        return new_container()

    identity = id(raw)
    if identity in ancestors:
        logger.debug("Cycle detected at depth %d, truncating", depth)
        return new_container()

    ancestors.append(identity)
    try:
        output = new_container()
        for definition in schema.fields:
            if not is_visible(definition.level, level):
                continue
            if is_dangerous_key(definition.name):
                continue

            value = read_value(raw, definition.name)

            if isinstance(definition, RelationField):
                output[definition.name] = _project_relation(
                    value, definition, level, ancestors, depth, max_depth
                )
            elif value is not MISSING:
                output[definition.name] = value
        return output
    finally:
        ancestors.pop()


def _project_relation(
    value: Any,
    definition: RelationField,
    level: AccessLevel,
    ancestors: list[int],
    depth: int,
    max_depth: int,
) -> dict[str, Any] | list[dict[str, Any]] | None:
    nested = definition.schema

    if definition.is_many:
        if not is_sequence(value):
            return []
        return [
            _project_object(item, nested, level, ancestors, depth + 1, max_depth)
            for item in value
            if is_plain_object(item)
        ]

    if not is_plain_object(value):
        return None
    return _project_object(value, nested, level, ancestors, depth + 1, max_depth)
