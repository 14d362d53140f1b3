"""Pydantic models describing projected output.

Used to document API responses: for a schema and an access level, builds a
model whose fields are exactly the keys projection can produce at that
level. Models are descriptive only and are never used to validate raw data.
"""

import keyword
from typing import Any, Optional

from pydantic import BaseModel, Field, create_model

from tierview.resource.fields import RelationField
from tierview.resource.safety import is_dangerous_key
from tierview.resource.schema import ResourceSchema
from tierview.resource.visibility import AccessLevel, is_visible

# Keyed by schema identity; the schema is stored alongside so the id stays valid.
_model_cache: dict[tuple[int, AccessLevel], tuple[ResourceSchema, type[BaseModel]]] = {}


def output_model(schema: ResourceSchema, level: AccessLevel | str) -> type[BaseModel]:
    """Return the (cached) output model for ``schema`` at ``level``."""
    level = AccessLevel.coerce(level)
    key = (id(schema), level)
    cached = _model_cache.get(key)
    if cached is not None:
        return cached[1]

    model = _build_model(schema, level)
    _model_cache[key] = (schema, model)
    return model


def output_json_schema(schema: ResourceSchema, level: AccessLevel | str) -> dict[str, Any]:
    """JSON schema of the projected output, keyed by the real field names."""
    return output_model(schema, level).model_json_schema(by_alias=True)


def _python_name(name: str, index: int, taken: dict[str, Any]) -> str:
    """Attribute name for a field; unusable or clashing names get an alias.

    Substitute names are unique among ``taken``, so no field can overwrite
    another in the generated model.
    """
    if (
        name.isidentifier()
        and not keyword.iskeyword(name)
        and not name.startswith("_")
        and not name.startswith("model_")
        and not hasattr(BaseModel, name)
        and name not in taken
    ):
        return name
    candidate = f"field_{index}"
    suffix = 1
    while candidate in taken:
        candidate = f"field_{index}_{suffix}"
        suffix += 1
    return candidate


def _build_model(schema: ResourceSchema, level: AccessLevel) -> type[BaseModel]:
    definitions: dict[str, Any] = {}

    for index, f in enumerate(schema.fields):
        if not is_visible(f.level, level) or is_dangerous_key(f.name):
            continue

        if isinstance(f, RelationField):
            nested = output_model(f.schema, level)
            if f.is_many:
                entry = (list[nested], Field(default_factory=list, alias=f.name))
            else:
                entry = (Optional[nested], Field(default=None, alias=f.name))
        else:
            entry = (Optional[f.annotation], Field(default=None, alias=f.name))

        definitions[_python_name(f.name, index, definitions)] = entry

    model_name = f"{schema.name or 'Resource'}{level.label.title()}"
    return create_model(
        model_name,
        **definitions,
    )


def _clear_for_testing() -> None:
    """Drop cached models. Internal use in tests only."""
    _model_cache.clear()
