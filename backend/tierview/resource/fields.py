"""Field definitions stored on a resource schema."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from tierview.resource.visibility import AccessLevel

if TYPE_CHECKING:
    from tierview.resource.schema import ResourceSchema


class Cardinality(str, Enum):
    """How many nested entities a relation holds."""

    ONE = "one"
    MANY = "many"


@dataclass(frozen=True)
class ScalarField:
    """A value copied as-is into the projected output.

    Args:
        name: Key read from the raw data and written to the output.
        level: Lowest access level that can see the field.
        annotation: Expected Python type. Used for output model generation
            only; values are never validated against it.
    """

    name: str
    level: AccessLevel
    annotation: Any = Any


@dataclass(frozen=True)
class RelationField:
    """A nested entity (or list of entities) governed by another schema.

    The relation's own level controls whether the key appears at all. The
    nested schema's field levels control what the nested value contains.
    """

    name: str
    level: AccessLevel
    schema: ResourceSchema
    cardinality: Cardinality

    @property
    def is_many(self) -> bool:
        return self.cardinality is Cardinality.MANY


FieldDefinition = Union[ScalarField, RelationField]
