"""Tiered resource projection.

Resource schemas declare which fields of an entity are visible at each access
level. Projection turns raw entity data into a plain dict containing only the
fields the caller may see, following nested relations safely.
"""

from tierview.resource.errors import (
    BuilderFinalizedError,
    DuplicateFieldError,
    InvalidFieldError,
    SchemaBuildError,
    UnbuiltSchemaError,
)
from tierview.resource.fields import Cardinality, FieldDefinition, RelationField, ScalarField
from tierview.resource.instance import (
    Resource,
    ResourceCollection,
    level_from_context,
    project_result,
    resource,
    resource_collection,
)
from tierview.resource.models import output_json_schema, output_model
from tierview.resource.projector import project, project_collection
from tierview.resource.safety import DANGEROUS_KEYS
from tierview.resource.schema import (
    ResourceSchema,
    ResourceSchemaBuilder,
    TaggedResourceSchema,
    is_resource_schema,
    is_tagged_resource_schema,
    resource_schema,
)
from tierview.resource.visibility import AccessLevel, is_visible

__all__ = [
    "AccessLevel",
    "BuilderFinalizedError",
    "Cardinality",
    "DANGEROUS_KEYS",
    "DuplicateFieldError",
    "FieldDefinition",
    "InvalidFieldError",
    "RelationField",
    "Resource",
    "ResourceCollection",
    "ResourceSchema",
    "ResourceSchemaBuilder",
    "ScalarField",
    "SchemaBuildError",
    "TaggedResourceSchema",
    "UnbuiltSchemaError",
    "is_resource_schema",
    "is_tagged_resource_schema",
    "is_visible",
    "level_from_context",
    "output_json_schema",
    "output_model",
    "project",
    "project_collection",
    "project_result",
    "resource",
    "resource_collection",
    "resource_schema",
]
