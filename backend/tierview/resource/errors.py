"""Schema authoring errors.

All of these are programmer errors raised while schemas are being built at
startup. Projection itself never raises.
"""


class SchemaBuildError(ValueError):
    """Base class for resource schema build failures."""


class DuplicateFieldError(SchemaBuildError):
    """A field name was registered twice on the same schema."""

    def __init__(self, name: str):
        super().__init__(f"Field {name!r} is already defined on this schema")
        self.name = name


class BuilderFinalizedError(SchemaBuildError):
    """A builder method was called after build()."""

    def __init__(self, method: str):
        super().__init__(f"Cannot call {method}() after build()")
        self.method = method


class UnbuiltSchemaError(SchemaBuildError):
    """A relation referenced something other than a built ResourceSchema."""

    def __init__(self, name: str, value: object):
        super().__init__(
            f"Relation {name!r} must reference a built ResourceSchema, "
            f"got {type(value).__name__}"
        )
        self.name = name


class InvalidFieldError(SchemaBuildError):
    """A field name or access level was not acceptable."""
