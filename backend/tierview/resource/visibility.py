"""Access levels and field visibility.

Levels are ordered: a field declared at one level is visible to callers at
that level and every level above it.
"""

from enum import IntEnum


class AccessLevel(IntEnum):
    """Ordinal access levels, lowest to highest."""

    PUBLIC = 0
    AUTHENTICATED = 1
    ADMIN = 2

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def coerce(cls, value: "AccessLevel | str") -> "AccessLevel":
        """Convert an enum member or its lowercase label into an AccessLevel.

        Raises:
            ValueError: If the value does not name a known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown access level: {value!r}")


def is_visible(field_level: AccessLevel, requested: AccessLevel) -> bool:
    """Return True if a field at ``field_level`` is shown at ``requested``."""
    return field_level <= requested
