"""Safe output construction helpers.

Projected values are handed straight to serializers and often end up in
JavaScript clients that merge them into other objects. Keys that can reach
an object's prototype chain (or a Python object's internals) are never
written to output, whatever the schema says.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

DANGEROUS_KEYS: frozenset[str] = frozenset({
    # JavaScript prototype chain
    "__proto__",
    "constructor",
    "prototype",
    "__defineGetter__",
    "__defineSetter__",
    "__lookupGetter__",
    "__lookupSetter__",
    # Python object internals
    "__class__",
    "__dict__",
    "__globals__",
    "__builtins__",
    "__init__",
    "__getattribute__",
    "__reduce__",
    "__reduce_ex__",
    "__subclasses__",
    "__bases__",
    "__mro__",
})

# Sentinel for "key not present", distinct from a present None.
MISSING = object()


def is_dangerous_key(name: str) -> bool:
    return name in DANGEROUS_KEYS


def is_plain_object(value: Any) -> bool:
    """Return True for values that can be projected as an entity."""
    return isinstance(value, (Mapping, BaseModel))


def is_sequence(value: Any) -> bool:
    """Return True for ordered collections of entities (not str/bytes/maps)."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray, Mapping)
    )


def is_collection(value: Any) -> bool:
    """Return True for iterables of entities (lists, tuples, generators).

    Strings, bytes, mappings and models are single values, not collections.
    """
    return isinstance(value, Iterable) and not isinstance(
        value, (str, bytes, bytearray, Mapping, BaseModel)
    )


def read_value(raw: Any, name: str) -> Any:
    """Read ``name`` from a mapping or pydantic model.

    Returns MISSING when the key or attribute is absent. Model attributes
    are only read if they are declared fields or extras, never arbitrary
    attributes such as methods.
    """
    if isinstance(raw, Mapping):
        return raw.get(name, MISSING)
    if isinstance(raw, BaseModel):
        if name in type(raw).model_fields:
            return getattr(raw, name)
        extra = raw.model_extra or {}
        return extra.get(name, MISSING)
    return MISSING


def new_container() -> dict[str, Any]:
    """Allocate an empty output mapping.

    Always an exact ``dict``; values are inserted key by key, never merged
    or copied from the raw input.
    """
    return dict()
