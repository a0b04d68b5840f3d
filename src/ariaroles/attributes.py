"""Read-only helpers over an element's attribute map.

The linter extracts attributes from markup as a mapping of attribute name
to the list of values it could statically determine. An attribute written
without a value (``<select multiple>``) appears with ``[""]``; an attribute
whose value could not be determined may appear with ``[]``. Presence of the
key is what matters for most checks.

Example:
    >>> attrs = {"type": ["search"], "list": ["suggestions"]}
    >>> has_attribute(attrs, "list")
    True
    >>> first_value(attrs, "type")
    'search'

"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias

# Attribute name -> statically known values
Attributes: TypeAlias = Mapping[str, Sequence[str]]

EMPTY_ATTRIBUTES: Attributes = {}


def has_attribute(attributes: Attributes, name: str) -> bool:
    """Check if the attribute is present, whatever its values."""
    return name in attributes


def has_any_attribute(attributes: Attributes, *names: str) -> bool:
    """Check if at least one of the attributes is present."""
    return any(name in attributes for name in names)


def first_value(attributes: Attributes, name: str) -> str | None:
    """Get the first value of an attribute.

    Returns:
        The first value, or None if the attribute is missing or has no values
    """
    values = attributes.get(name)
    if not values:
        return None
    return values[0]


def has_value(attributes: Attributes, name: str, value: str) -> bool:
    """Check if any value of the attribute equals ``value`` exactly."""
    return value in attributes.get(name, ())


def has_non_empty_value(attributes: Attributes, name: str) -> bool:
    """Check if the attribute carries at least one non-empty value."""
    return any(value for value in attributes.get(name, ()))
