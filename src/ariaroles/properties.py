"""ARIA property metadata used to validate property names.

Role definitions reference properties by their attribute name
(``aria-checked``, ``aria-level``). Deciding whether a name is a real ARIA
property belongs to a separate metadata source; this module is the default
one. Linters with their own property catalog can supply any object
implementing :class:`PropertyOracle` through :class:`ariaroles.config.RoleConfig`.

Thread Safety:
AriaProperty is an enum (inherently immutable). The lookup table is a
module-level constant built at import time.

Example:
    >>> from ariaroles.properties import is_valid_property_name, parse_property_name
    >>> is_valid_property_name("aria-checked")
    True
    >>> parse_property_name("aria-checked")
    <AriaProperty.CHECKED: 'aria-checked'>
    >>> is_valid_property_name("aria-made-up")
    False

"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from ariaroles.errors import UnknownPropertyError


class AriaProperty(Enum):
    """ARIA states and properties (WAI-ARIA 1.2).

    Values are the attribute names as written in markup.

    """

    # Widget attributes
    AUTOCOMPLETE = "aria-autocomplete"
    CHECKED = "aria-checked"
    DISABLED = "aria-disabled"
    ERRORMESSAGE = "aria-errormessage"
    EXPANDED = "aria-expanded"
    HASPOPUP = "aria-haspopup"
    HIDDEN = "aria-hidden"
    INVALID = "aria-invalid"
    LABEL = "aria-label"
    LEVEL = "aria-level"
    MODAL = "aria-modal"
    MULTILINE = "aria-multiline"
    MULTISELECTABLE = "aria-multiselectable"
    ORIENTATION = "aria-orientation"
    PLACEHOLDER = "aria-placeholder"
    PRESSED = "aria-pressed"
    READONLY = "aria-readonly"
    REQUIRED = "aria-required"
    SELECTED = "aria-selected"
    SORT = "aria-sort"
    VALUEMAX = "aria-valuemax"
    VALUEMIN = "aria-valuemin"
    VALUENOW = "aria-valuenow"
    VALUETEXT = "aria-valuetext"

    # Live region attributes
    ATOMIC = "aria-atomic"
    BUSY = "aria-busy"
    LIVE = "aria-live"
    RELEVANT = "aria-relevant"

    # Drag-and-drop attributes (deprecated in 1.1, still recognized)
    DROPEFFECT = "aria-dropeffect"
    GRABBED = "aria-grabbed"

    # Relationship attributes
    ACTIVEDESCENDANT = "aria-activedescendant"
    COLCOUNT = "aria-colcount"
    COLINDEX = "aria-colindex"
    COLINDEXTEXT = "aria-colindextext"
    COLSPAN = "aria-colspan"
    CONTROLS = "aria-controls"
    CURRENT = "aria-current"
    DESCRIBEDBY = "aria-describedby"
    DESCRIPTION = "aria-description"
    DETAILS = "aria-details"
    FLOWTO = "aria-flowto"
    KEYSHORTCUTS = "aria-keyshortcuts"
    LABELLEDBY = "aria-labelledby"
    OWNS = "aria-owns"
    POSINSET = "aria-posinset"
    ROLEDESCRIPTION = "aria-roledescription"
    ROWCOUNT = "aria-rowcount"
    ROWINDEX = "aria-rowindex"
    ROWINDEXTEXT = "aria-rowindextext"
    ROWSPAN = "aria-rowspan"
    SETSIZE = "aria-setsize"


# Attribute name -> enum member, for exact lookups
_PROPERTIES_BY_NAME: dict[str, AriaProperty] = {prop.value: prop for prop in AriaProperty}


def is_valid_property_name(name: str) -> bool:
    """Check whether ``name`` is a known ARIA property.

    The comparison is exact and case-sensitive.
    """
    return name in _PROPERTIES_BY_NAME


def parse_property_name(name: str) -> AriaProperty:
    """Convert an attribute name to its :class:`AriaProperty`.

    Args:
        name: Attribute name (e.g., "aria-checked")

    Returns:
        The matching enum member

    Raises:
        UnknownPropertyError: If the name is not an ARIA property
    """
    try:
        return _PROPERTIES_BY_NAME[name]
    except KeyError:
        raise UnknownPropertyError(name) from None


@runtime_checkable
class PropertyOracle(Protocol):
    """Protocol for ARIA property metadata sources.

    Implementations must be pure: the same name always yields the same
    answer, and no call mutates shared state.

    Example:
            >>> class StrictOracle:
            ...     def is_valid_property_name(self, name):
            ...         return name in {"aria-checked"}
            ...
            ...     def parse_property_name(self, name):
            ...         if name != "aria-checked":
            ...             raise UnknownPropertyError(name)
            ...         return AriaProperty.CHECKED

    """

    def is_valid_property_name(self, name: str) -> bool:
        """Return True if ``name`` is a known property."""
        ...

    def parse_property_name(self, name: str) -> AriaProperty:
        """Parse ``name``, raising UnknownPropertyError when unknown."""
        ...


class AriaPropertyOracle:
    """Default oracle backed by :class:`AriaProperty`.

    Thread Safety:
        Stateless. Safe for concurrent use.

    """

    __slots__ = ()

    def is_valid_property_name(self, name: str) -> bool:
        return is_valid_property_name(name)

    def parse_property_name(self, name: str) -> AriaProperty:
        return parse_property_name(name)


DEFAULT_PROPERTY_ORACLE: PropertyOracle = AriaPropertyOracle()


__all__ = [
    "AriaProperty",
    "AriaPropertyOracle",
    "DEFAULT_PROPERTY_ORACLE",
    "PropertyOracle",
    "is_valid_property_name",
    "parse_property_name",
]
