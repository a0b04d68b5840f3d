"""Exception classes for ariaroles.

Role queries are total and never raise. Exceptions only surface at the
edges: parsing a property name, or assembling a registry.
"""

from __future__ import annotations


class AriaRolesError(Exception):
    """Base exception for all ariaroles errors.
    
    Subclass this for specific error categories.
    """

    pass


class UnknownPropertyError(AriaRolesError, ValueError):
    """Error when a string does not name an ARIA property.
    
    Raised by property oracles from ``parse_property_name``.
    """

    def __init__(self, name: str) -> None:
        """Initialize with the offending name.
        
        Args:
            name: The string that failed to parse (e.g., "aria-foo")
        """
        self.name = name
        super().__init__(f"Unknown ARIA property: {name!r}")
