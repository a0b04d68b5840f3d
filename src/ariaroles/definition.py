"""Role definition types.

Every ARIA role shares one shape: a name, the properties it supports, the
more general roles it specializes, and the native elements that realize it.
Roles differ only in data, so a single frozen dataclass describes them all.

Thread Safety:
RoleDefinition and Concept are frozen (immutable) and safe to share
across threads.

Example:
    >>> from ariaroles.catalog import CHECKBOX
    >>> CHECKBOX.is_interactive()
    True
    >>> CHECKBOX.is_property_required("aria-checked")
    True
    >>> CHECKBOX.is_property_required("aria-readonly")
    False

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ariaroles.config import get_property_oracle
from ariaroles.errors import UnknownPropertyError

if TYPE_CHECKING:
    from ariaroles.properties import PropertyOracle

# Abstract ARIA category whose descendants are interactive
WIDGET = "widget"


@dataclass(frozen=True, slots=True)
class Concept:
    """A native element that realizes a role.

    Attributes:
        element: Tag name (e.g., "input")
        attributes: Attribute constraints as (name, value) pairs,
            e.g. (("type", "checkbox"),)

    """

    element: str
    attributes: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class RoleDefinition:
    """Metadata for one named ARIA role.

    Attributes:
        name: Role name (e.g., "checkbox")
        properties: (property, required) pairs in declaration order.
            Duplicates may occur; the first entry wins.
        super_roles: Roles and abstract categories this role specializes.
            Several unrelated parents are allowed.
        concepts: Native elements realizing this role. Used for
            interactivity classification only.

    """

    name: str
    properties: tuple[tuple[str, bool], ...] = ()
    super_roles: tuple[str, ...] = ()
    concepts: tuple[Concept, ...] = ()

    @property
    def roles(self) -> tuple[str, ...]:
        """Super-roles of this definition."""
        return self.super_roles

    def is_interactive(self) -> bool:
        """Whether the role descends from the ``widget`` category."""
        return WIDGET in self.super_roles

    def is_property_required(
        self,
        property_name: str,
        oracle: PropertyOracle | None = None,
    ) -> bool:
        """Check whether a property is required for this role.

        Names the oracle does not recognize are never required. Otherwise
        the first matching entry in ``properties`` decides; a property the
        role does not list is not required.

        Args:
            property_name: Attribute name (e.g., "aria-checked")
            oracle: Property metadata source. Defaults to the oracle of
                the active RoleConfig.

        Returns:
            True if the role requires the property
        """
        if oracle is None:
            oracle = get_property_oracle()

        if not oracle.is_valid_property_name(property_name):
            return False
        try:
            wanted = oracle.parse_property_name(property_name)
        except UnknownPropertyError:
            return False

        for name, required in self.properties:
            try:
                listed = oracle.parse_property_name(name)
            except UnknownPropertyError:
                # A narrower oracle may not know every listed property
                continue
            if listed == wanted:
                return required
        return False

    def required_properties(self) -> tuple[str, ...]:
        """Names of the required properties, in declaration order."""
        first: dict[str, bool] = {}
        for name, required in self.properties:
            first.setdefault(name, required)
        return tuple(name for name, required in first.items() if required)

    def concepts_by_element_name(self, element: str) -> tuple[Concept, ...]:
        """Concepts realized by the given tag name."""
        return tuple(concept for concept in self.concepts if concept.element == element)

    def __repr__(self) -> str:
        return f"RoleDefinition({self.name!r})"


__all__ = [
    "Concept",
    "RoleDefinition",
    "WIDGET",
]
