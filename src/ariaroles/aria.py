"""High-level facade over the role tables.

AriaRoles bundles the four queries a linter needs per element. It holds no
mutable state; an instance can be shared across threads and reused for a
whole run.

Example:
    >>> aria = AriaRoles()
    >>> aria.get_role("checkbox").is_property_required("aria-checked")
    True
    >>> aria.get_implicit_role("select", {"multiple": [""], "size": ["4"]})
    RoleDefinition('listbox')
    >>> aria.is_not_interactive_element("h1")
    True

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ariaroles.config import get_registry
from ariaroles.implicit import infer_implicit_role
from ariaroles.interactivity import is_not_interactive_element

if TYPE_CHECKING:
    from ariaroles.attributes import Attributes
    from ariaroles.definition import RoleDefinition
    from ariaroles.registry import RoleRegistry


class AriaRoles:
    """ARIA role metadata for markup elements.

    Args:
        registry: Registry for explicit lookups. When None, the registry of
            the active RoleConfig is used at call time.

    Thread Safety:
        Stateless apart from the immutable registry reference.

    """

    __slots__ = ("_registry",)

    def __init__(self, registry: RoleRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> RoleRegistry:
        """Registry used for explicit lookups."""
        return self._registry if self._registry is not None else get_registry()

    def get_role(self, name: str) -> RoleDefinition | None:
        """Get a role by its exact name, None if unknown."""
        return self.registry.get(name)

    def get_implicit_role(self, tag: str, attributes: Attributes) -> RoleDefinition | None:
        """Get the implicit role of an element.

        Args:
            tag: Element tag name (e.g., "input")
            attributes: Attribute name -> statically known values

        Returns:
            The role, or None if the element has no determinable implicit role
        """
        return infer_implicit_role(tag, attributes)

    def is_role_interactive(self, name: str) -> bool:
        """Whether the named role is interactive. False for unknown roles."""
        return self.registry.is_interactive(name)

    def is_not_interactive_element(
        self,
        tag: str,
        attributes: Attributes | None = None,
    ) -> bool:
        """Whether the element is known to be non-interactive."""
        return is_not_interactive_element(tag, attributes)

    def __repr__(self) -> str:
        return f"AriaRoles(roles={len(self.registry)})"


__all__ = ["AriaRoles"]
