"""Role registry for explicit role lookup.

The registry maps role names to their definitions. Lookups are exact and
case-sensitive; an unknown name is a normal outcome and yields None.

Thread Safety:
RoleRegistry is immutable after creation. Safe to share.
Use RoleRegistryBuilder for mutable construction.

Example:
    >>> registry = RoleRegistryBuilder().register(BUTTON).register(CHECKBOX).build()
    >>> registry.get("button")
    RoleDefinition('button')

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ariaroles.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ariaroles.definition import RoleDefinition

logger = get_logger(__name__)


class RoleRegistry:
    """Immutable registry of role definitions.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_roles", "_by_name")

    def __init__(
        self,
        roles: tuple[RoleDefinition, ...],
        by_name: dict[str, RoleDefinition],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use RoleRegistryBuilder to create instances.
        """
        self._roles = roles
        self._by_name = by_name

    def get(self, name: str) -> RoleDefinition | None:
        """Get definition for role name.

        Args:
            name: Role name (e.g., "button", "checkbox")

        Returns:
            Definition if registered, None otherwise
        """
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if role name is registered."""
        return name in self._by_name

    def is_interactive(self, name: str) -> bool:
        """Check if a registered role is interactive.

        Unknown names are not interactive.
        """
        role = self._by_name.get(name)
        return role is not None and role.is_interactive()

    @property
    def names(self) -> frozenset[str]:
        """Get all registered role names."""
        return frozenset(self._by_name.keys())

    @property
    def roles(self) -> tuple[RoleDefinition, ...]:
        """Get all registered definitions, in registration order."""
        return self._roles

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        """Number of registered roles."""
        return len(self._by_name)


class RoleRegistryBuilder:
    """Mutable builder for RoleRegistry.

    Use this to register definitions, then call build() to create
    an immutable registry.

    Example:
            >>> builder = RoleRegistryBuilder().register_all(EXPLICIT_ROLES)
            >>> abstract = RoleDefinition("doc-abstract", super_roles=("section",))
            >>> registry = builder.register(abstract).build()

    """

    __slots__ = ("_roles", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._roles: list[RoleDefinition] = []
        self._by_name: dict[str, RoleDefinition] = {}

    def register(self, role: RoleDefinition) -> RoleRegistryBuilder:
        """Register a role definition.

        Args:
            role: Definition to register

        Returns:
            Self for chaining

        Raises:
            TypeError: If the object does not look like a role definition
            ValueError: If the name is already registered
        """
        for attr in ("name", "properties", "super_roles", "concepts"):
            if not hasattr(role, attr):
                msg = f"{type(role).__name__} missing '{attr}' attribute"
                raise TypeError(msg)

        if role.name in self._by_name:
            msg = f"Role '{role.name}' already registered"
            raise ValueError(msg)

        self._by_name[role.name] = role
        self._roles.append(role)
        return self

    def register_all(self, roles: Iterable[RoleDefinition]) -> RoleRegistryBuilder:
        """Register multiple definitions.

        Args:
            roles: Definitions to register

        Returns:
            Self for chaining
        """
        for role in roles:
            self.register(role)
        return self

    def build(self) -> RoleRegistry:
        """Build immutable registry from registered definitions.

        Returns:
            Immutable RoleRegistry
        """
        logger.debug("Building role registry with %d roles", len(self._roles))
        return RoleRegistry(
            roles=tuple(self._roles),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered roles."""
        return len(self._roles)


def _build_default_registry() -> RoleRegistry:
    """Build the default registry (internal, not cached)."""
    from ariaroles.catalog import EXPLICIT_ROLES

    return RoleRegistryBuilder().register_all(EXPLICIT_ROLES).build()


# Cached singleton, shared freely since RoleRegistry is immutable
_DEFAULT_REGISTRY: RoleRegistry | None = None


def create_default_registry() -> RoleRegistry:
    """Get the default role registry (cached singleton).

    Returns:
        Registry with every role accepted by explicit lookup

    Thread Safety:
        Returns a cached immutable registry. Two threads racing on the
        first call may each build one; both are identical and either
        may be kept.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = _build_default_registry()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> RoleRegistryBuilder:
    """Create a builder pre-populated with the default roles.

    Use this to extend the default set with custom roles:

        >>> registry = create_registry_with_defaults().register(MyRole).build()

    Returns:
        RoleRegistryBuilder with defaults already registered
    """
    from ariaroles.catalog import EXPLICIT_ROLES

    return RoleRegistryBuilder().register_all(EXPLICIT_ROLES)


__all__ = [
    "RoleRegistry",
    "RoleRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
]
