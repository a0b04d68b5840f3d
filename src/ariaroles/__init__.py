"""
ariaroles: ARIA role semantics for markup elements

Resolves the accessibility role of an element from its tag name and
attributes, the properties that role supports, and whether the element is
interactive. Built for static analysis: nothing is rendered or executed,
and every query is a pure lookup over immutable tables.

Quick Start:
    >>> from ariaroles import get_implicit_role, get_role, is_not_interactive_element
    >>> get_implicit_role("input", {"type": ["checkbox"]})
    RoleDefinition('checkbox')
    >>> get_role("checkbox").is_property_required("aria-checked")
    True
    >>> is_not_interactive_element("h1")
    True

Custom Roles:
    >>> from ariaroles import RoleDefinition, create_registry_with_defaults
    >>> from ariaroles.config import RoleConfig, role_config_context
    >>>
    >>> abstract = RoleDefinition("doc-abstract", super_roles=("section",))
    >>> registry = create_registry_with_defaults().register(abstract).build()
    >>> with role_config_context(RoleConfig(registry=registry)):
    ...     get_role("doc-abstract")
    RoleDefinition('doc-abstract')

Installation:
    pip install ariaroles            # zero runtime dependencies
"""

from ariaroles.aria import AriaRoles
from ariaroles.attributes import Attributes
from ariaroles.config import (
    RoleConfig,
    get_role_config,
    reset_role_config,
    role_config_context,
    set_role_config,
)
from ariaroles.definition import Concept, RoleDefinition
from ariaroles.errors import AriaRolesError, UnknownPropertyError
from ariaroles.properties import (
    AriaProperty,
    PropertyOracle,
    is_valid_property_name,
    parse_property_name,
)
from ariaroles.registry import (
    RoleRegistry,
    RoleRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__version__ = "0.1.0"

# Shared facade; reads the active RoleConfig on each call
_DEFAULT_ARIA_ROLES = AriaRoles()


def get_role(name: str) -> RoleDefinition | None:
    """Get a role by its exact name.

    Args:
        name: Role name (e.g., "button"). Case-sensitive.

    Returns:
        The definition, or None if no such role is registered

    Example:
        >>> get_role("button").name
        'button'
        >>> get_role("made-up") is None
        True
    """
    return _DEFAULT_ARIA_ROLES.get_role(name)


def get_implicit_role(tag: str, attributes: Attributes) -> RoleDefinition | None:
    """Get the implicit role of an element.

    Args:
        tag: Element tag name (e.g., "img")
        attributes: Attribute name -> statically known values

    Returns:
        The role, or None when the element has no determinable implicit role

    Example:
        >>> get_implicit_role("img", {"alt": [""]})
        RoleDefinition('presentation')
    """
    return _DEFAULT_ARIA_ROLES.get_implicit_role(tag, attributes)


def is_role_interactive(name: str) -> bool:
    """Whether the named role is interactive. False for unknown roles."""
    return _DEFAULT_ARIA_ROLES.is_role_interactive(name)


def is_not_interactive_element(tag: str, attributes: Attributes | None = None) -> bool:
    """Whether the element is known to be non-interactive.

    False means undetermined: the element may be interactive.
    """
    return _DEFAULT_ARIA_ROLES.is_not_interactive_element(tag, attributes)


__all__ = [
    # Facade
    "AriaRoles",
    "get_implicit_role",
    "get_role",
    "is_not_interactive_element",
    "is_role_interactive",
    # Definitions
    "Attributes",
    "Concept",
    "RoleDefinition",
    # Registry
    "RoleRegistry",
    "RoleRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Properties
    "AriaProperty",
    "PropertyOracle",
    "is_valid_property_name",
    "parse_property_name",
    # Config
    "RoleConfig",
    "get_role_config",
    "reset_role_config",
    "role_config_context",
    "set_role_config",
    # Errors
    "AriaRolesError",
    "UnknownPropertyError",
    "__version__",
]
