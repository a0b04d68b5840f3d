"""ContextVar-based role configuration for ariaroles.

Lets a linter swap the property metadata source or the explicit-lookup
registry without threading them through every call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from ariaroles.config import RoleConfig, role_config_context

    with role_config_context(RoleConfig(property_oracle=MyOracle())):
        role.is_property_required("aria-checked")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ariaroles.properties import DEFAULT_PROPERTY_ORACLE

if TYPE_CHECKING:
    from ariaroles.properties import PropertyOracle
    from ariaroles.registry import RoleRegistry


@dataclass(frozen=True, slots=True)
class RoleConfig:
    """Immutable role configuration.

    Attributes:
        property_oracle: Source of ARIA property metadata. None uses the
            built-in AriaProperty catalog.
        registry: Registry for explicit role lookup. None uses the
            default registry.

    """

    property_oracle: PropertyOracle | None = None
    registry: RoleRegistry | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RoleConfig":
        """Create RoleConfig from dictionary.

        Only includes keys that are valid RoleConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RoleConfig.from_dict({"registry": None, "unknown": 1})
            >>> config.registry is None
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RoleConfig = RoleConfig()

_role_config: ContextVar[RoleConfig] = ContextVar(
    "role_config",
    default=_DEFAULT_CONFIG,
)


def get_role_config() -> RoleConfig:
    """Get current role configuration (thread-local)."""
    return _role_config.get()


def set_role_config(config: RoleConfig) -> None:
    """Set role configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _role_config.set(config)


def reset_role_config() -> None:
    """Reset to default configuration."""
    _role_config.set(_DEFAULT_CONFIG)


@contextmanager
def role_config_context(config: RoleConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with role_config_context(RoleConfig(registry=custom)):
        ...     get_role("doc-abstract")

    """
    previous = _role_config.get()
    _role_config.set(config)
    try:
        yield
    finally:
        _role_config.set(previous)


def get_property_oracle() -> PropertyOracle:
    """Property oracle of the active config, or the built-in one."""
    oracle = _role_config.get().property_oracle
    return DEFAULT_PROPERTY_ORACLE if oracle is None else oracle


def get_registry() -> RoleRegistry:
    """Registry of the active config, or the default registry."""
    registry = _role_config.get().registry
    if registry is None:
        from ariaroles.registry import create_default_registry

        return create_default_registry()
    return registry


__all__ = [
    "RoleConfig",
    "get_property_oracle",
    "get_registry",
    "get_role_config",
    "set_role_config",
    "reset_role_config",
    "role_config_context",
]
