"""Tests for property metadata and requiredness checks.

Tests cover:
- Default oracle validation and parsing
- is_property_required for required, optional, unlisted and invalid names
- First-entry-wins for duplicate property entries
- Custom oracles supplied directly or through RoleConfig
"""

import pytest

from ariaroles import catalog
from ariaroles.config import RoleConfig, role_config_context
from ariaroles.definition import RoleDefinition
from ariaroles.errors import AriaRolesError, UnknownPropertyError
from ariaroles.properties import (
    DEFAULT_PROPERTY_ORACLE,
    AriaProperty,
    PropertyOracle,
    is_valid_property_name,
    parse_property_name,
)

# =============================================================================
# Default Oracle
# =============================================================================


class TestDefaultOracle:
    """Tests for the built-in AriaProperty catalog."""

    @pytest.mark.parametrize(
        "name",
        ["aria-checked", "aria-label", "aria-labelledby", "aria-valuenow", "aria-rowindextext"],
    )
    def test_valid_names(self, name: str) -> None:
        assert is_valid_property_name(name)
        assert parse_property_name(name).value == name

    @pytest.mark.parametrize(
        "name",
        ["", "checked", "aria-", "ARIA-CHECKED", "aria-checked ", "aria-made-up", "role"],
    )
    def test_invalid_names(self, name: str) -> None:
        assert not is_valid_property_name(name)
        with pytest.raises(UnknownPropertyError) as exc_info:
            parse_property_name(name)
        assert exc_info.value.name == name

    def test_error_hierarchy(self) -> None:
        with pytest.raises(ValueError):
            parse_property_name("aria-nope")
        with pytest.raises(AriaRolesError):
            parse_property_name("aria-nope")

    def test_parse_returns_enum(self) -> None:
        assert parse_property_name("aria-checked") is AriaProperty.CHECKED

    def test_default_oracle_satisfies_protocol(self) -> None:
        assert isinstance(DEFAULT_PROPERTY_ORACLE, PropertyOracle)

    def test_values_are_aria_attributes(self) -> None:
        for prop in AriaProperty:
            assert prop.value.startswith("aria-")


# =============================================================================
# Requiredness
# =============================================================================


class TestIsPropertyRequired:
    """Tests for RoleDefinition.is_property_required()."""

    @pytest.mark.parametrize(
        ("role", "name", "expected"),
        [
            (catalog.CHECKBOX, "aria-checked", True),
            (catalog.CHECKBOX, "aria-readonly", False),
            (catalog.COMBOBOX, "aria-controls", True),
            (catalog.COMBOBOX, "aria-expanded", True),
            (catalog.HEADING, "aria-level", True),
            (catalog.SLIDER, "aria-valuenow", True),
            (catalog.SCROLLBAR, "aria-orientation", True),
            (catalog.OPTION, "aria-selected", True),
            (catalog.GRIDCELL, "aria-selected", False),
            (catalog.BUTTON, "aria-expanded", False),
        ],
        ids=lambda value: getattr(value, "name", str(value)),
    )
    def test_listed_properties(self, role: RoleDefinition, name: str, expected: bool) -> None:
        assert role.is_property_required(name) is expected

    def test_unlisted_valid_property(self) -> None:
        assert catalog.CHECKBOX.is_property_required("aria-label") is False

    @pytest.mark.parametrize("name", ["aria-made-up", "", "checked", "ARIA-CHECKED"])
    def test_invalid_property_never_required(self, name: str) -> None:
        assert catalog.CHECKBOX.is_property_required(name) is False

    def test_role_without_properties(self) -> None:
        assert catalog.ARTICLE.is_property_required("aria-checked") is False

    def test_first_entry_wins(self) -> None:
        role = RoleDefinition(
            "custom",
            properties=(("aria-checked", False), ("aria-checked", True)),
            super_roles=("widget",),
        )
        assert role.is_property_required("aria-checked") is False
        assert role.required_properties() == ()

    def test_required_properties(self) -> None:
        assert catalog.CHECKBOX.required_properties() == ("aria-checked",)
        assert catalog.BUTTON.required_properties() == ()
        assert catalog.SLIDER.required_properties() == (
            "aria-valuemax",
            "aria-valuemin",
            "aria-valuenow",
        )


# =============================================================================
# Custom Oracles
# =============================================================================


class CheckedOnlyOracle:
    """Recognizes aria-checked and nothing else."""

    def is_valid_property_name(self, name: str) -> bool:
        return name == "aria-checked"

    def parse_property_name(self, name: str) -> AriaProperty:
        if name != "aria-checked":
            raise UnknownPropertyError(name)
        return AriaProperty.CHECKED


class LenientOracle:
    """Claims every name is valid, but can only parse known ones."""

    def is_valid_property_name(self, name: str) -> bool:
        return True

    def parse_property_name(self, name: str) -> AriaProperty:
        return parse_property_name(name)


class TestCustomOracle:
    """Oracles passed explicitly or through RoleConfig."""

    def test_explicit_oracle(self) -> None:
        oracle = CheckedOnlyOracle()
        assert isinstance(oracle, PropertyOracle)
        assert catalog.CHECKBOX.is_property_required("aria-checked", oracle) is True
        assert catalog.COMBOBOX.is_property_required("aria-controls", oracle) is False

    def test_oracle_from_config(self) -> None:
        with role_config_context(RoleConfig(property_oracle=CheckedOnlyOracle())):
            assert catalog.COMBOBOX.is_property_required("aria-controls") is False
        assert catalog.COMBOBOX.is_property_required("aria-controls") is True

    def test_unparsable_name_is_not_required(self) -> None:
        """A name that passes validation but fails to parse yields False."""
        assert catalog.CHECKBOX.is_property_required("aria-nope", LenientOracle()) is False
