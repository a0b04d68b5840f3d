"""Tests for implicit role inference.

Tests cover:
- Fixed tag -> role table
- input type dispatch, including datalist-bound text inputs
- select size/multiple handling and malformed sizes
- a/area href, img alt, section accessible name
- header/footer under-approximation and unknown tags
"""

import logging

import pytest

from ariaroles import catalog
from ariaroles.implicit import GENERIC_ELEMENTS, IMPLICIT_ROLES, infer_implicit_role


def role_name(tag: str, attributes: dict[str, list[str]] | None = None) -> str | None:
    """Name of the implicit role, None when there is none."""
    role = infer_implicit_role(tag, attributes or {})
    return None if role is None else role.name


# =============================================================================
# Fixed Mappings
# =============================================================================


class TestFixedMappings:
    """Tags that resolve without looking at attributes."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("article", "article"),
            ("aside", "complementary"),
            ("blockquote", "blockquote"),
            ("button", "button"),
            ("caption", "caption"),
            ("code", "code"),
            ("datalist", "listbox"),
            ("del", "deletion"),
            ("dfn", "term"),
            ("dialog", "dialog"),
            ("em", "emphasis"),
            ("figure", "figure"),
            ("form", "form"),
            ("hr", "separator"),
            ("html", "document"),
            ("ins", "insertion"),
            ("main", "main"),
            ("math", "math"),
            ("menu", "list"),
            ("meter", "meter"),
            ("nav", "navigation"),
            ("ul", "list"),
            ("ol", "list"),
            ("li", "listitem"),
            ("optgroup", "group"),
            ("output", "status"),
            ("p", "paragraph"),
            ("progress", "progressbar"),
            ("strong", "strong"),
            ("sub", "subscript"),
            ("sup", "superscript"),
            ("svg", "graphics-document"),
            ("table", "table"),
            ("textarea", "textbox"),
            ("tr", "row"),
            ("time", "time"),
            ("address", "group"),
            ("details", "group"),
            ("fieldset", "group"),
            ("h1", "heading"),
            ("h6", "heading"),
            ("tbody", "rowgroup"),
            ("tfoot", "rowgroup"),
            ("thead", "rowgroup"),
        ],
    )
    def test_fixed_role(self, tag: str, expected: str) -> None:
        assert role_name(tag) == expected

    def test_fixed_role_ignores_attributes(self) -> None:
        assert role_name("button", {"type": ["submit"], "disabled": [""]}) == "button"

    @pytest.mark.parametrize("tag", sorted(GENERIC_ELEMENTS))
    def test_generic_elements(self, tag: str) -> None:
        assert role_name(tag) == "generic"

    @pytest.mark.parametrize("tag", ["header", "footer"])
    def test_header_footer_are_generic(self, tag: str) -> None:
        """Landmark roles need ancestor context, so these stay generic."""
        assert role_name(tag) == "generic"

    @pytest.mark.parametrize("tag", ["custom-element", "H1", "Button", "", "label", "pre", "br"])
    def test_unknown_tags(self, tag: str) -> None:
        assert infer_implicit_role(tag, {}) is None

    def test_table_values_are_catalog_roles(self) -> None:
        for tag, role in IMPLICIT_ROLES.items():
            assert role in catalog.ALL_ROLES, tag


# =============================================================================
# input
# =============================================================================


class TestInputRole:
    """Dispatch on the first value of ``type``."""

    @pytest.mark.parametrize(
        ("input_type", "expected"),
        [
            ("checkbox", "checkbox"),
            ("number", "spinbutton"),
            ("radio", "radio"),
            ("range", "slider"),
            ("button", "button"),
            ("image", "button"),
            ("reset", "button"),
            ("submit", "button"),
            ("search", "searchbox"),
            ("email", "textbox"),
            ("tel", "textbox"),
            ("url", "textbox"),
            ("text", "textbox"),
            ("password", "textbox"),
            ("date", "textbox"),
            ("", "textbox"),
            ("CHECKBOX", "textbox"),
        ],
    )
    def test_type_dispatch(self, input_type: str, expected: str) -> None:
        assert role_name("input", {"type": [input_type]}) == expected

    @pytest.mark.parametrize(
        ("input_type", "expected"),
        [
            ("search", "combobox"),
            ("email", "combobox"),
            ("tel", "combobox"),
            ("url", "combobox"),
            ("text", "textbox"),
            ("checkbox", "checkbox"),
        ],
    )
    def test_list_attribute(self, input_type: str, expected: str) -> None:
        assert role_name("input", {"type": [input_type], "list": ["suggestions"]}) == expected

    def test_list_presence_is_enough(self) -> None:
        assert role_name("input", {"type": ["search"], "list": []}) == "combobox"

    def test_only_first_type_value_counts(self) -> None:
        assert role_name("input", {"type": ["radio", "checkbox"]}) == "radio"

    def test_missing_type(self) -> None:
        assert infer_implicit_role("input", {}) is None
        assert infer_implicit_role("input", {"name": ["q"]}) is None

    def test_type_without_values(self) -> None:
        assert infer_implicit_role("input", {"type": []}) is None


# =============================================================================
# select
# =============================================================================


class TestSelectRole:
    """combobox vs. listbox from ``multiple`` and ``size``."""

    def test_plain_select(self) -> None:
        assert role_name("select") == "combobox"

    def test_multiple_with_size(self) -> None:
        attributes = {"name": ["animals"], "multiple": [""], "size": ["4"]}
        assert role_name("select", attributes) == "listbox"

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            ("0", "combobox"),
            ("1", "combobox"),
            ("-3", "combobox"),
            ("+1", "combobox"),
            ("2", "listbox"),
            ("+2", "listbox"),
            ("2147483647", "listbox"),
        ],
    )
    def test_size(self, size: str, expected: str) -> None:
        assert role_name("select", {"size": [size]}) == expected

    def test_multiple_without_size(self) -> None:
        assert role_name("select", {"multiple": [""]}) == "listbox"

    def test_size_without_values_defaults_to_zero(self) -> None:
        assert role_name("select", {"size": []}) == "combobox"

    @pytest.mark.parametrize("size", ["", "abc", "1.5", " 4", "4 ", "0x10", "2147483648", "1_0"])
    def test_malformed_size(self, size: str) -> None:
        """A malformed size leaves the role undetermined."""
        assert infer_implicit_role("select", {"size": [size]}) is None
        assert infer_implicit_role("select", {"size": [size], "multiple": [""]}) is None

    def test_malformed_size_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="ariaroles"):
            infer_implicit_role("select", {"size": ["many"]})
        assert "many" in caplog.text


# =============================================================================
# a / area / img / section
# =============================================================================


class TestAttributeDependentRoles:
    """Roles keyed on attribute presence."""

    @pytest.mark.parametrize("tag", ["a", "area"])
    def test_link_with_href(self, tag: str) -> None:
        assert role_name(tag, {"href": ["/home"]}) == "link"
        assert role_name(tag, {"href": [""]}) == "link"

    @pytest.mark.parametrize("tag", ["a", "area"])
    def test_link_without_href(self, tag: str) -> None:
        assert role_name(tag) == "generic"

    @pytest.mark.parametrize(
        ("attributes", "expected"),
        [
            ({}, "img"),
            ({"alt": ["A cat"]}, "img"),
            ({"alt": ["", "fallback"]}, "img"),
            ({"alt": [""]}, "presentation"),
            ({"alt": ["", ""]}, "presentation"),
            ({"alt": []}, "presentation"),
        ],
    )
    def test_img_alt(self, attributes: dict[str, list[str]], expected: str) -> None:
        assert role_name("img", attributes) == expected

    @pytest.mark.parametrize("name_attribute", ["aria-labelledby", "aria-label", "title"])
    def test_named_section_is_region(self, name_attribute: str) -> None:
        assert role_name("section", {name_attribute: ["Intro"]}) == "region"

    def test_unnamed_section_has_no_role(self) -> None:
        assert infer_implicit_role("section", {}) is None
        assert infer_implicit_role("section", {"id": ["intro"]}) is None
