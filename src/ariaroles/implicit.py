"""Implicit role inference.

Resolves the role an element has when no ``role`` attribute overrides it,
following the HTML-ARIA document conformance table
(https://www.w3.org/TR/html-aria/#docconformance).

Most tags map to a fixed role. A handful depend on attributes and are
resolved by dedicated functions:

- input: the ``type`` attribute (and ``list`` for text-like types)
- select: ``multiple`` and ``size``
- a, area: ``href``
- img: ``alt``
- section: an accessible name (``aria-label``, ``aria-labelledby``, ``title``)

The table is curated independently from role concepts and is the only
source used for inference.

Thread Safety:
Tables are module-level constants, resolvers are pure functions.
Safe to call from any thread.

Example:
    >>> infer_implicit_role("input", {"type": ["search"]}).name
    'searchbox'
    >>> infer_implicit_role("input", {"type": ["search"], "list": ["x"]}).name
    'combobox'
    >>> infer_implicit_role("section", {}) is None
    True

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeAlias

from ariaroles import catalog
from ariaroles.attributes import (
    Attributes,
    first_value,
    has_any_attribute,
    has_attribute,
    has_non_empty_value,
)
from ariaroles.definition import RoleDefinition
from ariaroles.utils.logger import get_logger

logger = get_logger(__name__)

RoleResolver: TypeAlias = Callable[[Attributes], RoleDefinition | None]

# Tags that map to a role regardless of attributes
IMPLICIT_ROLES: dict[str, RoleDefinition] = {
    "article": catalog.ARTICLE,
    "aside": catalog.COMPLEMENTARY,
    "blockquote": catalog.BLOCKQUOTE,
    "button": catalog.BUTTON,
    "caption": catalog.CAPTION,
    "code": catalog.CODE,
    "datalist": catalog.LISTBOX,
    "del": catalog.DELETION,
    "dfn": catalog.TERM,
    "dialog": catalog.DIALOG,
    "em": catalog.EMPHASIS,
    "figure": catalog.FIGURE,
    "form": catalog.FORM,
    "hr": catalog.SEPARATOR,
    "html": catalog.DOCUMENT,
    "ins": catalog.INSERTION,
    "main": catalog.MAIN,
    "math": catalog.MATH,
    "menu": catalog.LIST,
    "meter": catalog.METER,
    "nav": catalog.NAVIGATION,
    "ul": catalog.LIST,
    "ol": catalog.LIST,
    "li": catalog.LISTITEM,
    "optgroup": catalog.GROUP,
    "output": catalog.STATUS,
    "p": catalog.PARAGRAPH,
    "progress": catalog.PROGRESSBAR,
    "strong": catalog.STRONG,
    "sub": catalog.SUBSCRIPT,
    "sup": catalog.SUPERSCRIPT,
    "svg": catalog.GRAPHICS_DOCUMENT,
    "table": catalog.TABLE,
    "textarea": catalog.TEXTBOX,
    "tr": catalog.ROW,
    "time": catalog.TIME,
    "address": catalog.GROUP,
    "details": catalog.GROUP,
    "fieldset": catalog.GROUP,
    "h1": catalog.HEADING,
    "h2": catalog.HEADING,
    "h3": catalog.HEADING,
    "h4": catalog.HEADING,
    "h5": catalog.HEADING,
    "h6": catalog.HEADING,
    "tbody": catalog.ROWGROUP,
    "tfoot": catalog.ROWGROUP,
    "thead": catalog.ROWGROUP,
}

# Presentational containers without semantics of their own
GENERIC_ELEMENTS: frozenset[str] = frozenset(
    {"b", "bdi", "bdo", "body", "data", "div", "hgroup", "i", "q", "samp", "small", "span", "u"}
)

# header is a banner and footer a contentinfo only when scoped to <body>.
# Ancestors are not available here, so both resolve to generic.
_SECTIONING_CONTEXT_ELEMENTS: frozenset[str] = frozenset({"header", "footer"})

# input type -> role, for types that ignore other attributes
_INPUT_TYPE_ROLES: dict[str, RoleDefinition] = {
    "checkbox": catalog.CHECKBOX,
    "number": catalog.SPINBUTTON,
    "radio": catalog.RADIO,
    "range": catalog.SLIDER,
    "button": catalog.BUTTON,
    "image": catalog.BUTTON,
    "reset": catalog.BUTTON,
    "submit": catalog.BUTTON,
}

# Text-like input types that become a combobox when bound to a datalist
_INPUT_TEXT_TYPES: frozenset[str] = frozenset({"email", "tel", "url"})

# Signed 32-bit decimal, no whitespace
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_int32(value: str) -> int | None:
    """Parse a signed 32-bit decimal integer, None if malformed."""
    if not _INTEGER_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


def _input_role(attributes: Attributes) -> RoleDefinition | None:
    input_type = first_value(attributes, "type")
    if input_type is None:
        return None

    role = _INPUT_TYPE_ROLES.get(input_type)
    if role is not None:
        return role

    has_list = has_attribute(attributes, "list")
    if input_type == "search":
        return catalog.COMBOBOX if has_list else catalog.SEARCHBOX
    if input_type in _INPUT_TEXT_TYPES:
        return catalog.COMBOBOX if has_list else catalog.TEXTBOX
    # "text" and every unrecognized type
    return catalog.TEXTBOX


def _select_role(attributes: Attributes) -> RoleDefinition | None:
    """Resolve <select> to combobox or listbox.

    A missing ``size`` counts as 0. A malformed one makes the role
    undeterminable.
    """
    size = 0
    if has_attribute(attributes, "size"):
        raw = first_value(attributes, "size")
        if raw is not None:
            parsed = _parse_int32(raw)
            if parsed is None:
                logger.debug("Unparsable <select> size %r, no implicit role", raw)
                return None
            size = parsed

    if not has_attribute(attributes, "multiple") and size <= 1:
        return catalog.COMBOBOX
    return catalog.LISTBOX


def _link_role(attributes: Attributes) -> RoleDefinition | None:
    if has_attribute(attributes, "href"):
        return catalog.LINK
    return catalog.GENERIC


def _img_role(attributes: Attributes) -> RoleDefinition | None:
    """Resolve <img>: an empty ``alt`` marks the image as decorative."""
    if not has_attribute(attributes, "alt"):
        return catalog.IMG
    if has_non_empty_value(attributes, "alt"):
        return catalog.IMG
    return catalog.PRESENTATION


def _section_role(attributes: Attributes) -> RoleDefinition | None:
    """Resolve <section>: a region only when it has an accessible name."""
    if has_any_attribute(attributes, "aria-labelledby", "aria-label", "title"):
        return catalog.REGION
    return None


# Tags whose role depends on attributes
IMPLICIT_ROLE_RESOLVERS: dict[str, RoleResolver] = {
    "input": _input_role,
    "select": _select_role,
    "a": _link_role,
    "area": _link_role,
    "img": _img_role,
    "section": _section_role,
}


def infer_implicit_role(tag: str, attributes: Attributes) -> RoleDefinition | None:
    """Get the implicit role of an element.

    Args:
        tag: Element tag name (e.g., "input"). Matching is case-sensitive.
        attributes: Attribute name -> statically known values

    Returns:
        The implicit role, or None when the tag is unknown or its
        attributes leave the role undetermined
    """
    role = IMPLICIT_ROLES.get(tag)
    if role is not None:
        return role

    resolver = IMPLICIT_ROLE_RESOLVERS.get(tag)
    if resolver is not None:
        return resolver(attributes)

    if tag in GENERIC_ELEMENTS or tag in _SECTIONING_CONTEXT_ELEMENTS:
        return catalog.GENERIC
    return None


__all__ = [
    "GENERIC_ELEMENTS",
    "IMPLICIT_ROLES",
    "IMPLICIT_ROLE_RESOLVERS",
    "RoleResolver",
    "infer_implicit_role",
]
