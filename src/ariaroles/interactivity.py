"""Interactivity classification for elements.

An element is reported non-interactive only when that can be shown from
its tag (and, for ``input``, its type). Everything else is undetermined and
treated as possibly interactive.

Only the roles in ROLES_WITH_CONCEPTS take part in concept matching. The
list is curated on its own and deliberately smaller than the catalog, so
a tag with an inferred implicit role is not claimed non-interactive unless
its concept mapping was reviewed.

Thread Safety:
All tables are immutable module-level constants. Safe to call from any thread.

"""

from __future__ import annotations

from ariaroles import catalog
from ariaroles.attributes import EMPTY_ATTRIBUTES, Attributes, has_value
from ariaroles.definition import RoleDefinition

# Elements with no concept information that are never interactive
ELEMENTS_WITHOUT_CONCEPTS: frozenset[str] = frozenset(
    {
        "body",
        "br",
        "details",
        "dir",
        "frame",
        "iframe",
        "label",
        "mark",
        "marquee",
        "menu",
        "meter",
        "optgroup",
        "pre",
        "progress",
        "ruby",
    }
)

# Roles consulted for concept matching, in evaluation order
ROLES_WITH_CONCEPTS: tuple[RoleDefinition, ...] = (
    catalog.CHECKBOX,
    catalog.RADIO,
    catalog.OPTION,
    catalog.COMBOBOX,
    catalog.HEADING,
    catalog.SEPARATOR,
    catalog.BUTTON,
    catalog.ARTICLE,
    catalog.DIALOG,
    catalog.ALERT,
    catalog.ALERTDIALOG,
    catalog.CELL,
    catalog.COLUMNHEADER,
    catalog.DEFINITION,
    catalog.FIGURE,
    catalog.FORM,
    catalog.GRID,
    catalog.GRIDCELL,
    catalog.GROUP,
    catalog.IMG,
    catalog.LINK,
    catalog.LIST,
    catalog.LISTBOX,
    catalog.LISTITEM,
    catalog.NAVIGATION,
    catalog.ROW,
    catalog.ROWGROUP,
    catalog.ROWHEADER,
    catalog.SEARCHBOX,
    catalog.TABLE,
    catalog.TERM,
    catalog.TEXTBOX,
    catalog.GENERIC,
    catalog.CAPTION,
    catalog.MAIN,
    catalog.TIME,
    catalog.PARAGRAPH,
    catalog.COMPLEMENTARY,
    catalog.BLOCKQUOTE,
    catalog.ASSOCIATIONLIST,
    catalog.STATUS,
    catalog.CONTENTINFO,
    catalog.REGION,
)


def is_not_interactive_element(tag: str, attributes: Attributes | None = None) -> bool:
    """Check whether an element is known to be non-interactive.

    Args:
        tag: Element tag name (e.g., "h1")
        attributes: Attribute name -> statically known values, if available

    Returns:
        True if the element is non-interactive, False if undetermined
    """
    # <header> is a banner only as a direct child of <body>, which cannot be
    # checked without the document tree.
    if tag == "header":
        return False

    if tag in ELEMENTS_WITHOUT_CONCEPTS:
        return True

    # type=hidden has no concept entry
    if tag == "input" and has_value(attributes or EMPTY_ATTRIBUTES, "type", "hidden"):
        return True

    for role in ROLES_WITH_CONCEPTS:
        if role.concepts_by_element_name(tag) and not role.is_interactive():
            return True

    return False


__all__ = [
    "ELEMENTS_WITHOUT_CONCEPTS",
    "ROLES_WITH_CONCEPTS",
    "is_not_interactive_element",
]
