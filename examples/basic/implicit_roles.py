"""Resolve implicit roles for a few elements with zero config."""

from ariaroles import get_implicit_role, is_not_interactive_element

elements = [
    ("button", {}),
    ("input", {"type": ["search"]}),
    ("input", {"type": ["email"], "list": ["contacts"]}),
    ("select", {"multiple": [""], "size": ["4"]}),
    ("img", {"alt": [""]}),
    ("section", {}),
]

for tag, attributes in elements:
    role = get_implicit_role(tag, attributes)
    name = role.name if role else "(none)"
    interactive = "no" if is_not_interactive_element(tag, attributes) else "maybe"
    print(f"<{tag} {attributes}> -> {name}, interactive: {interactive}")
