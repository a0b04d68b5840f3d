"""Lint rule sketch: report required ARIA properties an element omits."""

from ariaroles import get_implicit_role, get_role


def missing_properties(tag: str, attributes: dict[str, list[str]]) -> list[str]:
    """Required properties of the element's role that are not set."""
    explicit = attributes.get("role")
    role = get_role(explicit[0]) if explicit else get_implicit_role(tag, attributes)
    if role is None:
        return []
    return [name for name in role.required_properties() if name not in attributes]


cases = [
    ("div", {"role": ["checkbox"]}),
    ("div", {"role": ["checkbox"], "aria-checked": ["false"]}),
    ("div", {"role": ["slider"], "aria-valuenow": ["3"]}),
    ("div", {"role": ["heading"], "aria-level": ["2"]}),
    ("input", {"type": ["range"]}),
]

for tag, attributes in cases:
    print(tag, attributes, "->", missing_properties(tag, attributes) or "ok")
