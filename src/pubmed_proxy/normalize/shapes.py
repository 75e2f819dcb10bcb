"""
Helpers for the loosely-typed payload shapes PubMed returns.

Parsed efetch trees carry repeated elements as a list and single elements
as a bare value, so any field may be absent, a scalar, or a list.
"""

from typing import Any

from pubmed_proxy.constants import ATTR_KEY, TEXT_KEY


def to_list(value: Any) -> list[Any]:
    """Coerce an absent, single, or repeated value to a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def text_of(node: Any) -> str | None:
    """Text content of a tree node.

    A leaf without attributes is stored as its plain string; one with
    attributes is a dict holding the text under TEXT_KEY.
    """
    if isinstance(node, str):
        return node
    if isinstance(node, dict):
        return node.get(TEXT_KEY)
    return None


def attr_of(node: Any, name: str) -> str | None:
    """Attribute value of a tree node, or None."""
    if not isinstance(node, dict):
        return None
    attrs = node.get(ATTR_KEY)
    if not isinstance(attrs, dict):
        return None
    return attrs.get(name)


def dig(node: Any, *path: str) -> Any:
    """Walk nested dicts along `path`, returning None at the first gap."""
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node
