"""Read-only accessors over W3C DOM nodes.

The comparison engine owns the control and test trees; this module only
queries them.  Any ``xml.dom`` implementation works (``xml.dom.minidom`` is
what the test-suite uses).
"""

from __future__ import annotations

from typing import NamedTuple
from xml.dom import Node

__all__ = [
    "TEXT_LIKE_NODE_TYPES",
    "QName",
    "attributes_of",
    "first_child",
    "is_text_like",
    "node_value",
]

TEXT_LIKE_NODE_TYPES: frozenset[int] = frozenset(
    {Node.TEXT_NODE, Node.CDATA_SECTION_NODE}
)


class QName(NamedTuple):
    """Namespace-qualified attribute name.

    Attributes:
        namespace_uri: Namespace URI, or None for attributes in no namespace.
        local_name:    Local part of the name.
    """

    namespace_uri: str | None
    local_name: str

    def __str__(self) -> str:
        # Clark notation
        if self.namespace_uri:
            return f"{{{self.namespace_uri}}}{self.local_name}"
        return self.local_name


def is_text_like(node: Node | None) -> bool:
    """Return True for text and CDATA section nodes."""
    return node is not None and node.nodeType in TEXT_LIKE_NODE_TYPES


def first_child(node: Node) -> Node | None:
    return node.firstChild


def node_value(node: Node) -> str | None:
    """Return the raw DOM ``nodeValue`` (character data for text-like nodes)."""
    return node.nodeValue


def attributes_of(node: Node) -> dict[QName, str]:
    """Return the attributes of an element keyed by ``QName``.

    Attributes without an explicit local name (elements built through
    non-namespace-aware DOM calls) are keyed by their full name.

    Args:
        node: An element node.  Nodes without attributes yield an empty dict.

    Returns:
        A new dict; mutating it does not affect the DOM.
    """
    attrs = node.attributes
    if attrs is None:
        return {}
    result: dict[QName, str] = {}
    for i in range(attrs.length):
        attr = attrs.item(i)
        name = QName(attr.namespaceURI or None, attr.localName or attr.name)
        result[name] = attr.value
    return result
