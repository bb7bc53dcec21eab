"""Comparison data model shared with the XML comparison engine.

A ``Comparison`` describes one structural aspect on which a control node and
a test node were compared.  The engine pairs every comparison with a
``ComparisonResult`` and hands both to the configured difference evaluators.
Nothing in this package mutates a comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from xml.dom import Node

__all__ = ["Comparison", "ComparisonResult", "ComparisonType", "Detail"]


class ComparisonResult(StrEnum):
    """Tri-state outcome of a single comparison.

    - EQUAL:     the two nodes agree on the compared aspect.
    - SIMILAR:   they differ in a way that is usually harmless.
    - DIFFERENT: they differ.
    """

    EQUAL = auto()
    SIMILAR = auto()
    DIFFERENT = auto()


class ComparisonType(StrEnum):
    """Structural aspect a comparison was performed on.

    Values are the lowercased member names; ``description`` gives the
    human-readable wording used in difference reports.
    """

    ATTR_VALUE_EXPLICITLY_SPECIFIED = auto()
    HAS_DOCTYPE_DECLARATION = auto()
    DOCTYPE_NAME = auto()
    DOCTYPE_PUBLIC_ID = auto()
    DOCTYPE_SYSTEM_ID = auto()
    SCHEMA_LOCATION = auto()
    NO_NAMESPACE_SCHEMA_LOCATION = auto()
    NODE_TYPE = auto()
    NAMESPACE_PREFIX = auto()
    NAMESPACE_URI = auto()
    TEXT_VALUE = auto()
    PROCESSING_INSTRUCTION_TARGET = auto()
    PROCESSING_INSTRUCTION_DATA = auto()
    ELEMENT_TAG_NAME = auto()
    ELEMENT_NUM_ATTRIBUTES = auto()
    ATTR_VALUE = auto()
    CHILD_NODELIST_LENGTH = auto()
    CHILD_NODELIST_SEQUENCE = auto()
    CHILD_LOOKUP = auto()
    ATTR_NAME_LOOKUP = auto()
    XML_VERSION = auto()
    XML_STANDALONE = auto()
    XML_ENCODING = auto()

    @property
    def description(self) -> str:
        return _DESCRIPTIONS.get(self, self.value.replace("_", " "))


_DESCRIPTIONS: dict[ComparisonType, str] = {
    ComparisonType.ATTR_VALUE_EXPLICITLY_SPECIFIED: (
        "attribute value explicitly specified"
    ),
    ComparisonType.HAS_DOCTYPE_DECLARATION: "has doctype declaration",
    ComparisonType.NODE_TYPE: "node type",
    ComparisonType.TEXT_VALUE: "text value",
    ComparisonType.ELEMENT_TAG_NAME: "element tag name",
    ComparisonType.ELEMENT_NUM_ATTRIBUTES: "number of attributes",
    ComparisonType.ATTR_VALUE: "attribute value",
    ComparisonType.CHILD_NODELIST_LENGTH: "child nodelist length",
    ComparisonType.CHILD_NODELIST_SEQUENCE: "child nodelist sequence",
    ComparisonType.CHILD_LOOKUP: "child",
    ComparisonType.ATTR_NAME_LOOKUP: "attribute name",
    ComparisonType.XML_VERSION: "xml version",
    ComparisonType.XML_STANDALONE: "xml standalone",
    ComparisonType.XML_ENCODING: "xml encoding",
}


@dataclass(frozen=True, slots=True)
class Detail:
    """One side (control or test) of a comparison.

    Attributes:
        target:       The DOM node that was compared, or None when the side
                      has no corresponding node.
        value:        The compared value.  Its shape depends on the
                      comparison type: a string for text and attribute
                      values, an int for counts, a ``QName`` for attribute
                      lookups, a DOM node type for NODE_TYPE.
        xpath:        XPath of ``target`` as reported by the engine.
        parent_xpath: XPath of the parent of ``target``.
    """

    target: Node | None
    value: Any
    xpath: str | None = None
    parent_xpath: str | None = None


@dataclass(frozen=True, slots=True)
class Comparison:
    """Immutable record of one comparison between control and test nodes."""

    type: ComparisonType
    control_details: Detail
    test_details: Detail
