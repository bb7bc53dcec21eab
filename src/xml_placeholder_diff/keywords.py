"""Placeholder keyword registry.

Maps each recognised keyword (the ``ignore`` in ``${xmlunit.ignore}``) to a
handler deciding the outcome from the test-side value.  The mapping is open:
evaluators accept any mapping of the same shape, so new keywords never
require changes to the classifier.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final, Literal, TypeAlias

from xml_placeholder_diff.comparison import ComparisonResult

__all__ = [
    "ABSENT",
    "IGNORE",
    "KEYWORDS",
    "Absent",
    "Candidate",
    "KeywordHandler",
]


class Absent(Enum):
    """Marker for a test side with no corresponding node or attribute."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT

Candidate: TypeAlias = str | Literal[Absent.ABSENT]
KeywordHandler: TypeAlias = Callable[[Candidate], ComparisonResult]

IGNORE: Final = "ignore"


def _ignore(test_value: Candidate) -> ComparisonResult:
    return ComparisonResult.EQUAL


KEYWORDS: Mapping[str, KeywordHandler] = MappingProxyType({IGNORE: _ignore})
