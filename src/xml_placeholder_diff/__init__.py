"""XML placeholder diff - placeholder-aware evaluation of XML comparisons."""

from __future__ import annotations

from xml_placeholder_diff.api import chain, evaluate, evaluate_all, first
from xml_placeholder_diff.comparison import (
    Comparison,
    ComparisonResult,
    ComparisonType,
    Detail,
)
from xml_placeholder_diff.evaluator import PlaceholderDifferenceEvaluator
from xml_placeholder_diff.exceptions import (
    PlaceholderConfigurationError,
    PlaceholderError,
    PlaceholderUsageError,
)
from xml_placeholder_diff.keywords import ABSENT
from xml_placeholder_diff.nodes import QName
from xml_placeholder_diff.pattern import PlaceholderPattern, compile_placeholder_pattern
from xml_placeholder_diff.protocols import DifferenceEvaluator

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "Comparison",
    "ComparisonResult",
    "ComparisonType",
    "Detail",
    "DifferenceEvaluator",
    "PlaceholderConfigurationError",
    "PlaceholderDifferenceEvaluator",
    "PlaceholderError",
    "PlaceholderPattern",
    "PlaceholderUsageError",
    "QName",
    "chain",
    "compile_placeholder_pattern",
    "evaluate",
    "evaluate_all",
    "first",
]
