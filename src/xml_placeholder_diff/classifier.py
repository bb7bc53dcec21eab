"""Comparison classifier: decides where placeholder text comes from.

Each ``Rule`` pairs a predicate over a ``Comparison`` with the strategy that
extracts the control text (and test candidate) for it.  ``RULES`` is
evaluated top to bottom and the first rule whose predicate holds wins; a
comparison matching no rule is never subject to placeholders.

Strategies do not evaluate placeholders themselves.  They receive a
``TextEvaluation`` callback (normally
``PlaceholderDifferenceEvaluator.evaluate_text``) and return its result.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any, TypeAlias

from xml_placeholder_diff.comparison import (
    Comparison,
    ComparisonResult,
    ComparisonType,
    Detail,
)
from xml_placeholder_diff.keywords import ABSENT, Candidate
from xml_placeholder_diff.nodes import (
    attributes_of,
    first_child,
    is_text_like,
    node_value,
)

if TYPE_CHECKING:
    from xml.dom import Node

__all__ = ["RULES", "Rule", "Strategy", "TextEvaluation", "classify"]

TextEvaluation: TypeAlias = Callable[
    [Any, Candidate, ComparisonResult], ComparisonResult
]


class Strategy(StrEnum):
    """Name of each extraction strategy, in priority order."""

    TEXT_VALUE = auto()
    MISSING_TEXT_NODE = auto()
    TEXT_CDATA_MISMATCH = auto()
    ATTRIBUTE_VALUE = auto()
    MISSING_ATTRIBUTE = auto()
    ATTRIBUTE_COUNT = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    """One row of the classification table.

    Attributes:
        strategy: Name of the strategy.
        applies:  Predicate selecting the comparisons this rule handles.
        apply:    ``(comparison, outcome, evaluate_text) -> outcome``.
    """

    strategy: Strategy
    applies: Callable[[Comparison], bool]
    apply: Callable[
        [Comparison, ComparisonResult, TextEvaluation], ComparisonResult
    ]


def _candidate(value: object) -> Candidate:
    return ABSENT if value is None else str(value)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _is_text_value(comparison: Comparison) -> bool:
    return comparison.type == ComparisonType.TEXT_VALUE


def _control_has_one_text_child_and_test_has_none(comparison: Comparison) -> bool:
    control = comparison.control_details
    if comparison.type != ComparisonType.CHILD_NODELIST_LENGTH:
        return False
    if control.value != 1 or comparison.test_details.value != 0:
        return False
    return control.target is not None and is_text_like(first_child(control.target))


def _cant_find_control_text_child_in_test(comparison: Comparison) -> bool:
    return comparison.type == ComparisonType.CHILD_LOOKUP and is_text_like(
        comparison.control_details.target
    )


def _is_missing_text_node(comparison: Comparison) -> bool:
    return _control_has_one_text_child_and_test_has_none(
        comparison
    ) or _cant_find_control_text_child_in_test(comparison)


def _is_text_cdata_mismatch(comparison: Comparison) -> bool:
    control = comparison.control_details.target
    test = comparison.test_details.target
    if comparison.type != ComparisonType.NODE_TYPE:
        return False
    if control is None or test is None:
        return False
    return (
        is_text_like(control)
        and is_text_like(test)
        and control.nodeType != test.nodeType
    )


def _is_attribute_value(comparison: Comparison) -> bool:
    return comparison.type == ComparisonType.ATTR_VALUE


def _is_missing_attribute(comparison: Comparison) -> bool:
    control = comparison.control_details
    return (
        comparison.type == ComparisonType.ATTR_NAME_LOOKUP
        and control.target is not None
        and control.value is not None
    )


def _is_attribute_count(comparison: Comparison) -> bool:
    return comparison.type == ComparisonType.ELEMENT_NUM_ATTRIBUTES


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def _target(detail: Detail) -> Node:
    if detail.target is None:
        msg = "comparison detail has no target node"
        raise ValueError(msg)
    return detail.target


def _evaluate_detail_values(
    comparison: Comparison,
    outcome: ComparisonResult,
    evaluate_text: TextEvaluation,
) -> ComparisonResult:
    return evaluate_text(
        comparison.control_details.value,
        _candidate(comparison.test_details.value),
        outcome,
    )


def _evaluate_missing_text_node(
    comparison: Comparison,
    outcome: ComparisonResult,
    evaluate_text: TextEvaluation,
) -> ComparisonResult:
    target = _target(comparison.control_details)
    child = first_child(target)
    # child lookups name the text node itself; child counts name its parent
    if _control_has_one_text_child_and_test_has_none(comparison) and child is not None:
        target = child
    return evaluate_text(node_value(target), ABSENT, outcome)


def _evaluate_text_cdata_mismatch(
    comparison: Comparison,
    outcome: ComparisonResult,
    evaluate_text: TextEvaluation,
) -> ComparisonResult:
    return evaluate_text(
        node_value(_target(comparison.control_details)),
        _candidate(node_value(_target(comparison.test_details))),
        outcome,
    )


def _evaluate_missing_attribute(
    comparison: Comparison,
    outcome: ComparisonResult,
    evaluate_text: TextEvaluation,
) -> ComparisonResult:
    control = comparison.control_details
    value = attributes_of(_target(control)).get(control.value)
    if value is None:
        msg = f"control element has no attribute {control.value}"
        raise ValueError(msg)
    return evaluate_text(value, ABSENT, outcome)


def _evaluate_attribute_count(
    comparison: Comparison,
    outcome: ComparisonResult,
    evaluate_text: TextEvaluation,
) -> ComparisonResult:
    control_attrs = attributes_of(_target(comparison.control_details))
    test_attrs = attributes_of(_target(comparison.test_details))

    matched = 0
    for name, value in control_attrs.items():
        if name in test_attrs:
            matched += 1
            continue
        # The first control-only attribute that is not excused decides.
        if evaluate_text(value, ABSENT, outcome) != ComparisonResult.EQUAL:
            return outcome
    if matched != len(test_attrs):
        # test element carries attributes the control element lacks
        return outcome
    return ComparisonResult.EQUAL


RULES: tuple[Rule, ...] = (
    Rule(Strategy.TEXT_VALUE, _is_text_value, _evaluate_detail_values),
    Rule(
        Strategy.MISSING_TEXT_NODE,
        _is_missing_text_node,
        _evaluate_missing_text_node,
    ),
    Rule(
        Strategy.TEXT_CDATA_MISMATCH,
        _is_text_cdata_mismatch,
        _evaluate_text_cdata_mismatch,
    ),
    Rule(Strategy.ATTRIBUTE_VALUE, _is_attribute_value, _evaluate_detail_values),
    Rule(
        Strategy.MISSING_ATTRIBUTE,
        _is_missing_attribute,
        _evaluate_missing_attribute,
    ),
    Rule(Strategy.ATTRIBUTE_COUNT, _is_attribute_count, _evaluate_attribute_count),
)


def classify(comparison: Comparison) -> Rule | None:
    """Return the first rule in ``RULES`` that applies to ``comparison``.

    Args:
        comparison: A comparison emitted by the comparison engine.

    Returns:
        The matching ``Rule``, or None when placeholders never apply.
    """
    return next((rule for rule in RULES if rule.applies(comparison)), None)
