"""Public API functions for xml-placeholder-diff.

``evaluate`` and ``evaluate_all`` apply placeholder evaluation to comparisons
produced by the comparison engine.  ``chain`` and ``first`` combine several
difference evaluators into one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from xml_placeholder_diff.comparison import Comparison, ComparisonResult
from xml_placeholder_diff.evaluator import PlaceholderDifferenceEvaluator
from xml_placeholder_diff.protocols import DifferenceEvaluator

__all__ = ["chain", "evaluate", "evaluate_all", "first"]


def evaluate(
    comparison: Comparison,
    outcome: ComparisonResult,
    opening_delimiter: str | None = None,
    closing_delimiter: str | None = None,
    *,
    literal: bool = False,
) -> ComparisonResult:
    """Evaluate one comparison with a fresh ``PlaceholderDifferenceEvaluator``.

    Args:
        comparison:        The comparison to evaluate.
        outcome:           Its current outcome.
        opening_delimiter: Opening delimiter regex fragment (default ``${``).
        closing_delimiter: Closing delimiter regex fragment (default ``}``).
        literal:           Treat the delimiters as literal text.

    Returns:
        The outcome after placeholder evaluation.
    """
    evaluator = PlaceholderDifferenceEvaluator(
        opening_delimiter, closing_delimiter, literal=literal
    )
    return evaluator(comparison, outcome)


def evaluate_all(
    pairs: Iterable[tuple[Comparison, ComparisonResult]],
    evaluator: DifferenceEvaluator | None = None,
) -> Iterator[ComparisonResult]:
    """Lazily evaluate the engine's ``(comparison, outcome)`` feed.

    Args:
        pairs:     Comparisons with their raw outcomes, in document order.
        evaluator: Evaluator to apply.  Defaults to a
                   ``PlaceholderDifferenceEvaluator`` with default delimiters.

    Yields:
        One outcome per input pair, in input order.
    """
    if evaluator is None:
        evaluator = PlaceholderDifferenceEvaluator()
    for comparison, outcome in pairs:
        yield evaluator(comparison, outcome)


def chain(*evaluators: DifferenceEvaluator) -> DifferenceEvaluator:
    """Combine evaluators so that each one sees the previous one's outcome."""

    def _chained(
        comparison: Comparison, outcome: ComparisonResult
    ) -> ComparisonResult:
        for evaluator in evaluators:
            outcome = evaluator(comparison, outcome)
        return outcome

    return _chained


def first(*evaluators: DifferenceEvaluator) -> DifferenceEvaluator:
    """Combine evaluators so that the first one changing the outcome wins.

    Later evaluators are not consulted once an outcome has changed.  If none
    changes it, the original outcome is returned.
    """

    def _first(comparison: Comparison, outcome: ComparisonResult) -> ComparisonResult:
        for evaluator in evaluators:
            evaluated = evaluator(comparison, outcome)
            if evaluated != outcome:
                return evaluated
        return outcome

    return _first
