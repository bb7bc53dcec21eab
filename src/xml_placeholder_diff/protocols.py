"""DifferenceEvaluator Protocol for the comparison engine's evaluator hook.

Any callable taking ``(comparison, outcome)`` and returning an outcome
satisfies the protocol; no inheritance is required.

Example::

    from xml_placeholder_diff.protocols import DifferenceEvaluator

    def similar_to_equal(comparison, outcome):
        return ComparisonResult.EQUAL if outcome == "similar" else outcome

    assert isinstance(similar_to_equal, DifferenceEvaluator)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from xml_placeholder_diff.comparison import Comparison, ComparisonResult


@runtime_checkable
class DifferenceEvaluator(Protocol):
    """Structural protocol for difference evaluators.

    An evaluator receives a comparison together with the outcome assigned so
    far and returns the (possibly changed) outcome.  It must not mutate the
    comparison.
    """

    def __call__(
        self, comparison: Comparison, outcome: ComparisonResult
    ) -> ComparisonResult: ...
