"""PlaceholderDifferenceEvaluator: relaxes differences excused by placeholders.

Plug an instance into the comparison engine as a difference evaluator.  For
every ``(comparison, outcome)`` pair it either returns ``outcome`` unchanged
or, when the control value is a recognised placeholder such as
``${xmlunit.ignore}``, the outcome the placeholder dictates.  Placeholders
only ever relax a reported difference: an EQUAL outcome is returned as-is.

Example::

    from xml_placeholder_diff import PlaceholderDifferenceEvaluator

    evaluator = PlaceholderDifferenceEvaluator()
    outcome = evaluator(comparison, ComparisonResult.DIFFERENT)

Custom delimiters are regular-expression fragments, or literal text with
``literal=True``::

    PlaceholderDifferenceEvaluator(r"\\[\\[", r"\\]\\]")   # [[xmlunit.ignore]]
    PlaceholderDifferenceEvaluator("[[", "]]", literal=True)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from xml_placeholder_diff.classifier import classify
from xml_placeholder_diff.comparison import Comparison, ComparisonResult
from xml_placeholder_diff.exceptions import PlaceholderUsageError
from xml_placeholder_diff.keywords import ABSENT, KEYWORDS, Candidate, KeywordHandler
from xml_placeholder_diff.pattern import PlaceholderPattern, compile_placeholder_pattern

__all__ = ["PlaceholderDifferenceEvaluator"]

logger = logging.getLogger(__name__)


class PlaceholderDifferenceEvaluator:
    """Difference evaluator honouring placeholders in the control document.

    Instances hold only immutable configuration (the compiled pattern and
    the keyword mapping) and can be shared between threads.
    """

    def __init__(
        self,
        opening_delimiter: str | None = None,
        closing_delimiter: str | None = None,
        *,
        literal: bool = False,
        keywords: Mapping[str, KeywordHandler] | None = None,
    ) -> None:
        """Initialise the evaluator.

        Args:
            opening_delimiter: Opening delimiter regex fragment.  None, empty
                or whitespace-only selects the default (literal ``${``).
            closing_delimiter: Closing delimiter regex fragment.  None, empty
                or whitespace-only selects the default (literal ``}``).
            literal: Treat both delimiters as literal text, so ``"[["`` and
                ``"]]"`` need no escaping.
            keywords: Keyword-to-handler mapping.  Defaults to ``KEYWORDS``,
                which only knows ``ignore``.

        Raises:
            PlaceholderConfigurationError: If the delimiters do not form a
                usable placeholder pattern.
        """
        compile_pattern = (
            PlaceholderPattern.from_literals
            if literal
            else compile_placeholder_pattern
        )
        self._pattern = compile_pattern(opening_delimiter, closing_delimiter)
        self._keywords: Mapping[str, KeywordHandler] = (
            KEYWORDS if keywords is None else MappingProxyType(dict(keywords))
        )

    @property
    def pattern(self) -> PlaceholderPattern:
        """The compiled placeholder pattern shared by evaluators."""
        return self._pattern

    @property
    def keywords(self) -> Mapping[str, KeywordHandler]:
        """Read-only keyword-to-handler mapping."""
        return self._keywords

    def __call__(
        self, comparison: Comparison, outcome: ComparisonResult
    ) -> ComparisonResult:
        return self.evaluate(comparison, outcome)

    def evaluate(
        self, comparison: Comparison, outcome: ComparisonResult
    ) -> ComparisonResult:
        """Return the outcome for ``comparison`` taking placeholders into account.

        Args:
            comparison: The comparison emitted by the engine.
            outcome:    The outcome the engine (or a previous evaluator)
                        assigned to it.

        Returns:
            ``outcome`` unchanged, or the outcome dictated by a placeholder.

        Raises:
            PlaceholderUsageError: If a recognised placeholder does not
                occupy the whole control value.
        """
        if outcome == ComparisonResult.EQUAL:
            return outcome

        rule = classify(comparison)
        if rule is None:
            return outcome

        logger.debug("%s comparison handled as %s", comparison.type, rule.strategy)
        return rule.apply(comparison, outcome, self.evaluate_text)

    def evaluate_text(
        self,
        control_text: str,
        test_value: Candidate = ABSENT,
        outcome: ComparisonResult = ComparisonResult.DIFFERENT,
    ) -> ComparisonResult:
        """Evaluate a single control value against its test counterpart.

        Only ``control_text`` is searched for a placeholder.

        Args:
            control_text: Control-side text or attribute value.  Must not be
                None.
            test_value:   Test-side value, or ``ABSENT`` when the test
                document has no corresponding node or attribute.
            outcome:      Outcome to return when no placeholder applies.

        Returns:
            The placeholder's verdict, or ``outcome``.

        Raises:
            PlaceholderUsageError: If a recognised placeholder is mixed with
                other text.
        """
        marker = self._pattern.find(control_text)
        if marker is None:
            return outcome

        handler = self._keywords.get(marker.keyword)
        if handler is None:
            logger.debug("Ignoring unknown placeholder keyword %r", marker.keyword)
            return outcome

        if marker.span.strip() != control_text.strip():
            raise PlaceholderUsageError(control_text, marker.keyword)

        result = handler(test_value)
        logger.debug(
            "Placeholder %r turned %s into %s", marker.keyword, outcome, result
        )
        return result
