"""Placeholder pattern compiler.

Builds the regular expression recognising placeholders of the shape::

    <ws>* <open> <ws>* xmlunit.<keyword> <ws>* <close> <ws>*

The ``span`` group captures the whole delimited span including surrounding
whitespace, the ``keyword`` group the keyword.  The keyword group is
non-greedy, so it ends at the first closing delimiter.

Compiled patterns are immutable and memoised per delimiter pair: every
evaluator built with the same delimiters shares one ``PlaceholderPattern``.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass

from cachetools import LRUCache, cached

from xml_placeholder_diff.exceptions import PlaceholderConfigurationError

__all__ = [
    "DEFAULT_CLOSING_DELIMITER",
    "DEFAULT_OPENING_DELIMITER",
    "PLACEHOLDER_PREFIX",
    "Marker",
    "PlaceholderPattern",
    "compile_placeholder_pattern",
]

DEFAULT_OPENING_DELIMITER: str = re.escape("${")
DEFAULT_CLOSING_DELIMITER: str = re.escape("}")
PLACEHOLDER_PREFIX: str = re.escape("xmlunit.")


@dataclass(frozen=True, slots=True)
class Marker:
    """A placeholder found in a control value.

    Attributes:
        span:    The matched delimited span, surrounding whitespace included.
        keyword: The keyword between prefix and closing delimiter, trimmed.
    """

    span: str
    keyword: str


@dataclass(frozen=True, slots=True)
class PlaceholderPattern:
    """Compiled placeholder matcher for one pair of delimiters.

    Attributes:
        opening: Opening delimiter regex fragment.
        closing: Closing delimiter regex fragment.
        regex:   The compiled pattern.
    """

    opening: str
    closing: str
    regex: re.Pattern[str]

    @classmethod
    def from_literals(
        cls, opening: str | None = None, closing: str | None = None
    ) -> PlaceholderPattern:
        """Compile a pattern from literal delimiter text such as ``[[``/``]]``."""
        return compile_placeholder_pattern(
            re.escape(opening) if opening and opening.strip() else None,
            re.escape(closing) if closing and closing.strip() else None,
        )

    def find(self, text: str) -> Marker | None:
        """Search ``text`` for the first placeholder.

        Args:
            text: A control-side text or attribute value.

        Returns:
            The ``Marker`` of the first match, or None if there is none.
        """
        match = self.regex.search(text)
        if match is None:
            return None
        return Marker(span=match["span"], keyword=match["keyword"].strip())


def _is_blank(fragment: str | None) -> bool:
    return fragment is None or not fragment.strip()


@cached(cache=LRUCache(maxsize=64), lock=threading.Lock())
def compile_placeholder_pattern(
    opening: str | None = None,
    closing: str | None = None,
) -> PlaceholderPattern:
    """Compile the placeholder pattern for the given delimiter fragments.

    Args:
        opening: Opening delimiter as a regex fragment.  None or a blank
                 string selects ``DEFAULT_OPENING_DELIMITER``.
        closing: Closing delimiter as a regex fragment.  None or a blank
                 string selects ``DEFAULT_CLOSING_DELIMITER``.

    Returns:
        A shared, immutable ``PlaceholderPattern``.

    Raises:
        PlaceholderConfigurationError: If the fragments do not form a valid
            regular expression, or swallow the span or keyword group.
    """
    open_fragment = DEFAULT_OPENING_DELIMITER if _is_blank(opening) else str(opening)
    close_fragment = DEFAULT_CLOSING_DELIMITER if _is_blank(closing) else str(closing)

    # Named groups keep span/keyword addressable when a delimiter fragment
    # contains capturing groups of its own.
    source = (
        r"(?P<span>\s*" + open_fragment + r"\s*" + PLACEHOLDER_PREFIX
        + r"(?P<keyword>.+?)\s*" + close_fragment + r"\s*)"
    )
    try:
        regex = re.compile(source)
    except re.error as exc:
        msg = (
            f"Invalid placeholder delimiters "
            f"{open_fragment!r} / {close_fragment!r}: {exc}"
        )
        raise PlaceholderConfigurationError(
            msg, open_fragment, close_fragment
        ) from exc
    # A fragment can open a character class that swallows a group.
    missing = {"span", "keyword"} - regex.groupindex.keys()
    if missing:
        msg = (
            f"Invalid placeholder delimiters "
            f"{open_fragment!r} / {close_fragment!r}: "
            f"no {', '.join(sorted(missing))} group in {source!r}"
        )
        raise PlaceholderConfigurationError(msg, open_fragment, close_fragment)
    return PlaceholderPattern(
        opening=open_fragment, closing=close_fragment, regex=regex
    )
