"""Placeholder exceptions.

Both errors signal a problem with how placeholders were configured or
written in the control document, never a genuine mismatch between the
control and test documents.
"""

from __future__ import annotations

__all__ = [
    "PlaceholderConfigurationError",
    "PlaceholderError",
    "PlaceholderUsageError",
]


class PlaceholderError(Exception):
    """Base class for all placeholder errors."""


class PlaceholderConfigurationError(PlaceholderError, ValueError):
    """The delimiter fragments do not compile into a valid pattern.

    Attributes:
        opening: Opening delimiter fragment that was used.
        closing: Closing delimiter fragment that was used.
    """

    def __init__(self, message: str, opening: str, closing: str) -> None:
        self.opening = opening
        self.closing = closing
        super().__init__(message)


class PlaceholderUsageError(PlaceholderError):
    """A recognised placeholder shares its value with other text.

    Attributes:
        control_text: The offending control value.
        keyword:      The placeholder keyword that was found in it.
    """

    def __init__(self, control_text: str, keyword: str) -> None:
        self.control_text = control_text
        self.keyword = keyword
        super().__init__(
            f"The placeholder must exclusively occupy the text node "
            f"(keyword {keyword!r} in {control_text!r})"
        )
