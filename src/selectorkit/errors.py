"""Error hierarchy for selector building and parsing."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.category import Category

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selectorkit errors."""


class DuplicateSingletonError(SelectorError):
    """Element, id or pseudo-element set twice on the same selector."""

    def __init__(self, category: Category) -> None:
        super().__init__(DUPLICATE_MESSAGE)
        self.category = category


class OrderViolationError(SelectorError):
    """A part was added after a part of a later category."""

    def __init__(self, category: Category, reached: Category) -> None:
        super().__init__(ORDER_MESSAGE)
        self.category = category
        self.reached = reached


class CombinatorError(SelectorError):
    """Unknown combinator token (strict mode only)."""

    def __init__(self, combinator: str) -> None:
        super().__init__(f"Unknown combinator: {combinator!r}")
        self.combinator = combinator


class SelectorSyntaxError(SelectorError):
    """Raised when selector source text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
