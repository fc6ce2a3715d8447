"""Selector model: a chainable CSS selector under construction.

A selector is either simple (element, id, classes, attributes, pseudo-classes
and a pseudo-element) or combined (two rendered selectors joined by a
combinator).  Parts are formatted when added and validated against the fixed
category order::

    element#id.class[attr]:pseudo-class::pseudo-element
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from selectorkit.errors import (
    DuplicateSingletonError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.model.category import Category

log = logging.getLogger(__name__)

# Descendant, adjacent sibling, general sibling, child.
COMBINATORS = (" ", "+", "~", ">")


def _empty_fragments() -> dict[Category, list[str]]:
    return {category: [] for category in Category}


@dataclass
class _Simple:
    """Formatted fragments per category plus the highest category reached."""

    fragments: dict[Category, list[str]] = field(default_factory=_empty_fragments)
    reached: Category | None = None

    def add(self, category: Category, value: str) -> None:
        if category.singleton and self.fragments[category]:
            raise DuplicateSingletonError(category)
        if self.reached is not None and category < self.reached:
            raise OrderViolationError(category, self.reached)
        self.fragments[category].append(category.format(value))
        self.reached = category

    def render(self) -> str:
        return "".join("".join(self.fragments[category]) for category in Category)


@dataclass(frozen=True)
class _Combined:
    left: str
    combinator: str
    right: str

    def render(self) -> str:
        # The combinator is always padded, so " " yields three spaces.
        return f"{self.left} {self.combinator} {self.right}"


@dataclass(frozen=True)
class _Failed:
    """A build step raised; the selector must not be used any further."""

    error: SelectorError

    def render(self) -> str:
        raise SelectorError("Cannot render a selector whose build failed") from self.error


class Selector:
    """Fluent CSS selector builder.

    Every builder method returns the same instance so calls can be chained::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    Raises ``DuplicateSingletonError`` when element, id or pseudo-element is
    set twice and ``OrderViolationError`` when a part is added after a part
    of a later category.  Either error ends the build: any later call,
    including ``stringify``, raises ``SelectorError``.
    """

    def __init__(self) -> None:
        self._variant: _Simple | _Combined | _Failed = _Simple()

    # ---- builder operations ----

    def element(self, value: str) -> Selector:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> Selector:
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: str) -> Selector:
        """Add a part by category; used when replaying parsed selectors."""
        return self._add(category, value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Turn this (empty) selector into ``left <combinator> right``.

        Operands are rendered immediately; mutating them afterwards does not
        affect the combination.
        """
        if isinstance(self._variant, _Combined):
            raise SelectorError("Cannot combine an already combined selector")
        simple = self._simple()
        if simple.reached is not None:
            raise SelectorError("Cannot combine into a selector that already has parts")
        self._variant = _Combined(left.stringify(), combinator, right.stringify())
        log.debug("combined selector: %r", self._variant)
        return self

    # ---- rendering ----

    def stringify(self) -> str:
        return self._variant.render()

    @property
    def is_combined(self) -> bool:
        return isinstance(self._variant, _Combined)

    @property
    def categories(self) -> tuple[Category, ...]:
        """Populated categories in render order (empty when combined or failed)."""
        if not isinstance(self._variant, _Simple):
            return ()
        return tuple(c for c in Category if self._variant.fragments[c])

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        if isinstance(self._variant, _Failed):
            return "Selector(<failed>)"
        return f"Selector({self.stringify()!r})"

    # ---- internals ----

    def _simple(self) -> _Simple:
        if isinstance(self._variant, _Combined):
            raise SelectorError("Cannot add parts to a combined selector")
        if isinstance(self._variant, _Failed):
            raise SelectorError("Cannot use a selector after a failed build step")
        return self._variant

    def _add(self, category: Category, value: str) -> Selector:
        simple = self._simple()
        try:
            simple.add(category, value)
        except SelectorError as exc:
            self._variant = _Failed(exc)
            raise
        log.debug("added %s part %r", category.label, value)
        return self
