"""Lark Transformer that converts a selector parse tree into a Selector."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from selectorkit.builder import SelectorBuilder
from selectorkit.errors import SelectorSyntaxError
from selectorkit.model.category import Category
from selectorkit.model.selector import Selector

log = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_Part = tuple[Category, str]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Replay parsed parts through the builder, compound by compound."""

    def __init__(self, builder: SelectorBuilder) -> None:
        super().__init__()
        self.builder = builder

    # ---- parts ----

    def type_selector(self, items: list[Token]) -> _Part:
        return (Category.ELEMENT, str(items[0]))

    def id_selector(self, items: list[Token]) -> _Part:
        return (Category.ID, str(items[0]))

    def class_selector(self, items: list[Token]) -> _Part:
        return (Category.CLASS, str(items[0]))

    def attribute_selector(self, items: list[Token]) -> _Part:
        return (Category.ATTRIBUTE, str(items[0]))

    def pseudo_class_selector(self, items: list[Token]) -> _Part:
        return (Category.PSEUDO_CLASS, str(items[0]))

    def pseudo_element_selector(self, items: list[Token]) -> _Part:
        return (Category.PSEUDO_ELEMENT, str(items[0]))

    # ---- structural ----

    def compound(self, items: list[_Part]) -> Selector:
        selector = Selector()
        for category, value in items:
            selector.add(category, value)
        return selector

    def start(self, items: list[object]) -> Selector:
        # Items alternate: compound, COMBINATOR, compound, ...
        compounds: list[Selector] = items[0::2]  # type: ignore[assignment]
        combinators = [str(token).strip() or " " for token in items[1::2]]
        result = compounds[-1]
        # Fold from the right: a + b ~ c is combine(a, "+", combine(b, "~", c)).
        for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
            result = self.builder.combine(left, combinator, result)
        return result


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_selector(source: str) -> Selector:
    """Parse selector text into a Selector.

    Out-of-order or repeated parts raise the same errors the builder raises
    (``OrderViolationError``, ``DuplicateSingletonError``); malformed text
    raises ``SelectorSyntaxError``.
    """
    text = source.strip()
    try:
        tree = _parser().parse(text)
    except UnexpectedInput as e:
        raise SelectorSyntaxError(str(e), line=e.line, column=e.column) from e
    log.debug("parsed selector %r", text)
    transformer = SelectorTransformer(SelectorBuilder())
    try:
        return transformer.transform(tree)
    except VisitError as e:
        raise e.orig_exc from e
