"""Entry facade: each operation starts a fresh Selector."""

from __future__ import annotations

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import CombinatorError
from selectorkit.model.selector import COMBINATORS, Selector


class SelectorBuilder:
    """Stateless facade over :class:`Selector`.

    Usage::

        builder = SelectorBuilder()
        builder.id("main").class_("container").class_("editable").stringify()
        # -> '#main.container.editable'
    """

    def __init__(self, config: SelectorkitConfig | None = None) -> None:
        self.config = config or SelectorkitConfig()

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        if self.config.strict_combinators and combinator not in COMBINATORS:
            raise CombinatorError(combinator)
        return Selector().combine(left, combinator, right)


css_selector_builder = SelectorBuilder()
