"""Selector part categories in their fixed output order."""

from __future__ import annotations

from enum import IntEnum


class Category(IntEnum):
    """Kinds of selector parts, ordered as they must appear when rendered."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def singleton(self) -> bool:
        """True if the category may occur at most once per selector."""
        return self in _SINGLETONS

    def format(self, value: str) -> str:
        """Wrap *value* in the punctuation this category renders with."""
        prefix, suffix = _WRAPPERS[self]
        return f"{prefix}{value}{suffix}"


_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_WRAPPERS: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}
