"""Selectorkit model layer -- public type re-exports."""

from selectorkit.model.category import Category
from selectorkit.model.selector import COMBINATORS, Selector

__all__ = ["Category", "COMBINATORS", "Selector"]
