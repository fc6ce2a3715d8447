"""Selectorkit: fluent CSS selector builder with ordering rules."""

__version__ = "0.1.0"

from selectorkit.builder import SelectorBuilder, css_selector_builder  # noqa: E402
from selectorkit.config import SelectorkitConfig  # noqa: E402
from selectorkit.errors import (  # noqa: E402
    CombinatorError,
    DuplicateSingletonError,
    OrderViolationError,
    SelectorError,
    SelectorSyntaxError,
)
from selectorkit.model import COMBINATORS, Category, Selector  # noqa: E402
from selectorkit.objects import Rectangle, from_json, get_json  # noqa: E402
from selectorkit.parser import parse_selector  # noqa: E402
from selectorkit.paths import get_common_directory_path  # noqa: E402

__all__ = [
    "__version__",
    # builder
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "Category",
    "COMBINATORS",
    "SelectorkitConfig",
    # errors
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    "CombinatorError",
    "SelectorSyntaxError",
    # parsing
    "parse_selector",
    # helpers
    "Rectangle",
    "get_json",
    "from_json",
    "get_common_directory_path",
]
