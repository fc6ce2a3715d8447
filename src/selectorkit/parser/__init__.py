from selectorkit.errors import SelectorSyntaxError
from selectorkit.parser.transformer import parse_selector

__all__ = ["SelectorSyntaxError", "parse_selector"]
