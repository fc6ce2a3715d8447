"""CLI commands: selectorkit check / combine -- parse selector strings."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.config import SelectorkitConfig
from selectorkit.errors import SelectorError, SelectorSyntaxError
from selectorkit.model.selector import Selector
from selectorkit.parser import parse_selector


def _parse_or_exit(source: str) -> Selector:
    try:
        return parse_selector(source)
    except SelectorSyntaxError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("selector")
def check(selector: str) -> None:
    """Parse SELECTOR and print its canonical rendering.

    Exits with code 1 if the selector is malformed, repeats element, id or
    pseudo-element, or lists parts out of order.
    """
    click.echo(_parse_or_exit(selector).stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
@click.option("--strict", is_flag=True, help="Reject combinators other than ' ', '+', '~', '>'")
def combine(left: str, combinator: str, right: str, strict: bool) -> None:
    """Combine two selectors: LEFT COMBINATOR RIGHT."""
    builder = SelectorBuilder(SelectorkitConfig(strict_combinators=strict))
    left_sel = _parse_or_exit(left)
    right_sel = _parse_or_exit(right)
    try:
        combined = builder.combine(left_sel, combinator, right_sel)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(combined.stringify())
