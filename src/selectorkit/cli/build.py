"""CLI command: selectorkit build -- assemble a selector from parts."""

from __future__ import annotations

import sys

import click

from selectorkit.model.selector import Selector


@click.command()
@click.option("--element", "-e", default=None, help="Element (tag) name")
@click.option("--id", "id_", default=None, help="Id, without '#'")
@click.option("--class", "-c", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "-a", "attrs", multiple=True, help="Attribute text without brackets (repeatable)")
@click.option("--pseudo-class", "-p", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a simple selector and print it.

    Parts are always emitted in CSS order regardless of option order.
    """
    selector = Selector()
    if element is not None:
        selector.element(element)
    if id_ is not None:
        selector.id(id_)
    for value in classes:
        selector.class_(value)
    for value in attrs:
        selector.attr(value)
    for value in pseudo_classes:
        selector.pseudo_class(value)
    if pseudo_element is not None:
        selector.pseudo_element(pseudo_element)

    if not selector.categories:
        click.echo("Error: no selector parts given", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
