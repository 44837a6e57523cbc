"""objectkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys

import click

from objectkit import __version__
from objectkit.config import ObjectkitConfig
from objectkit.errors import SelectorError


@click.group()
@click.version_option(version=__version__, prog_name="objectkit")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objectkit - CSS selector builder and small object helpers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.option("--element", default=None, help="Element (type) selector")
@click.option("--id", "id_", default=None, help="Id selector")
@click.option("--class", "classes", multiple=True, help="Class selector (repeatable)")
@click.option("--attr", default=None, help="Attribute selector, without brackets")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attr: str | None,
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector from its fragments and print it."""
    from objectkit.selector import SelectorBuilder

    builder = SelectorBuilder()
    if element is not None:
        builder.element(element)
    if id_ is not None:
        builder.id(id_)
    for cls in classes:
        builder.class_(cls)
    if attr is not None:
        builder.attr(attr)
    for pc in pseudo_classes:
        builder.pseudo_class(pc)
    if pseudo_element is not None:
        builder.pseudo_element(pseudo_element)

    rendered = builder.render()
    if not rendered:
        click.echo("Error: no selector fragments given", err=True)
        sys.exit(1)
    click.echo(rendered)


@cli.command()
@click.argument("text")
def check(text: str) -> None:
    """Parse selector TEXT and print its canonical rendering.

    Exits with code 1 if the selector is malformed or its fragments are
    out of order.
    """
    from objectkit.selector import parse_selector

    try:
        parsed = parse_selector(text)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(parsed.render())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    from objectkit.model import Rectangle

    click.echo(f"{Rectangle(width, height).area:g}")


@cli.command("to-json")
@click.argument("text")
@click.option("--indent", default=None, type=int, help="Indent level")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort object keys")
@click.option(
    "--compact/--no-compact", default=True, help="Drop spaces after separators"
)
def to_json(text: str, indent: int | None, sort_keys: bool, compact: bool) -> None:
    """Re-serialize the JSON value TEXT."""
    from objectkit.serialization import serialize

    config = ObjectkitConfig(
        json_indent=indent, json_sort_keys=sort_keys, json_compact=compact
    )
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(serialize(value, config))
