"""objtasks CLI entry point: Click group with subcommands."""
from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Callable

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig
from objtasks.errors import ObjtasksError
from objtasks.model import Rectangle
from objtasks.selector import COMBINATORS, SelectorBuilder, css_selector_builder
from objtasks.serialization import get_json

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# KIND names accepted in KIND=VALUE parts.
_PART_METHODS: dict[str, Callable[[SelectorBuilder, str], SelectorBuilder]] = {
    "element": SelectorBuilder.with_element,
    "id": SelectorBuilder.with_id,
    "class": SelectorBuilder.with_class,
    "attr": SelectorBuilder.with_attr,
    "pseudo-class": SelectorBuilder.with_pseudo_class,
    "pseudo-element": SelectorBuilder.with_pseudo_element,
}


def _split_compounds(tokens: tuple[str, ...]) -> tuple[list[list[str]], list[str]]:
    """Split *tokens* into compound part lists and the combinators between them."""
    compounds: list[list[str]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in COMBINATORS:
            if not compounds[-1]:
                raise click.BadParameter(
                    f"combinator {token!r} must sit between two selectors",
                    param_hint="PARTS",
                )
            combinators.append(token)
            compounds.append([])
        else:
            compounds[-1].append(token)
    if combinators and not compounds[-1]:
        raise click.BadParameter(
            f"combinator {combinators[-1]!r} must sit between two selectors",
            param_hint="PARTS",
        )
    return compounds, combinators


def _build_compound(parts: list[str]) -> SelectorBuilder:
    builder = SelectorBuilder()
    for part in parts:
        kind, sep, value = part.partition("=")
        if not sep or kind not in _PART_METHODS:
            raise click.BadParameter(
                f"expected KIND=VALUE with KIND one of {', '.join(_PART_METHODS)}, got {part!r}",
                param_hint="PARTS",
            )
        _PART_METHODS[kind](builder, value)
    return builder


def build_selector(tokens: tuple[str, ...]) -> SelectorBuilder:
    """Build a selector from CLI tokens, combining compounds right to left.

    Raises:
        click.BadParameter: a part is malformed or a combinator is dangling.
        SelectorError: parts are duplicated or out of order.
    """
    compounds, combinators = _split_compounds(tokens)
    result = _build_compound(compounds[-1])
    for parts, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = css_selector_builder.combine(_build_compound(parts), combinator, result)
    return result


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objtasks - rectangles, JSON helpers and CSS selector building."""
    config = ObjtasksConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


@cli.command()
@click.argument("parts", nargs=-1)
def selector(parts: tuple[str, ...]) -> None:
    """Build a CSS selector from PARTS and print it.

    Each part is KIND=VALUE, KIND being one of element, id, class, attr,
    pseudo-class or pseudo-element. Parts are applied in the order given.
    A combinator (' ', '+', '~' or '>') between parts starts the next
    compound selector.
    """
    if not parts:
        click.echo("Error: no selector parts given", err=True)
        sys.exit(1)

    try:
        builder = build_selector(parts)
    except ObjtasksError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{Rectangle(width, height).get_area():g}")


@cli.command("to-json")
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort object keys")
@click.pass_obj
def to_json(
    config: ObjtasksConfig, width: float, height: float, indent: int | None, sort_keys: bool
) -> None:
    """Print the JSON form of a WIDTH x HEIGHT rectangle."""
    config = dataclasses.replace(config, json_indent=indent, json_sort_keys=sort_keys)
    click.echo(get_json(Rectangle(width, height), config))
