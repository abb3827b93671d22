"""CLI command: domstylesheet compile -- compile a JSON style spec."""

from __future__ import annotations

import sys

import click

from domstylesheet.cli.common import echo_style, load_spec
from domstylesheet.compiler import create
from domstylesheet.errors import StyleError


@click.command("compile")
@click.argument("specfile", type=click.Path(exists=True))
@click.option("--name", "-n", default="style", show_default=True, help="Base class name")
@click.option(
    "--variant",
    "variants",
    multiple=True,
    help="Variant to activate when printing the class name (repeatable)",
)
def compile_cmd(specfile: str, name: str, variants: tuple[str, ...]) -> None:
    """Compile SPECFILE and print its CSS rules, one per line.

    With --variant, also prints the class name for those active variants.
    """
    spec = load_spec(specfile)
    try:
        style = create(spec, name)
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    echo_style(style, variants)
