"""CLI command: domstylesheet override -- merge a patch onto a spec and compile."""

from __future__ import annotations

import sys

import click

from domstylesheet.cli.common import echo_style, load_spec
from domstylesheet.compiler import override
from domstylesheet.errors import StyleError


@click.command("override")
@click.argument("basefile", type=click.Path(exists=True))
@click.argument("patchfile", type=click.Path(exists=True))
@click.option("--name", "-n", default="style", show_default=True, help="Base class name")
@click.option("--variant", "variants", multiple=True, help="Variant to activate (repeatable)")
def override_cmd(basefile: str, patchfile: str, name: str, variants: tuple[str, ...]) -> None:
    """Deep-merge PATCHFILE onto BASEFILE and print the compiled rules."""
    base = load_spec(basefile)
    patch = load_spec(patchfile)
    try:
        style = override(base, patch, name)
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    echo_style(style, variants)
