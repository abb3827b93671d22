"""Helpers shared by the CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from domstylesheet.model import CompiledStyle


def load_spec(path: str) -> Any:
    """Read a JSON style spec, exiting with code 1 if it is not valid JSON."""
    spec_path = Path(path)
    try:
        return json.loads(spec_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Error: {spec_path.name} is not valid JSON: {exc}", err=True)
        sys.exit(1)


def echo_style(style: CompiledStyle, variants: tuple[str, ...] = ()) -> None:
    for rule in style.rules:
        click.echo(rule)
    if variants:
        click.echo()
        click.echo(f"class: {style.class_name({v: True for v in variants})}")
