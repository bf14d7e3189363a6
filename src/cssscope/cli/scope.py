"""CLI command: cssscope scope -- rewrite the SCOPE blocks of one file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssscope.errors import ParseError
from cssscope.scope import process


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def scope(cssfile: str) -> None:
    """Rewrite the SCOPE blocks of CSSFILE and print the result."""
    try:
        source = Path(cssfile).read_text(encoding="utf-8")
        output = process(source)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error in {cssfile}: {exc}{location}", err=True)
        sys.exit(1)

    click.echo(output, nl=False)
