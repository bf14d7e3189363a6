"""CLI command: cssscope bundle -- process and bundle a directory of CSS files."""

from __future__ import annotations

import logging
import sys

import click

from cssscope.bundler import CSSBundler
from cssscope.config import BundleConfig
from cssscope.environment import LocalFileSystem, LocalProcessRunner
from cssscope.errors import CSSScopeError


@click.command()
@click.argument("input_dir", default=".", required=False)
@click.argument("output_file", required=False)
@click.option("-m", "--minify", is_flag=True, help="Minify output with esbuild")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option(
    "--recursive/--no-recursive",
    "-r/-R",
    default=True,
    help="Scan subdirectories (default: recursive)",
)
@click.option(
    "-p", "--print", "to_stdout", is_flag=True, help="Print output to stdout instead of a file"
)
@click.option("--minifier", default="esbuild", help="Minifier executable")
def bundle(
    input_dir: str,
    output_file: str | None,
    minify: bool,
    verbose: bool,
    recursive: bool,
    to_stdout: bool,
    minifier: str,
) -> None:
    """Process every CSS file in INPUT_DIR and bundle them into OUTPUT_FILE.

    SCOPE blocks are rewritten in each file before the files are joined.
    """
    if not to_stdout and not output_file:
        raise click.UsageError("output file is required when not using -p")

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    config = BundleConfig(
        input_dir=input_dir,
        output_file=output_file,
        minify=minify,
        recursive=recursive,
        to_stdout=to_stdout,
        minifier=minifier,
    )
    bundler = CSSBundler(LocalFileSystem(), LocalProcessRunner())

    def report(path: str) -> None:
        click.echo(f"Processed: {path}", err=to_stdout)

    try:
        result = bundler.bundle(config, on_processed=report if verbose else None)
    except CSSScopeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if result.empty:
        click.echo("No CSS files found", err=to_stdout)
        return

    if to_stdout:
        click.echo(result.css, nl=False)
    elif verbose:
        click.echo(f"CSS bundled: {result.output_file} ({len(result.files)} files)")
    else:
        click.echo(f"CSS: {result.output_file}")
