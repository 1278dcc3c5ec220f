"""CLI command: htsx convert -- write .css/.html next to each source file."""

from __future__ import annotations

import sys

import click

from htsx.cli.report import describe_failure
from htsx.config import ConvertConfig
from htsx.convert import UnsupportedDocument, convert_file
from htsx.errors import ConversionError
from htsx.reader import DEFAULT_MAX_DEPTH, ReadError


@click.command()
@click.option("-p", "--pretty", is_flag=True, help="Generate human-readable HTML code.")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write output files here instead of next to each source.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Reject sources whose lists nest deeper than this.",
)
@click.argument("names", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def convert(pretty: bool, output_dir: str | None, max_depth: int, names: tuple[str, ...]) -> None:
    """Convert .cssx files to .css and .htsx files to .html.

    Each file is converted independently; a failing file is reported and the
    rest are still converted. Exits with code 1 if any file failed.
    """
    config = ConvertConfig(pretty=pretty, output_dir=output_dir, max_depth=max_depth)
    failed = 0
    for name in names:
        try:
            target = convert_file(name, config)
        except UnsupportedDocument as exc:
            click.echo(describe_failure(name, exc), err=True)
            continue
        except (ReadError, ConversionError, UnicodeDecodeError, OSError) as exc:
            click.echo(describe_failure(name, exc), err=True)
            failed += 1
            continue
        click.echo(f"{name} -> {target}")

    if failed:
        click.echo(f"{failed} of {len(names)} file(s) failed", err=True)
        sys.exit(1)
