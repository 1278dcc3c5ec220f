"""CLI command: htsx check -- read and recognize sources without writing."""

from __future__ import annotations

import sys

import click

from htsx.cli.report import describe_failure
from htsx.config import ConvertConfig
from htsx.convert import UnsupportedDocument, check_file
from htsx.errors import ConversionError
from htsx.reader import DEFAULT_MAX_DEPTH, ReadError


@click.command()
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Reject sources whose lists nest deeper than this.",
)
@click.argument("names", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def check(max_depth: int, names: tuple[str, ...]) -> None:
    """Check .cssx and .htsx files for structural errors.

    Prints the first located error of each failing file and exits with code 1
    if there are any.
    """
    config = ConvertConfig(max_depth=max_depth)
    failed = 0
    for name in names:
        try:
            count = check_file(name, config)
        except UnsupportedDocument as exc:
            click.echo(describe_failure(name, exc), err=True)
            continue
        except (ReadError, ConversionError, UnicodeDecodeError, OSError) as exc:
            click.echo(describe_failure(name, exc), err=True)
            failed += 1
            continue
        click.echo(f"OK: {name} ({count} item(s))")

    if failed:
        sys.exit(1)
