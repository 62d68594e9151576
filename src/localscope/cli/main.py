"""localscope CLI entry point: Click group with subcommands."""

import logging

import click

from localscope import __version__


@click.group()
@click.version_option(version=__version__, prog_name="localscope")
@click.option("--verbose", "-v", is_flag=True, help="Log every rewritten rule and alias.")
def cli(verbose: bool) -> None:
    """localscope - scope CSS class and id selectors to their source file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from localscope.cli.scope import exports, scope  # noqa: E402

cli.add_command(scope)
cli.add_command(exports)
