"""CLI commands: localscope scope / localscope exports."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from localscope.config import MODES, ScopeConfig
from localscope.errors import ParseError, ScopeError
from localscope.scope import ScopeResult, process

_mode_option = click.option(
    "--mode",
    type=click.Choice(MODES),
    default="local",
    show_default=True,
    help="Default scoping mode; 'pure' also rejects rules without a local class or id.",
)
_from_option = click.option(
    "--from",
    "from_path",
    default=None,
    help="Source path used for generated names (defaults to CSSFILE).",
)


def _run(cssfile: str, mode: str, from_path: str | None) -> ScopeResult:
    css_path = Path(cssfile)
    config = ScopeConfig(mode=mode, from_path=from_path or str(css_path))
    try:
        result = process(css_path.read_text(encoding="utf-8"), config)
    except (ParseError, ScopeError) as exc:
        click.echo(f"Error: {css_path.name}: {exc}", err=True)
        sys.exit(1)
    for warning in result.warnings:
        click.echo(str(warning), err=True)
    return result


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@_mode_option
@_from_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the scoped stylesheet here instead of stdout.",
)
def scope(cssfile: str, mode: str, from_path: str | None, output: str | None) -> None:
    """Rewrite CSSFILE with locally scoped selectors and an :export block."""
    result = _run(cssfile, mode, from_path)
    if output:
        Path(output).write_text(result.css, encoding="utf-8")
        click.echo(f"Wrote {output} ({len(result.exports)} export(s))")
    else:
        click.echo(result.css, nl=False)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@_mode_option
@_from_option
def exports(cssfile: str, mode: str, from_path: str | None) -> None:
    """Print the export table of CSSFILE as JSON."""
    result = _run(cssfile, mode, from_path)
    click.echo(json.dumps(result.exports, indent=2))
