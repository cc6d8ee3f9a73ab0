"""rescodegen parse command - emit the Program tree as JSON."""

import json
from pathlib import Path

import click

from rescodegen.cli.utils import read_source
from rescodegen.config.models import RescodegenConfig
from rescodegen.core.console import pluralize, status
from rescodegen.parser import ParseOptions, parse_with_diagnostics


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--indent", type=click.IntRange(min=0), default=2, show_default=True)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write JSON here instead of stdout",
)
@click.pass_context
def parse_command(ctx: click.Context, path: Path, indent: int, output: Path | None) -> None:
    """Parse a ReScript spec file and print its Program tree.

    PATH is the .res spec file. Diagnostics go to stderr; the tree is
    always emitted.
    """
    config: RescodegenConfig = ctx.obj["config"]
    source = read_source(path)

    program, errors = parse_with_diagnostics(
        source, ParseOptions(filename=str(path)), config=config.parser
    )
    text = json.dumps(program, indent=indent or None)

    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        status(f"Wrote {output}", style="success")

    if errors:
        status(f"{pluralize(len(errors), 'diagnostic')} in {path}", style="warning")
