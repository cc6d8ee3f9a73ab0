"""rescodegen CLI - rescodegen command."""

from pathlib import Path

import click

from rescodegen.cli.check import check_command
from rescodegen.cli.parse import parse_command
from rescodegen.config.loader import load_config
from rescodegen.core.errors import ConfigError
from rescodegen.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="rescodegen")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ./rescodegen.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """rescodegen - ReScript spec parser for React Native codegen."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    if verbose:
        configure_logging(level="DEBUG")
    else:
        configure_logging(config=config.logging)


cli.add_command(parse_command, name="parse")
cli.add_command(check_command, name="check")


if __name__ == "__main__":
    cli()
