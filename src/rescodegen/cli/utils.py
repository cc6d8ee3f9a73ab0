"""CLI utilities."""

from pathlib import Path

import click


def read_source(path: Path) -> str:
    """Read a spec file as UTF-8 text.

    Raises:
        click.ClickException: If the file cannot be read or decoded
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {path}: {e}") from e
