"""Entry point for ``python -m rescodegen``."""

from rescodegen.cli.main import cli

if __name__ == "__main__":
    cli()
