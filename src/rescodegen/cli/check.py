"""rescodegen check command - summarize declarations and diagnostics."""

import json
from pathlib import Path
from typing import Any

import click

from rescodegen.cli.utils import read_source
from rescodegen.config.models import RescodegenConfig
from rescodegen.core.console import get_console, make_diagnostics_table, pluralize, status
from rescodegen.parser import ParseOptions, ReScriptParser
from rescodegen.parser.models import ParseSummary


def describe_declaration(node: dict[str, Any]) -> str:
    """One-line description of a top-level declaration node."""
    kind = node.get("type", "Unknown")
    if kind == "ImportDeclaration":
        names = ", ".join(s["local"]["name"] for s in node.get("specifiers", []))
        return f"import {node.get('importKind', 'value')} {names}"

    declaration = node.get("declaration") or {}
    decl_kind = declaration.get("type")
    if decl_kind == "InterfaceDeclaration":
        methods = declaration["body"]["properties"]
        return f"interface {declaration['id']['name']} ({pluralize(len(methods), 'method')})"
    if decl_kind == "TypeAlias":
        props = declaration["right"]["properties"]
        count = pluralize(len(props), "property", "properties")
        return f"type {declaration['id']['name']} ({count})"
    if decl_kind == "CallExpression":
        callee = declaration["callee"]
        if callee["type"] == "MemberExpression":
            name = f"{callee['object']['name']}.{callee['property']['name']}"
        else:
            name = callee["name"]
        args = ", ".join(arg["raw"] for arg in declaration.get("arguments", []))
        return f"export default {name}({args})"
    return kind


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def check_command(ctx: click.Context, path: Path, as_json: bool) -> None:
    """Check a ReScript spec file for recognizable declarations.

    Exits with status 1 when the parser recorded diagnostics.
    """
    config: RescodegenConfig = ctx.obj["config"]
    source = read_source(path)

    parser = ReScriptParser(source, ParseOptions(filename=str(path)), config=config.parser)
    program = parser.parse()
    summary = ParseSummary(
        declarations=[describe_declaration(node) for node in program["body"]],
        errors=parser.diagnostics.records,
    )

    if as_json:
        click.echo(
            json.dumps(
                {
                    "path": str(path),
                    "ok": summary.ok,
                    "declarations": summary.declarations,
                    "errors": [e.to_dict() for e in summary.errors],
                }
            )
        )
    else:
        if not summary.declarations:
            status(f"No declarations found in {path}", style="warning")
        for description in summary.declarations:
            status(description, style="info")
        if summary.errors:
            status(f"{pluralize(len(summary.errors), 'diagnostic')} in {path}", style="error")
            get_console().print(make_diagnostics_table(summary.errors))
        else:
            status(
                f"{pluralize(len(summary.declarations), 'declaration')} in {path}",
                style="success",
            )

    if not summary.ok:
        ctx.exit(1)
