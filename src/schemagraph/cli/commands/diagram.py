"""Diagram commands."""

import json
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from schemagraph.cli.context import CLIContext
from schemagraph.cli.output import OutputFormatter
from schemagraph.cli.parsing import read_schema_file
from schemagraph.export import to_flow, to_mermaid

# Create diagram subcommand group
app = typer.Typer(help="Build and export schema diagrams")

SchemaFile = Annotated[str, typer.Argument(help="JSON file with the table list")]


class ExportFormat(StrEnum):
    """Supported export formats."""

    MERMAID = "mermaid"
    FLOW = "flow"
    JSON = "json"


@app.command("build")
def diagram_build(ctx: typer.Context, schema_file: SchemaFile) -> None:
    """Build the diagram and show its nodes and edges."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        tables = read_schema_file(schema_file)
        model = cli_ctx.get_engine().build(tables)
        formatter.print_diagram(model)
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)


@app.command("relationships")
def diagram_relationships(ctx: typer.Context, schema_file: SchemaFile) -> None:
    """List the relationships inferred from column names."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        tables = read_schema_file(schema_file)
        candidates = cli_ctx.get_engine().relationships(tables)
        formatter.print_relationships(candidates)
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)


@app.command("export")
def diagram_export(
    ctx: typer.Context,
    schema_file: SchemaFile,
    export_format: Annotated[
        ExportFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = ExportFormat.MERMAID,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """Export the diagram as Mermaid text, canvas JSON or raw model JSON.

    Examples:

        # Mermaid ER diagram on stdout
        schemagraph diagram export schema.json

        # Canvas nodes/edges to a file
        schemagraph diagram export schema.json --format flow -o diagram.json
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        tables = read_schema_file(schema_file)
        model = cli_ctx.get_engine().build(tables)

        if export_format == ExportFormat.MERMAID:
            text = to_mermaid(model)
        elif export_format == ExportFormat.FLOW:
            text = json.dumps(to_flow(model), indent=2)
        else:
            text = json.dumps(model.to_dict(), indent=2)

        if output is None:
            typer.echo(text)
            return

        Path(output).write_text(text + "\n", encoding="utf-8")
        formatter.print_success(
            f"Exported diagram to {output}",
            {
                "format": str(export_format),
                "nodes": len(model.nodes),
                "edges": len(model.edges),
            },
        )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
