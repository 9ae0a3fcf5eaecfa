"""SchemaGraph CLI - Main entry point."""

from typing import Annotated

import typer

import schemagraph
from schemagraph.cli.context import CLIContext, configure_logging
from schemagraph.cli.output import OutputFormatter
from schemagraph.core.settings import DiagramSettings
from schemagraph.core.types import LayoutAlgorithm
from schemagraph.exceptions import ValidationError

# Create main Typer app
app = typer.Typer(
    name="schemagraph",
    help="SchemaGraph CLI - Entity-relationship diagrams from schema snapshots",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    layout: Annotated[
        LayoutAlgorithm | None,
        typer.Option(
            "--layout",
            "-l",
            help="Node placement (default: grid, or SCHEMAGRAPH_LAYOUT)",
        ),
    ] = None,
    columns: Annotated[
        int | None,
        typer.Option(
            "--columns",
            "-c",
            help="Tables per grid row (default: 3, or SCHEMAGRAPH_GRID_COLUMNS)",
        ),
    ] = None,
    dedupe: Annotated[
        bool,
        typer.Option(
            "--dedupe",
            help="Draw one edge per table pair instead of one per inferred column",
        ),
    ] = False,
    no_self_references: Annotated[
        bool,
        typer.Option(
            "--no-self-references",
            help="Drop edges from a table to itself",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON (machine-readable)",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log each inferred relationship to stderr",
        ),
    ] = False,
) -> None:
    """Initialize CLI context with global options."""
    configure_logging(verbose)

    try:
        settings = DiagramSettings.from_env(
            layout=layout,
            grid_columns=columns,
            deduplicate_edges=dedupe or None,
            include_self_references=False if no_self_references else None,
        )
    except ValidationError as e:
        OutputFormatter(json_output).print_error(e)
        raise typer.Exit(code=1)

    # Store in Typer context for command access
    ctx.obj = CLIContext(settings=settings, json_output=json_output)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"SchemaGraph v{schemagraph.__version__}")


# Register command groups
from schemagraph.cli.commands import diagram  # noqa: E402

app.add_typer(diagram.app, name="diagram")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
