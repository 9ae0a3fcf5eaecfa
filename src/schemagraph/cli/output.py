"""Output formatting for CLI commands."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from schemagraph.core.types import DiagramModel, RelationshipCandidate
from schemagraph.exceptions import SchemaGraphError

console = Console()


class OutputFormatter:
    """Formats output for terminal or JSON mode."""

    def __init__(self, json_mode: bool = False) -> None:
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode

    def print_table(
        self,
        title: str,
        data: list[dict[str, Any]],
        columns: list[str],
    ) -> None:
        """Print data as Rich table or JSON array.

        Args:
            title: Table title
            data: List of row dictionaries
            columns: Column names to display
        """
        if self.json_mode:
            print(json.dumps(data, default=str, indent=2))
        else:
            table = Table(title=title, show_header=True, header_style="bold magenta")
            for col in columns:
                table.add_column(col)
            for row in data:
                table.add_row(*[str(row.get(col, "")) for col in columns])
            console.print(table)

    def print_diagram(self, model: DiagramModel) -> None:
        """Print a diagram model as node and edge tables.

        Args:
            model: Diagram to display
        """
        if self.json_mode:
            print(json.dumps(model.to_dict(), indent=2))
            return

        if model.is_empty:
            console.print("No tables to display.", style="yellow")
            return

        console.print(f"\n[bold]Tables ({len(model.nodes)}):[/bold]")
        nodes_table = Table(show_header=True, header_style="bold cyan")
        nodes_table.add_column("Table")
        nodes_table.add_column("Columns", justify="right")
        nodes_table.add_column("X", justify="right")
        nodes_table.add_column("Y", justify="right")
        for node in model.nodes:
            nodes_table.add_row(
                node.id,
                str(len(node.payload.columns)),
                str(node.position.x),
                str(node.position.y),
            )
        console.print(nodes_table)

        if not model.edges:
            console.print("\nNo relationships inferred.", style="dim")
            return

        console.print(f"\n[bold]Relationships ({len(model.edges)}):[/bold]")
        edges_table = Table(show_header=True, header_style="bold cyan")
        edges_table.add_column("From")
        edges_table.add_column("To")
        for edge in model.edges:
            edges_table.add_row(
                f"{edge.source}.{edge.source_column}",
                f"{edge.target}.{edge.target_column}",
            )
        console.print(edges_table)

    def print_relationships(self, candidates: list[RelationshipCandidate]) -> None:
        """Print inferred relationship candidates.

        Args:
            candidates: Candidates in inference order
        """
        self.print_table(
            f"Inferred relationships ({len(candidates)} total)",
            [c.model_dump() for c in candidates],
            ["source_table", "source_column", "target_table", "target_column"],
        )

    def print_success(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Print success message.

        Args:
            message: Success message
            details: Optional details to display
        """
        if self.json_mode:
            output = {"success": True, "message": message}
            if details:
                output.update(details)
            print(json.dumps(output, default=str, indent=2))
        else:
            console.print(f"✓ {message}", style="green")
            if details:
                for key, value in details.items():
                    console.print(f"  {key}: {value}", style="dim")

    def print_error(self, error: Exception) -> None:
        """Print error message.

        Args:
            error: Exception to display
        """
        if self.json_mode:
            if isinstance(error, SchemaGraphError):
                print(json.dumps(error.to_dict(), default=str, indent=2))
            else:
                print(json.dumps({"error": str(error)}, indent=2))
        else:
            error_text = str(error)
            if isinstance(error, SchemaGraphError) and error.context:
                context_str = "\n".join(f"{k}: {v}" for k, v in error.context.items())
                error_text = f"{error_text}\n\n{context_str}"

            panel = Panel(
                error_text,
                title="[red]Error[/red]",
                border_style="red",
            )
            console.print(panel)
