"""CLI context management for settings and shared state."""

import logging
import sys
from dataclasses import dataclass, field

from schemagraph.core.settings import DiagramSettings
from schemagraph.diagram import SchemaDiagramEngine


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout stays machine-readable."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@dataclass
class CLIContext:
    """Shared context for CLI commands.

    Holds output preferences and lazily creates the diagram engine.
    """

    settings: DiagramSettings
    json_output: bool
    _engine: SchemaDiagramEngine | None = field(default=None, init=False, repr=False)

    def get_engine(self) -> SchemaDiagramEngine:
        """Get or create the diagram engine.

        Returns:
            SchemaDiagramEngine configured with this context's settings
        """
        if self._engine is None:
            self._engine = SchemaDiagramEngine(self.settings)
        return self._engine
