"""Tests for diagram settings."""

import pytest

from schemagraph import DiagramSettings, LayoutAlgorithm, ValidationError


class TestDiagramSettings:
    """Tests for DiagramSettings."""

    def test_defaults(self):
        """Defaults reproduce the fixed 3-column grid."""
        settings = DiagramSettings()
        assert settings.layout == LayoutAlgorithm.GRID
        assert settings.grid_columns == 3
        assert settings.column_spacing == 300
        assert settings.row_spacing == 400
        assert settings.deduplicate_edges is False
        assert settings.include_self_references is True

    def test_build_rejects_bad_values(self):
        """Invalid values raise SchemaGraph's ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            DiagramSettings.build(grid_columns=0)
        assert "grid_columns" in exc_info.value.field_errors


class TestFromEnv:
    """Tests for DiagramSettings.from_env."""

    def test_empty_environment(self):
        """No variables means defaults."""
        assert DiagramSettings.from_env({}) == DiagramSettings()

    def test_reads_variables(self):
        """SCHEMAGRAPH_* variables are applied."""
        settings = DiagramSettings.from_env(
            {
                "SCHEMAGRAPH_LAYOUT": "layered",
                "SCHEMAGRAPH_GRID_COLUMNS": "4",
                "SCHEMAGRAPH_COLUMN_SPACING": "250",
                "SCHEMAGRAPH_ROW_SPACING": "350",
            }
        )
        assert settings.layout == LayoutAlgorithm.LAYERED
        assert settings.grid_columns == 4
        assert settings.column_spacing == 250
        assert settings.row_spacing == 350

    def test_overrides_win(self):
        """Explicit overrides beat the environment; None overrides are ignored."""
        settings = DiagramSettings.from_env(
            {"SCHEMAGRAPH_GRID_COLUMNS": "4"}, grid_columns=2, layout=None
        )
        assert settings.grid_columns == 2
        assert settings.layout == LayoutAlgorithm.GRID

    def test_invalid_variable(self):
        """Unparseable variables raise ValidationError."""
        with pytest.raises(ValidationError):
            DiagramSettings.from_env({"SCHEMAGRAPH_GRID_COLUMNS": "many"})

    def test_process_environment(self, monkeypatch):
        """os.environ is used when no mapping is given."""
        monkeypatch.setenv("SCHEMAGRAPH_ROW_SPACING", "123")
        assert DiagramSettings.from_env().row_spacing == 123
