"""Tests for the diagram engine end to end."""

import pytest

from schemagraph import (
    DiagramModel,
    DiagramSettings,
    LayoutAlgorithm,
    SchemaDiagramEngine,
    ValidationError,
    build_diagram,
)


class TestBuildDiagram:
    """Tests for build_diagram."""

    def test_empty_input(self):
        """No tables yields an empty model."""
        model = build_diagram([])
        assert model == DiagramModel(nodes=(), edges=(), is_empty=True)

    def test_users_posts(self):
        """The canonical two-table example yields one edge."""
        model = build_diagram(
            [
                {"name": "users", "columns": [{"name": "id"}]},
                {"name": "posts", "columns": [{"name": "id"}, {"name": "user_id"}]},
            ]
        )
        assert model.is_empty is False
        assert len(model.edges) == 1
        assert model.edges[0].source == "posts"
        assert model.edges[0].target == "users"

    def test_no_relationships_is_not_empty(self, make_table):
        """Tables without relationships still produce a populated model."""
        model = build_diagram([make_table(name, "id") for name in "ABCD"])
        assert model.is_empty is False
        assert model.edges == ()
        assert [(n.position.x, n.position.y) for n in model.nodes] == [
            (0, 0),
            (300, 0),
            (600, 0),
            (0, 400),
        ]

    def test_nodes_follow_input(self, blog_tables):
        """Node count and order equal the input."""
        model = build_diagram(blog_tables)
        assert len(model.nodes) == len(blog_tables)
        for i, table in enumerate(blog_tables):
            assert model.nodes[i].id == table.name
            assert model.nodes[i].payload == table

    def test_edges_reference_nodes(self, blog_tables):
        """Every edge endpoint is a node id."""
        model = build_diagram(blog_tables)
        ids = set(model.node_ids())
        assert len(model.edges) == 3
        for edge in model.edges:
            assert edge.source in ids
            assert edge.target in ids

    def test_idempotent(self, blog_tables):
        """Two calls with the same input give equal models."""
        assert build_diagram(blog_tables) == build_diagram(blog_tables)
        assert build_diagram(blog_tables).to_dict() == build_diagram(list(blog_tables)).to_dict()

    def test_self_loop_produced(self, make_table):
        """comments.comments_id draws an edge from comments to itself."""
        model = build_diagram([make_table("comments", "id", "comments_id")])
        assert len(model.edges) == 1
        assert model.edges[0].id == "comments-comments"
        assert model.edges[0].source == model.edges[0].target == "comments"

    def test_uuid_and_valid_never_match(self, make_table):
        """Only an exact trailing _id suffix counts."""
        tables = [make_table("uus", "id"), make_table("vals", "id"), make_table("t", "uuid", "valid")]
        assert build_diagram(tables).edges == ()

    def test_whitespace_name_becomes_node(self):
        """A name made of spaces is still a name."""
        model = build_diagram([{"name": " ", "columns": []}])
        assert model.is_empty is False
        assert model.node_ids() == [" "]

    def test_payload_keeps_input_keys(self, api_schema):
        """to_dict returns each table with exactly the keys it was given."""
        data = build_diagram(api_schema).to_dict()
        assert [n["payload"] for n in data["nodes"]] == api_schema

    def test_validation_error_propagates(self):
        """Malformed input is surfaced to the caller."""
        with pytest.raises(ValidationError):
            build_diagram([{"name": "users", "columns": []}, {"columns": []}])

    def test_generator_input(self, blog_tables):
        """Any iterable of tables is accepted."""
        model = build_diagram(t for t in blog_tables)
        assert model.node_ids() == ["users", "posts", "comments", "tags"]


class TestSchemaDiagramEngine:
    """Tests for SchemaDiagramEngine."""

    def test_callable(self, blog_tables):
        """The engine can be called directly."""
        engine = SchemaDiagramEngine()
        assert engine(blog_tables) == engine.build(blog_tables)

    def test_relationships(self, blog_tables):
        """relationships() exposes the inferred candidates."""
        rels = SchemaDiagramEngine().relationships(blog_tables)
        assert len(rels) == 3

    def test_dedupe_setting(self, make_table):
        """deduplicate_edges collapses edges per table pair."""
        tables = [make_table("users", "id"), make_table("messages", "id", "user_id", "users_id")]
        assert len(SchemaDiagramEngine().build(tables).edges) == 2
        engine = SchemaDiagramEngine(DiagramSettings(deduplicate_edges=True))
        assert len(engine.build(tables).edges) == 1

    def test_self_reference_setting(self, make_table):
        """include_self_references=False drops self-loops."""
        engine = SchemaDiagramEngine(DiagramSettings(include_self_references=False))
        assert engine.build([make_table("comments", "id", "comments_id")]).edges == ()

    def test_layered_layout(self, blog_tables):
        """The layout setting changes coordinates, not order."""
        engine = SchemaDiagramEngine(DiagramSettings(layout=LayoutAlgorithm.LAYERED))
        model = engine.build(blog_tables)
        assert model.node_ids() == ["users", "posts", "comments", "tags"]
        assert model.nodes[3].position.x == 0
        assert model.nodes[3].position.y == 400
