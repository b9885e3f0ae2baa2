"""
Unit tests for the compute_view pipeline.
"""

from cloudgraph.core.config import LayoutConfig
from cloudgraph.core.hierarchy import find_roots
from cloudgraph.core.types import FilterState, GraphData
from cloudgraph.core.view import compute_view
from cloudgraph.core.visibility import default_expanded


class TestComputeView:
    def test_default_view(self, sample):
        result = compute_view(sample, default_expanded(sample), FilterState())
        assert result.visible_ids == ["cloud", "aws1", "aws2", "gcp", "saas", "s3", "rds"]
        assert len(result.edges) == 6
        assert result.stats.total_alerts == 650
        assert result.stats.total_misconfigurations == 37
        assert result.stats.critical_alerts == 3
        assert result.stats.total_providers == 5
        assert result.stats.type_counts["service"] == 2

    def test_roots_expanded_view(self, sample):
        result = compute_view(sample, find_roots(sample))
        assert result.visible_ids == ["cloud", "aws1", "aws2", "gcp", "saas"]
        assert [e.id for e in result.edges] == ["cloud-aws1", "cloud-aws2", "cloud-gcp", "cloud-saas"]
        assert result.stats.total_alerts == 584
        assert result.stats.total_providers == 4

    def test_alerts_filter_on_roots_expanded_view(self, sample):
        result = compute_view(sample, find_roots(sample), FilterState(issueType="alerts"))
        assert {n.id for n in result.shown_nodes} == {"cloud", "aws1", "aws2", "saas"}
        assert result.get_node("gcp").hidden

    def test_expand_everything_shows_all_reachable(self, graph_factory):
        data = graph_factory([("r", "a"), ("a", "b"), ("x", "y"), ("y", "x")])
        result = compute_view(data, data.node_ids)
        assert result.visible_ids == ["r", "a", "b"]

    def test_idempotent(self, sample):
        expanded = default_expanded(sample)
        filters = FilterState(alertThreshold=50)
        assert compute_view(sample, expanded, filters) == compute_view(sample, expanded, filters)

    def test_filters_keep_positions(self, sample):
        expanded = default_expanded(sample)
        plain = compute_view(sample, expanded)
        filtered = compute_view(sample, expanded, FilterState(nodeType="service"))
        assert [(n.id, n.x, n.y) for n in plain.nodes] == [(n.id, n.x, n.y) for n in filtered.nodes]
        assert filtered.edges == plain.edges

    def test_layout_config_passed_through(self, sample):
        result = compute_view(sample, ["cloud"], layout=LayoutConfig(level_spacing=10, row_spacing=10, margin=0))
        assert (result.get_node("saas").x, result.get_node("saas").y) == (10, 30)

    def test_does_not_mutate_inputs(self, sample):
        expanded = {"cloud"}
        before = sample.model_dump()
        compute_view(sample, expanded, FilterState(issueType="alerts"))
        assert expanded == {"cloud"}
        assert sample.model_dump() == before

    def test_empty_graph(self):
        result = compute_view(GraphData(), set())
        assert result.nodes == []
        assert result.edges == []
        assert result.stats.total_alerts == 0
