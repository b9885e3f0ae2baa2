"""
Unit tests for the aggregator.
"""

from cloudgraph.core.stats import aggregate
from cloudgraph.core.types import PositionedNode


def node(node_id, alerts=0, misconfigs=0, type="service", hidden=False):
    return PositionedNode(
        id=node_id, label=node_id, type=type, alerts=alerts, misconfigs=misconfigs,
        x=0, y=0, level=0, hidden=hidden,
    )


class TestAggregate:
    def test_sums_over_shown_nodes(self):
        nodes = [
            node("a", alerts=253, misconfigs=18, type="cloud"),
            node("b", alerts=84, type="aws"),
            node("c", alerts=0, type="gcp"),
        ]
        stats = aggregate(nodes)
        assert stats.total_alerts == 337
        assert stats.total_misconfigurations == 18
        # Per-node threshold check, not on the sum
        assert stats.critical_alerts == 1

    def test_hidden_nodes_excluded(self):
        nodes = [node("a", alerts=500), node("b", alerts=7, hidden=True)]
        stats = aggregate(nodes)
        assert stats.total_alerts == 500
        assert stats.shown_nodes == 1
        assert stats.hidden_nodes == 1

    def test_critical_is_strictly_greater(self):
        stats = aggregate([node("a", alerts=100), node("b", alerts=101)])
        assert stats.critical_alerts == 1

    def test_custom_critical_threshold(self):
        stats = aggregate([node("a", alerts=60), node("b", alerts=40)], critical_threshold=50)
        assert stats.critical_alerts == 1

    def test_type_counts_include_known_and_extra_tags(self):
        stats = aggregate([node("a", type="aws"), node("b", type="azure"), node("c", type="azure")])
        assert stats.type_counts == {"cloud": 0, "aws": 1, "gcp": 0, "service": 0, "azure": 2}
        assert stats.total_providers == 2
        assert stats.aws_nodes == 1
        assert stats.cloud_nodes == 0

    def test_empty(self):
        stats = aggregate([])
        assert stats.total_alerts == 0
        assert stats.total_providers == 0
        assert stats.service_nodes == 0
