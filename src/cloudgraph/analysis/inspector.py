"""
Node Inspection.

Builds the detail record shown when a node is selected: severity band,
slug, children, expansion state and rolled-up totals for everything below
the node.
"""

import re
from enum import StrEnum
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from ..core.config import SeverityConfig
from ..core.graph import TopologyGraph
from ..core.hierarchy import build_hierarchy
from ..core.types import GraphData, GraphNode


class Severity(StrEnum):
    CRITICAL = "Critical"
    WARNING = "Warning"
    NORMAL = "Normal"


class NodeDetails(BaseModel):
    """Everything the detail panel needs for one node."""
    id: str
    label: str
    type: str
    slug: str
    alerts: int
    misconfigs: int
    severity: Severity
    children: List[str] = Field(default_factory=list)
    children_count: int = 0
    is_expanded: bool = False
    level: Optional[int] = None
    parent_id: Optional[str] = None
    ancestors: List[str] = Field(default_factory=list)
    descendants: List[str] = Field(default_factory=list)
    subtree_alerts: int = 0
    subtree_misconfigs: int = 0


def classify(alerts: int, config: Optional[SeverityConfig] = None) -> Severity:
    """Severity band for an alert count (strictly-greater comparisons)."""
    config = config or SeverityConfig()
    if alerts > config.critical_alerts:
        return Severity.CRITICAL
    if alerts > config.warning_alerts:
        return Severity.WARNING
    return Severity.NORMAL


def slugify(label: str) -> str:
    return re.sub(r"\s+", "-", label.lower())


class NodeInspector:
    """
    Answers detail queries against one topology.

    The rustworkx index and hierarchy are built once per inspector, so
    callers inspecting many nodes should reuse the instance.
    """

    def __init__(self, data: GraphData, severity: Optional[SeverityConfig] = None):
        self.data = data
        self.severity = severity or SeverityConfig()
        self.graph = TopologyGraph(data)
        self.hierarchy = build_hierarchy(data)

    def inspect(self, node_id: str, expanded: Iterable[str] = ()) -> Optional[NodeDetails]:
        node = self.data.get_node(node_id)
        if node is None:
            return None

        # Keep node order for stable output
        below = self.graph.descendants(node_id)
        descendants = [nid for nid in self.data.node_ids if nid in below]
        subtree = [self.data.get_node(nid) for nid in descendants]
        above = self.graph.ancestors(node_id)

        entry = self.hierarchy.get(node_id)
        return NodeDetails(
            id=node.id,
            label=node.label,
            type=node.type,
            slug=slugify(node.label),
            alerts=node.alerts,
            misconfigs=node.misconfigs,
            severity=classify(node.alerts, self.severity),
            children=list(node.children),
            children_count=len(node.children),
            is_expanded=node_id in set(expanded),
            level=entry.level if entry else None,
            parent_id=entry.parent_id if entry else None,
            ancestors=[nid for nid in self.data.node_ids if nid in above],
            descendants=descendants,
            subtree_alerts=node.alerts + sum(n.alerts for n in subtree),
            subtree_misconfigs=node.misconfigs + sum(n.misconfigs for n in subtree),
        )

    def breadcrumb(self, node_id: str) -> List[GraphNode]:
        """Nodes from the root down to ``node_id`` along hierarchy parents."""
        path: List[GraphNode] = []
        current: Optional[str] = node_id
        while current is not None and current in self.hierarchy:
            path.append(self.data.get_node(current))
            current = self.hierarchy[current].parent_id
        return list(reversed(path))
