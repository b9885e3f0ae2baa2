"""
Topology diagnostics.

The view pipeline degrades silently on malformed input. This module reports
what was degraded so operators can fix the source data.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from ..core.graph import TopologyGraph
from ..core.hierarchy import build_hierarchy, find_roots
from ..core.types import GraphData, GraphEdge

logger = logging.getLogger(__name__)


class DiagnosticsReport(BaseModel):
    total_nodes: int
    total_edges: int
    roots: List[str] = Field(default_factory=list)
    dangling_edges: List[GraphEdge] = Field(default_factory=list)
    duplicate_ids: List[str] = Field(default_factory=list)
    unreachable_ids: List[str] = Field(default_factory=list)
    multi_parent_ids: List[str] = Field(default_factory=list)
    cyclic_components: List[List[str]] = Field(default_factory=list)
    is_acyclic: bool = True
    nodes_by_type: Dict[str, int] = Field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        return not (
            self.dangling_edges
            or self.duplicate_ids
            or self.unreachable_ids
            or self.multi_parent_ids
            or self.cyclic_components
        )

    def issues(self) -> List[str]:
        """Human-readable problem summary, empty when clean."""
        found = []
        if self.dangling_edges:
            found.append(f"{len(self.dangling_edges)} dangling edge(s) ignored")
        if self.duplicate_ids:
            found.append(f"duplicate id(s), last definition wins: {', '.join(self.duplicate_ids)}")
        if self.unreachable_ids:
            found.append(f"unreachable from any root: {', '.join(self.unreachable_ids)}")
        if self.multi_parent_ids:
            found.append(f"multiple parents, first visit wins: {', '.join(self.multi_parent_ids)}")
        for component in self.cyclic_components:
            found.append(f"cycle: {' -> '.join(component)}")
        return found


def diagnose(data: GraphData) -> DiagnosticsReport:
    """Inspect a topology for the conditions the pipeline tolerates."""
    graph = TopologyGraph(data)
    hierarchy = build_hierarchy(data)

    parents = defaultdict(set)
    for edge in data.valid_edges:
        parents[edge.target].add(edge.source)

    report = DiagnosticsReport(
        total_nodes=graph.node_count,
        total_edges=len(data.edges),
        roots=find_roots(data),
        dangling_edges=data.dangling_edges(),
        duplicate_ids=data.duplicate_ids(),
        unreachable_ids=[nid for nid in data.node_ids if nid not in hierarchy],
        multi_parent_ids=[nid for nid in data.node_ids if len(parents.get(nid, ())) > 1],
        cyclic_components=graph.cyclic_components(),
        is_acyclic=graph.is_acyclic(),
        nodes_by_type=graph.get_stats()["nodes_by_type"],
    )
    for issue in report.issues():
        logger.debug(issue)
    return report


def diagnostics_to_dict(report: DiagnosticsReport) -> Dict[str, Any]:
    data = report.model_dump()
    data["issues"] = report.issues()
    return data
