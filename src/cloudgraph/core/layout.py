"""
Column layout and edge projection for visible nodes.

x follows hierarchy depth; y is the node's ordinal among visible nodes at
the same depth, in encounter order. Siblings under different parents
therefore interleave by node order rather than by sibling index.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .config import LayoutConfig
from .types import GraphData, HierarchyEntry, PositionedNode, ProjectedEdge


class LayoutEngine:
    """Assigns coordinates to visible nodes."""

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

    def position(self, level: int, ordinal: int) -> Tuple[float, float]:
        cfg = self.config
        return (
            level * cfg.level_spacing + cfg.margin,
            ordinal * cfg.row_spacing + cfg.margin,
        )

    def layout(
        self,
        data: GraphData,
        hierarchy: Dict[str, HierarchyEntry],
        visible: List[str],
        expanded: Iterable[str],
    ) -> List[PositionedNode]:
        """
        Position every visible node.

        Args:
            data: Source graph.
            hierarchy: Output of build_hierarchy.
            visible: Visible ids in encounter order.
            expanded: Currently expanded ids, used for the is_expanded flag.

        Returns:
            One PositionedNode per visible id, in the same order.
        """
        expanded = frozenset(expanded)
        next_row: Dict[int, int] = {}
        positioned = []

        for node_id in visible:
            node = data.get_node(node_id)
            entry = hierarchy.get(node_id)
            if node is None or entry is None:
                continue

            ordinal = next_row.get(entry.level, 0)
            next_row[entry.level] = ordinal + 1

            x, y = self.position(entry.level, ordinal)
            positioned.append(
                PositionedNode.from_node(
                    node, x=x, y=y, level=entry.level, is_expanded=node_id in expanded
                )
            )
        return positioned


def project_edges(data: GraphData, visible: Iterable[str]) -> List[ProjectedEdge]:
    """Edges whose source and target are both visible, in edge order."""
    visible = set(visible)
    return [
        ProjectedEdge.from_edge(edge)
        for edge in data.valid_edges
        if edge.source in visible and edge.target in visible
    ]
