"""
Topology index backed by rustworkx.

Keeps a bimap between string node ids and rustworkx integer indices over the
sanitised graph (dangling edges already dropped). Used for subtree rollups,
id resolution and structural diagnostics; the view pipeline itself works
from edge order and does not depend on it.
"""

from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Set

import rustworkx as rx

from .types import GraphData, GraphEdge, GraphNode


class TopologyGraph:
    """
    Directed parent -> child graph over one GraphData.

    Features:
    - O(1) node lookup via ID-to-Index bimap
    - Rust backend for reachability queries
    - Cycle detection via strongly connected components
    """

    def __init__(self, data: Optional[GraphData] = None):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}
        self._nodes_by_type: Dict[str, Set[str]] = defaultdict(set)
        if data is not None:
            self.load(data)

    def load(self, data: GraphData) -> None:
        for node in data.iter_nodes():
            self.add_node(node)
        for edge in data.valid_edges:
            self.add_edge(edge)

    def add_node(self, node: GraphNode) -> None:
        """Add or update a node."""
        if node.id in self._id_to_idx:
            idx = self._id_to_idx[node.id]
            previous: GraphNode = self._graph[idx]
            self._nodes_by_type[previous.type].discard(node.id)
            self._graph[idx] = node
        else:
            idx = self._graph.add_node(node)
            self._id_to_idx[node.id] = idx
            self._idx_to_id[idx] = node.id
        self._nodes_by_type[node.type].add(node.id)

    def add_edge(self, edge: GraphEdge) -> None:
        """Add a parent -> child edge; edges to unknown ids are ignored."""
        if edge.source not in self._id_to_idx or edge.target not in self._id_to_idx:
            return
        self._graph.add_edge(self._id_to_idx[edge.source], self._id_to_idx[edge.target], edge)

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def get_nodes_by_type(self, node_type: str) -> List[GraphNode]:
        nodes = []
        for node_id in sorted(self._nodes_by_type.get(node_type, set())):
            node = self.get_node(node_id)
            if node:
                nodes.append(node)
        return nodes

    def find_nodes(self, pattern: str) -> List[str]:
        """
        Find nodes matching a substring pattern.

        Case-insensitive; searches ids and labels.
        """
        pattern_lower = pattern.lower()
        return [
            node.id for node in self.iter_nodes()
            if pattern_lower in node.id.lower() or pattern_lower in node.label.lower()
        ]

    def descendants(self, node_id: str) -> Set[str]:
        """All ids strictly reachable downstream."""
        if node_id not in self._id_to_idx:
            return set()
        indices = rx.descendants(self._graph, self._id_to_idx[node_id])
        return {self._idx_to_id[idx] for idx in indices}

    def ancestors(self, node_id: str) -> Set[str]:
        """All ids strictly reaching this node."""
        if node_id not in self._id_to_idx:
            return set()
        indices = rx.ancestors(self._graph, self._id_to_idx[node_id])
        return {self._idx_to_id[idx] for idx in indices}

    def cyclic_components(self) -> List[List[str]]:
        """Strongly connected components that contain a cycle, ids sorted."""
        components = []
        for component in rx.strongly_connected_components(self._graph):
            if len(component) > 1 or self._graph.has_edge(component[0], component[0]):
                components.append(sorted(self._idx_to_id[idx] for idx in component))
        return sorted(components)

    def is_acyclic(self) -> bool:
        return rx.is_directed_acyclic_graph(self._graph)

    def iter_nodes(self) -> Iterator[GraphNode]:
        return iter(self._graph.nodes())

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        orphans = len([
            idx for idx in self._graph.node_indices()
            if self._graph.in_degree(idx) == 0 and self._graph.out_degree(idx) == 0
        ])
        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "nodes_by_type": {t: len(ids) for t, ids in self._nodes_by_type.items() if ids},
            "backend": "rustworkx",
            "orphans": orphans,
        }
