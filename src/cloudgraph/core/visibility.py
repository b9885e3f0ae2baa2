"""
Visibility resolution.

A node is visible when it is reachable and either has no incoming edge or
its (first) parent is expanded. Only the immediate parent is consulted, so
disclosure happens one level at a time.
"""

from typing import Dict, FrozenSet, Iterable, List

from .hierarchy import children_index, find_roots
from .types import GraphData, HierarchyEntry


def first_parents(data: GraphData) -> Dict[str, str]:
    """Map each target id to the source of its first incoming edge."""
    parents: Dict[str, str] = {}
    for edge in data.valid_edges:
        parents.setdefault(edge.target, edge.source)
    return parents


def resolve_visible(
    data: GraphData,
    hierarchy: Dict[str, HierarchyEntry],
    expanded: Iterable[str],
) -> List[str]:
    """
    Ids of visible nodes, in node order.

    Nodes without a hierarchy entry are never visible.
    """
    expanded = frozenset(expanded)
    parents = first_parents(data)

    visible = []
    for node_id in data.node_ids:
        if node_id not in hierarchy:
            continue
        parent = parents.get(node_id)
        if parent is None or parent in expanded:
            visible.append(node_id)
    return visible


def default_expanded(data: GraphData) -> FrozenSet[str]:
    """Initial expansion: every root plus each root's direct children."""
    kids = children_index(data)
    expanded = set()
    for root_id in find_roots(data):
        expanded.add(root_id)
        expanded.update(kids.get(root_id, []))
    return frozenset(expanded)
