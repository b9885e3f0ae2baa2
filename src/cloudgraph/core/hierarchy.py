"""
Hierarchy inference.

Turns the flat edge list into a rooted forest. Roots are nodes that never
appear as an edge target. Each reachable node is assigned a level, a parent
and a sibling index by a depth-first walk; the first path from a root wins
when the edge set is not a tree.
"""

import logging
from collections import defaultdict
from typing import Dict, List

from .types import GraphData, HierarchyEntry

logger = logging.getLogger(__name__)


def find_roots(data: GraphData) -> List[str]:
    """Ids with no incoming edge, in node order."""
    targets = {edge.target for edge in data.valid_edges}
    return [node_id for node_id in data.node_ids if node_id not in targets]


def children_index(data: GraphData) -> Dict[str, List[str]]:
    """Map each source id to its child ids, in edge order."""
    index: Dict[str, List[str]] = defaultdict(list)
    for edge in data.valid_edges:
        index[edge.source].append(edge.target)
    return dict(index)


def build_hierarchy(data: GraphData) -> Dict[str, HierarchyEntry]:
    """
    Assign a HierarchyEntry to every node reachable from a root.

    The walk uses an explicit stack and reproduces recursive pre-order: a
    root's whole subtree is assigned before the next root is entered, and a
    child's subtree before its next sibling. Nodes already visited are never
    reassigned, which also guards against cycles.

    Returns:
        Entries keyed by node id. Unreachable nodes are absent.
    """
    kids = children_index(data)
    hierarchy: Dict[str, HierarchyEntry] = {}
    visited = set()

    for root_index, root_id in enumerate(find_roots(data)):
        hierarchy[root_id] = HierarchyEntry(level=0, sibling_index=root_index)
        visited.add(root_id)

        # (node_id, level, parent_id)
        stack = [(child, 1, root_id) for child in reversed(kids.get(root_id, []))]
        while stack:
            node_id, level, parent_id = stack.pop()
            if node_id in visited:
                continue
            visited.add(node_id)

            hierarchy[node_id] = HierarchyEntry(
                level=level,
                parent_id=parent_id,
                sibling_index=kids[parent_id].index(node_id),
            )
            for child in reversed(kids.get(node_id, [])):
                if child not in visited:
                    stack.append((child, level + 1, node_id))

    unreachable = len(data.node_ids) - len(hierarchy)
    if unreachable:
        logger.debug(f"{unreachable} node(s) unreachable from any root")
    return hierarchy
