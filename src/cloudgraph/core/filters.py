"""
Filter Engine.

Filters only flag nodes as hidden; they never drop them from the layout, so
positions stay stable while the user adjusts criteria.
"""

import logging
from typing import Dict, List, Tuple

from .types import FilterState, GraphData, IssueType, PositionedNode, Stats

logger = logging.getLogger(__name__)


def is_hidden(node: PositionedNode, filters: FilterState) -> bool:
    """True if the node fails any active predicate."""
    if filters.issue_type == IssueType.ALERTS and node.alerts == 0:
        return True
    if filters.issue_type == IssueType.MISCONFIGURATIONS and node.misconfigs == 0:
        return True
    if filters.node_type != "all" and node.type != filters.node_type:
        return True
    if node.alerts < filters.alert_threshold:
        return True
    if node.misconfigs < filters.misconfig_threshold:
        return True
    if filters.expanded_only and node.has_children and not node.is_expanded:
        return True
    return False


def apply_filters(
    nodes: List[PositionedNode], filters: FilterState
) -> List[PositionedNode]:
    """Return copies of ``nodes`` with the hidden flag set."""
    flagged = [
        node.model_copy(update={"hidden": is_hidden(node, filters)})
        for node in nodes
    ]
    hidden = sum(1 for n in flagged if n.hidden)
    if hidden:
        logger.debug(f"Filters hide {hidden} of {len(flagged)} visible node(s)")
    return flagged


def available_node_types(data: GraphData) -> List[Tuple[str, str]]:
    """(key, label) for each type tag present, in first-appearance order."""
    seen: Dict[str, str] = {}
    for node in data.iter_nodes():
        if node.type not in seen:
            seen[node.type] = node.type[:1].upper() + node.type[1:]
    return list(seen.items())


def active_filter_labels(filters: FilterState) -> List[str]:
    """Short badge text for each non-default filter."""
    labels = []
    if filters.issue_type != IssueType.ALL:
        labels.append(str(filters.issue_type))
    if filters.node_type != "all":
        labels.append(f"{filters.node_type} nodes")
    if filters.alert_threshold > 0:
        labels.append(f"≥{filters.alert_threshold} alerts")
    if filters.misconfig_threshold > 0:
        labels.append(f"≥{filters.misconfig_threshold} misconfigs")
    if filters.expanded_only:
        labels.append("expanded only")
    return labels


def active_filter_count(filters: FilterState) -> int:
    return len(active_filter_labels(filters))


def threshold_bounds(stats: Stats) -> Tuple[float, float]:
    """Upper bounds for the alert and misconfig threshold sliders."""
    return (
        max(stats.total_alerts / 10, 100),
        max(stats.total_misconfigurations / 10, 20),
    )
