"""
View pipeline.

``compute_view`` is the single pure entry point used by renderers:

    GraphData -> hierarchy -> visible set -> layout + edges -> filters -> stats

It never mutates its inputs and returns equal results for equal inputs.
"""

from typing import Iterable, Optional

from .config import LayoutConfig
from .filters import apply_filters
from .hierarchy import build_hierarchy
from .layout import LayoutEngine, project_edges
from .stats import CRITICAL_ALERT_THRESHOLD, aggregate
from .types import FilterState, GraphData, ViewResult
from .visibility import resolve_visible


def compute_view(
    data: GraphData,
    expanded: Iterable[str],
    filters: Optional[FilterState] = None,
    layout: Optional[LayoutConfig] = None,
    critical_threshold: int = CRITICAL_ALERT_THRESHOLD,
) -> ViewResult:
    """
    Compute positioned nodes, projected edges and stats for one frame.

    Args:
        data: The topology.
        expanded: Ids whose direct children may be shown.
        filters: Active filters; defaults to the all-permissive state.
        layout: Spacing configuration.
        critical_threshold: Alert count above which a node is critical.
    """
    expanded = frozenset(expanded)
    filters = filters or FilterState()

    hierarchy = build_hierarchy(data)
    visible = resolve_visible(data, hierarchy, expanded)

    positioned = LayoutEngine(layout).layout(data, hierarchy, visible, expanded)
    edges = project_edges(data, visible)

    nodes = apply_filters(positioned, filters)
    stats = aggregate(nodes, critical_threshold)

    return ViewResult(nodes=nodes, edges=edges, stats=stats)
