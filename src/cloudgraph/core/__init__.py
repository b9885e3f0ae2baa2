"""
Core modules for cloudgraph.

This package contains the view pipeline and its state:
- types: Input and derived data structures (GraphData, FilterState, ...)
- hierarchy / visibility / layout / filters / stats: pipeline stages
- view: The compute_view entry point
- controller: ViewStateController, owner of expansion and filter state
- graph: rustworkx-backed topology index
"""

from .config import DashboardConfig, LayoutConfig, SeverityConfig, load_config
from .controller import ViewStateController
from .filters import (
    active_filter_count, active_filter_labels, apply_filters,
    available_node_types, threshold_bounds,
)
from .fixtures import SAMPLE_DATA, sample_data
from .graph import TopologyGraph
from .hierarchy import build_hierarchy, find_roots
from .layout import LayoutEngine, project_edges
from .loader import load_graph_data
from .result import Err, Ok
from .stats import aggregate
from .types import (
    FilterState, GraphData, GraphEdge, GraphNode, HierarchyEntry, IssueType,
    PositionedNode, ProjectedEdge, Stats, ViewResult,
)
from .view import compute_view
from .visibility import default_expanded, resolve_visible

__all__ = [
    # Types
    "GraphData", "GraphNode", "GraphEdge", "HierarchyEntry", "FilterState",
    "IssueType", "PositionedNode", "ProjectedEdge", "Stats", "ViewResult",
    # Pipeline
    "build_hierarchy", "find_roots", "resolve_visible", "default_expanded",
    "LayoutEngine", "project_edges", "apply_filters", "aggregate", "compute_view",
    "available_node_types", "active_filter_labels", "active_filter_count",
    "threshold_bounds",
    # State
    "ViewStateController",
    # Config / IO
    "DashboardConfig", "LayoutConfig", "SeverityConfig", "load_config",
    "load_graph_data", "Ok", "Err", "SAMPLE_DATA", "sample_data",
    # Graph
    "TopologyGraph",
]
