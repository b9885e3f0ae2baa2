"""cloudgraph: cloud topology drill-down and filtering engine."""

from .core import SAMPLE_DATA, FilterState, GraphData, ViewStateController, compute_view

__version__ = "0.1.0"

__all__ = ["GraphData", "FilterState", "ViewStateController", "compute_view", "SAMPLE_DATA"]
