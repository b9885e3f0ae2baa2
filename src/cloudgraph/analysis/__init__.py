"""Read-only analyses over a topology: node inspection and diagnostics."""

from .diagnostics import DiagnosticsReport, diagnose
from .inspector import NodeDetails, NodeInspector, Severity, classify, slugify

__all__ = [
    "DiagnosticsReport", "diagnose",
    "NodeDetails", "NodeInspector", "Severity", "classify", "slugify",
]
