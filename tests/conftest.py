"""Shared fixtures for cloudgraph tests."""

import logging

import pytest
from rich.logging import RichHandler

from cloudgraph.core.fixtures import sample_data
from cloudgraph.core.types import GraphData


def make_graph(edges, nodes=None, attrs=None):
    """
    Build GraphData from (source, target) pairs.

    Node ids default to every endpoint in first-seen order; pass ``nodes``
    to control order or add isolated nodes, and ``attrs`` to override
    per-node fields.
    """
    if nodes is None:
        nodes = list(dict.fromkeys(n for edge in edges for n in edge))
    return GraphData.model_validate({
        "nodes": [
            {"id": n, "label": n.upper(), "type": "service", **(attrs or {}).get(n, {})}
            for n in nodes
        ],
        "edges": [{"source": s, "target": t} for s, t in edges],
    })


@pytest.fixture
def sample():
    return sample_data()


@pytest.fixture
def graph_factory():
    return make_graph


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo configure_logging() calls made by CLI group invocations."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)
