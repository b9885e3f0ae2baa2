"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, logging setup, topology loading and node id resolution
used across the cloudgraph commands.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import DashboardConfig
from ..core.fixtures import sample_data
from ..core.graph import TopologyGraph
from ..core.loader import load_graph_data
from ..core.types import GraphData

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Route logs to stderr through rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_json(status: str, payload: Dict[str, Any]) -> None:
    """Emit the standard JSON envelope on stdout."""
    key = "data" if status == "success" else "error"
    click.echo(json.dumps({"meta": {"status": status}, key: payload}, default=str))


def load_topology(graph_file: Optional[str], config: DashboardConfig) -> Optional[GraphData]:
    """
    Resolve the topology for a command.

    Precedence: explicit ``--input`` path, then ``data_file`` from config,
    then the built-in sample.

    Returns:
        The loaded GraphData, or None if an explicit source failed to load
        (the error has already been printed).
    """
    source = graph_file or config.data_file
    if not source:
        return sample_data()

    result = load_graph_data(Path(source))
    if result.is_err():
        echo_error(result.error)
        return None
    return result.unwrap()


def resolve_node_id(data: GraphData, name: str) -> Optional[str]:
    """
    Resolve a user-supplied name to a node id.

    Exact id first, then a case-insensitive substring match on id or label.
    Ambiguous matches use the first hit in node order.
    """
    if data.has_node(name):
        return name

    matches = TopologyGraph(data).find_nodes(name)
    if not matches:
        return None

    exact_label = next(
        (m for m in matches if data.get_node(m).label.lower() == name.lower()), None
    )
    if exact_label:
        return exact_label

    if len(matches) > 1:
        logger.warning(f"Ambiguous node '{name}'. Using first match: {matches[0]}")
    return matches[0]
