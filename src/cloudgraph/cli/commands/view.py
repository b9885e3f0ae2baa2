"""
View Command - Compute and print the current dashboard frame.

Replays a sequence of intents (expand/collapse, toggles, filters) through
the ViewStateController and prints the shown hierarchy plus stats.
"""

import logging
import sys
from typing import Dict, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from ...core.config import load_config
from ...core.controller import ViewStateController
from ...core.filters import active_filter_labels
from ...core.types import IssueType, ViewResult
from ...core.visibility import first_parents
from ..utils import echo_json, load_topology, resolve_node_id

logger = logging.getLogger(__name__)
console = Console()


def render_tree(result: ViewResult, parent_of: Dict[str, str]) -> Tree:
    """Shown nodes nested under the parent that made them visible."""
    tree = Tree("☁️  [bold]Topology[/bold]")
    shown = {n.id: n for n in result.shown_nodes}
    branches = {}

    # Visible nodes arrive parent-before-child along each branch
    for node in sorted(result.shown_nodes, key=lambda n: n.level):
        marker = "▾" if node.is_expanded and node.has_children else ("▸" if node.has_children else "•")
        text = (
            f"{marker} [bold]{node.label}[/bold] [dim]({node.type})[/dim] "
            f"[red]{node.alerts} alerts[/red] [yellow]{node.misconfigs} misconfigs[/yellow]"
        )
        parent = parent_of.get(node.id)
        anchor = branches.get(parent, tree) if parent in shown else tree
        branches[node.id] = anchor.add(text)
    return tree


def render_stats(result: ViewResult) -> Table:
    stats = result.stats
    table = Table(title="Stats", show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Total Alerts", str(stats.total_alerts))
    table.add_row("Misconfigurations", str(stats.total_misconfigurations))
    table.add_row("Critical Issues", str(stats.critical_alerts))
    table.add_row("Providers", str(stats.total_providers))
    for tag, count in stats.type_counts.items():
        table.add_row(f"{tag} nodes", str(count))
    table.add_row("Shown / Hidden", f"{stats.shown_nodes} / {stats.hidden_nodes}")
    return table


@click.command()
@click.option("-i", "--input", "graph_file", default=None, help="Topology JSON/YAML file (default: sample)")
@click.option("-c", "--config", "config_file", default=None, help="Config YAML (default: .cloudgraph/config.yaml)")
@click.option("--expand-all", is_flag=True, help="Expand every node before other intents")
@click.option("--collapse-all", is_flag=True, help="Collapse to roots before other intents")
@click.option("-t", "--toggle", "toggles", multiple=True, help="Toggle a node's expansion (repeatable)")
@click.option("--issue-type", type=click.Choice([t.value for t in IssueType]), default=None)
@click.option("--node-type", default=None, help="Only show nodes of this type tag")
@click.option("--min-alerts", type=float, default=None, help="Minimum alerts to show")
@click.option("--min-misconfigs", type=float, default=None, help="Minimum misconfigs to show")
@click.option("--expanded-only", is_flag=True, help="Hide collapsed nodes that have children")
@click.option("--json", "as_json", is_flag=True, help="Output the view as JSON")
def view(
    graph_file: Optional[str],
    config_file: Optional[str],
    expand_all: bool,
    collapse_all: bool,
    toggles: Tuple[str, ...],
    issue_type: Optional[str],
    node_type: Optional[str],
    min_alerts: Optional[float],
    min_misconfigs: Optional[float],
    expanded_only: bool,
    as_json: bool,
):
    """
    Show the visible, filtered topology and its stats.
    """
    if expand_all and collapse_all:
        raise click.UsageError("--expand-all and --collapse-all are mutually exclusive")

    config = load_config(config_file)
    data = load_topology(graph_file, config)
    if data is None:
        sys.exit(1)

    controller = ViewStateController(data, config)

    if expand_all:
        controller.expand_all()
    elif collapse_all:
        controller.collapse_all()

    for name in toggles:
        node_id = resolve_node_id(data, name)
        if node_id is None:
            logger.warning(f"No node found matching '{name}', skipping toggle")
            continue
        controller.toggle_expand(node_id)

    patch = {
        "issue_type": issue_type,
        "node_type": node_type,
        "alert_threshold": min_alerts,
        "misconfig_threshold": min_misconfigs,
        "expanded_only": expanded_only or None,
    }
    patch = {k: v for k, v in patch.items() if v is not None}
    if patch:
        controller.set_filter(patch)

    result = controller.view

    if as_json:
        payload = result.model_dump()
        payload["expanded"] = sorted(controller.expanded)
        payload["filters"] = controller.filters.model_dump(mode="json")
        payload["active_filters"] = active_filter_labels(controller.filters)
        echo_json("success", payload)
        return

    console.print(render_tree(result, first_parents(data)))
    console.print(render_stats(result))

    labels = active_filter_labels(controller.filters)
    if labels:
        console.print(f"Active filters: [cyan]{', '.join(labels)}[/cyan]")
