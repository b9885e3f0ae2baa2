"""
Inspect Command - Detail view for a single node.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from ...analysis.inspector import NodeInspector, Severity
from ...core.config import load_config
from ...core.visibility import default_expanded
from ..utils import echo_error, echo_json, load_topology, resolve_node_id

console = Console()

SEVERITY_STYLE = {
    Severity.CRITICAL: "bold red",
    Severity.WARNING: "yellow",
    Severity.NORMAL: "green",
}


@click.command()
@click.argument("node")
@click.option("-i", "--input", "graph_file", default=None, help="Topology JSON/YAML file (default: sample)")
@click.option("-c", "--config", "config_file", default=None, help="Config YAML")
@click.option("--json", "as_json", is_flag=True, help="Output details as JSON")
def inspect(node: str, graph_file: Optional[str], config_file: Optional[str], as_json: bool):
    """
    Show details for NODE (id or label fragment).
    """
    config = load_config(config_file)
    data = load_topology(graph_file, config)
    if data is None:
        sys.exit(1)

    node_id = resolve_node_id(data, node)
    if node_id is None:
        if as_json:
            echo_json("error", {"message": f"Node not found: {node}"})
        else:
            echo_error(f"Node not found: {node}")
        sys.exit(1)

    inspector = NodeInspector(data, config.severity)
    details = inspector.inspect(node_id, expanded=default_expanded(data))

    if as_json:
        payload = details.model_dump(mode="json")
        payload["breadcrumb"] = [n.id for n in inspector.breadcrumb(node_id)]
        echo_json("success", payload)
        return

    style = SEVERITY_STYLE[details.severity]
    path = inspector.breadcrumb(node_id)
    lines = [
        f"[bold]{details.label}[/bold]  [dim]{details.type.upper()}[/dim]",
        f"Alerts: [red]{details.alerts}[/red]   Misconfigs: [yellow]{details.misconfigs}[/yellow]",
        f"Status: [{style}]{details.severity.value}[/{style}]",
        f"Resource ID: {details.slug}",
        f"Path: {' / '.join(n.label for n in path) or '(unreachable)'}",
    ]
    # Shared nodes have upstream ids off the breadcrumb path
    off_path = [nid for nid in details.ancestors if nid not in {n.id for n in path}]
    if off_path:
        lines.append(f"Also under: {', '.join(off_path)}")
    if details.children:
        lines.append(f"Children: {details.children_count} ({', '.join(details.children)})")
        lines.append(f"Expanded: {'Yes' if details.is_expanded else 'No'}")
    if details.descendants:
        lines.append(
            f"Subtree: {len(details.descendants)} node(s), "
            f"{details.subtree_alerts} alerts, {details.subtree_misconfigs} misconfigs"
        )
    console.print(Panel("\n".join(lines), title=details.id, border_style="blue"))
