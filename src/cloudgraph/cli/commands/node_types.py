"""
Types Command - List node type tags available for filtering.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.config import load_config
from ...core.filters import available_node_types
from ...core.graph import TopologyGraph
from ..utils import echo_json, load_topology

console = Console()


@click.command()
@click.option("-i", "--input", "graph_file", default=None, help="Topology JSON/YAML file (default: sample)")
@click.option("-c", "--config", "config_file", default=None, help="Config YAML")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def types(graph_file: Optional[str], config_file: Optional[str], as_json: bool):
    """
    List node types present in the topology.
    """
    data = load_topology(graph_file, load_config(config_file))
    if data is None:
        sys.exit(1)

    graph = TopologyGraph(data)
    rows = [
        {"key": key, "label": label, "count": len(graph.get_nodes_by_type(key))}
        for key, label in available_node_types(data)
    ]

    if as_json:
        echo_json("success", {"types": rows})
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Label")
    table.add_column("Nodes", justify="right")
    for row in rows:
        table.add_row(row["key"], row["label"], str(row["count"]))
    console.print(table)
