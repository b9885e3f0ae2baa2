"""
Validate Command - Report tolerated defects in a topology file.

Dangling edges, duplicate ids, unreachable nodes, multi-parent nodes and
cycles are all handled silently by the view pipeline; this command makes
them visible.
"""

import sys
from typing import Optional

import click
from rich.console import Console

from ...analysis.diagnostics import diagnose, diagnostics_to_dict
from ...core.config import load_config
from ..utils import echo_json, echo_success, echo_warning, load_topology

console = Console()


@click.command()
@click.option("-i", "--input", "graph_file", default=None, help="Topology JSON/YAML file (default: sample)")
@click.option("-c", "--config", "config_file", default=None, help="Config YAML")
@click.option("--strict", is_flag=True, help="Exit with code 1 if any issue is found")
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON")
def validate(graph_file: Optional[str], config_file: Optional[str], strict: bool, as_json: bool):
    """
    Check a topology for structural problems.
    """
    config = load_config(config_file)
    data = load_topology(graph_file, config)
    if data is None:
        sys.exit(1)

    report = diagnose(data)

    if as_json:
        echo_json("success", diagnostics_to_dict(report))
    else:
        console.print(
            f"[bold]{report.total_nodes}[/bold] nodes, [bold]{report.total_edges}[/bold] edges, "
            f"roots: [cyan]{', '.join(report.roots) or '-'}[/cyan]"
        )
        if report.is_clean:
            echo_success("No issues found")
        for issue in report.issues():
            echo_warning(issue)

    if strict and not report.is_clean:
        sys.exit(1)
