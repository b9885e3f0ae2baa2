"""
Init Command - Write a starter configuration.

Creates ``.cloudgraph/config.yaml`` with the default layout spacing and
severity thresholds, optionally pointing at a topology file.
"""

from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...core.config import DashboardConfig

console = Console()


def create_gitignore(config_dir: Path):
    """Ensure the .cloudgraph/ directory is ignored by git."""
    gitignore = config_dir.parent / ".gitignore"
    entry = "\n# cloudgraph\n.cloudgraph/\n"

    if not gitignore.exists():
        with open(gitignore, "w") as f:
            f.write(entry)
    else:
        content = gitignore.read_text()
        if ".cloudgraph" not in content:
            with open(gitignore, "a") as f:
                f.write(entry)


def write_config(root_dir: Path, data_file: Optional[str] = None) -> Path:
    """Write the default configuration under ``root_dir``; returns its path."""
    config_dir = root_dir / ".cloudgraph"
    config_file = config_dir / "config.yaml"

    config = DashboardConfig(data_file=data_file).to_dict()

    config_dir.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)

    create_gitignore(config_dir)
    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--data-file", default=None, help="Topology file to use by default")
def init(force: bool, data_file: Optional[str]):
    """
    Initialize cloudgraph in the current directory.
    """
    console.print(Panel.fit("☁️  [bold blue]cloudgraph Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = root_dir / ".cloudgraph" / "config.yaml"

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    if data_file and not Path(data_file).exists():
        console.print(f"[yellow]Data file {data_file} does not exist yet[/yellow]")

    written = write_config(root_dir, data_file)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{written}[/dim]")
