"""
cloudgraph CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import initialize, inspect, node_types, validate, view
from .utils import configure_logging


@click.group()
@click.version_option(package_name="cloudgraph")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """cloudgraph: Cloud topology drill-down.

    Lays out a cloud -> account -> service hierarchy, annotated with
    alert and misconfiguration counts, and filters it.

    \b
    Quick Start:
      cloudgraph view
      cloudgraph view --toggle aws1 --issue-type alerts
      cloudgraph inspect aws2
      cloudgraph validate -i topology.json
    """
    configure_logging(verbose)


# Register commands
main.add_command(view.view)
main.add_command(inspect.inspect)
main.add_command(validate.validate)
main.add_command(node_types.types)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
