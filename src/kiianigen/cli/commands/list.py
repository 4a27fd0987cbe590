"""List command implementation."""

import click

from kiianigen.animation import get_registry


@click.command(name="list")
@click.option('--all', 'show_all', is_flag=True, help='Include internal diagnostic generators')
def list_generators(show_all: bool):
    """List available animation generators."""
    registry = get_registry()
    names = registry.names(include_internal=show_all)

    click.echo("Available generators:\n")
    for name in names:
        marker = " (internal)" if registry.is_internal(name) else ""
        click.echo(f"  {name}{marker}")

    click.echo("\nUse 'all' to generate every generator or 'conf' to use the conf file.")
