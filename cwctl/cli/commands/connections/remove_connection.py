"""Remove connection command."""

import click
from rich.console import Console

from ....services.exceptions import ServiceError
from ....utils.config_manager import ConfigManager


@click.command('remove')
@click.argument('conid')
@click.pass_context
def remove_connection(ctx, conid):
    """Remove the connection CONID."""
    console = Console()

    try:
        ConfigManager().remove_connection(conid)
    except ServiceError as e:
        console.print(f"[red]Error removing connection: {e}[/red]")
        ctx.exit(1)

    console.print(f"[green]✓ Removed connection '{conid}'[/green]")
