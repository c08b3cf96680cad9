"""List connections command."""

import click
from rich.console import Console
from rich.table import Table

from ....services.exceptions import ServiceError
from ....utils.config_manager import ConfigManager


@click.command('list')
@click.pass_context
def list_connections(ctx):
    """List all configured connections."""
    console = Console()

    try:
        connections = ConfigManager().list_connections()
    except ServiceError as e:
        console.print(f"[red]Error loading connections: {e}[/red]")
        ctx.exit(1)

    table = Table(title="Codewind Connections")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Label", style="green")
    table.add_column("URL", style="white")
    table.add_column("Auth", style="white")

    for connection in connections:
        auth = "token" if connection.access_token else "none"
        table.add_row(connection.id, connection.label, connection.url, auth)

    console.print(table)
