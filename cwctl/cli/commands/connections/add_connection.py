"""Add connection command."""

import click
from rich.console import Console

from ....models.connection import Connection
from ....services.exceptions import ServiceError
from ....utils.config_manager import ConfigManager


@click.command('add')
@click.argument('conid')
@click.argument('url')
@click.option('--label', default='', help='Display name for the connection')
@click.option('--access-token', envvar='CWCTL_ACCESS_TOKEN', help='Bearer token sent with every request')
@click.pass_context
def add_connection(ctx, conid, url, label, access_token):
    """Add or replace the connection CONID pointing at URL."""
    console = Console()

    try:
        connection = Connection(id=conid, label=label or conid, url=url, access_token=access_token)
        ConfigManager().add_connection(connection)
    except ServiceError as e:
        console.print(f"[red]Error saving connection: {e}[/red]")
        ctx.exit(1)

    console.print(f"[green]✓ Saved connection '{conid}'[/green]")
