"""Connection management commands for cwctl."""

import click

from .add_connection import add_connection
from .list_connections import list_connections
from .remove_connection import remove_connection


@click.group()
def connections():
    """Manage Codewind connections"""
    pass


connections.add_command(add_connection)
connections.add_command(list_connections)
connections.add_command(remove_connection)

__all__ = ['connections']
