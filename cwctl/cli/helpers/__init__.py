"""CLI Helper Functions for cwctl.

This module provides reusable helper functions for CLI commands so that
every command resolves connections, builds HTTP clients and reports
errors the same way.
"""

import json
import sys
from typing import Any, NoReturn, Optional

import click
import httpx
from pydantic import BaseModel
from tabulate import tabulate

from cwctl.core.http_client import create_client
from cwctl.models.connection import Connection
from cwctl.services.exceptions import ServiceError
from cwctl.utils.config_manager import ConfigManager


def exit_with_error(error: Exception) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def get_connection(conid: str) -> Connection:
    """Resolve a connection ID, exiting with an error if it is unknown."""
    try:
        return ConfigManager().get_connection(conid)
    except ServiceError as e:
        exit_with_error(e)


def get_http_client(timeout: Optional[float] = None) -> httpx.Client:
    """Create the HTTP client for a command."""
    return create_client(timeout=timeout)


def echo_json(model: BaseModel) -> None:
    """Print a model as indented JSON using its wire field names."""
    click.echo(json.dumps(model.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)


# Re-export commonly used functions for convenience
__all__ = [
    'exit_with_error',
    'get_connection',
    'get_http_client',
    'echo_json',
    'print_table',
]
