"""Validate project command."""

import click

from cwctl.cli.helpers import echo_json, exit_with_error, get_connection, get_http_client

from ....core.constants import LOCAL_CONNECTION_ID
from ....models.project import BuildType
from ....services.exceptions import ServiceError
from ....services.project_service import validate_project


@click.command()
@click.argument('path')
@click.option('--conid', default=LOCAL_CONNECTION_ID, show_default=True, help='Connection the project belongs to')
@click.option('--type', 'build_type', type=click.Choice([t.value for t in BuildType]),
              help='Build type to use instead of the detected one')
def validate(path, conid, build_type):
    """Detect the project type of PATH and write its settings file"""
    connection = get_connection(conid)

    try:
        with get_http_client() as client:
            response = validate_project(client, connection, path, build_type=build_type)
    except ServiceError as e:
        exit_with_error(e)

    echo_json(response)
