"""Version command for cwctl."""

import click

from cwctl.cli.helpers import echo_json, exit_with_error, get_connection, get_http_client, print_table

from ...core.constants import LOCAL_CONNECTION_ID
from ...services.exceptions import ServiceError
from ...services.version_service import get_container_versions


@click.command()
@click.option('--conid', default=LOCAL_CONNECTION_ID, show_default=True, help='Connection ID to query')
@click.option('--json', 'as_json', is_flag=True, help='Print versions as JSON')
def version(conid, as_json):
    """Show the versions of cwctl and the Codewind containers"""
    connection = get_connection(conid)

    try:
        with get_http_client() as client:
            versions = get_container_versions(connection, client)
    except ServiceError as e:
        exit_with_error(e)

    if as_json:
        echo_json(versions)
        return

    rows = [
        ["cwctl", versions.cwctl_version],
        ["PFE", versions.pfe_version or "unknown"],
        ["Gatekeeper", versions.gatekeeper_version or "unknown"],
        ["Performance", versions.performance_version or "unknown"],
    ]
    click.echo(f"Connection: {connection.id} ({connection.url})")
    print_table(["COMPONENT", "VERSION"], rows)
