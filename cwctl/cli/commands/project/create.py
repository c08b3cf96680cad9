"""Create project command."""

import click

from cwctl.cli.helpers import echo_json, exit_with_error, get_http_client

from ....core.constants import DEFAULT_TEMPLATE_BRANCH, DOWNLOAD_TIMEOUT
from ....models.connection import GitCredentials
from ....services.exceptions import ServiceError
from ....services.template_service import download_template


@click.command()
@click.argument('path')
@click.option('--url', '-u', required=True, help='URL of the template repository or archive')
@click.option('--branch', default=DEFAULT_TEMPLATE_BRANCH, show_default=True, help='Branch to download for repository URLs')
@click.option('--username', help='Username for private template repositories')
@click.option('--password', help='Password for private template repositories')
@click.option('--personal-access-token', help='Personal access token for private template repositories')
def create(path, url, branch, username, password, personal_access_token):
    """Download a project template into PATH"""
    if password and not username:
        raise click.UsageError("--password requires --username")

    git_credentials = None
    if username or personal_access_token:
        git_credentials = GitCredentials(
            username=username,
            password=password,
            personal_access_token=personal_access_token,
        )

    try:
        with get_http_client(timeout=DOWNLOAD_TIMEOUT) as client:
            result = download_template(path, url, git_credentials, client=client, branch=branch)
    except ServiceError as e:
        exit_with_error(e)

    echo_json(result)
