"""Detect project type command."""

import click

from cwctl.cli.helpers import exit_with_error

from ....services.exceptions import ServiceError
from ....services.project_service import check_project_path_exists
from ....utils.project_detector import determine_project_info


@click.command()
@click.argument('path')
def detect(path):
    """Show the language and build type detected for PATH"""
    try:
        check_project_path_exists(path)
    except ServiceError as e:
        exit_with_error(e)

    language, build_type = determine_project_info(path)
    click.echo(f"Language: {language.value}")
    click.echo(f"Build type: {build_type.value}")
