"""Migrate legacy project settings command."""

from pathlib import Path

import click

from cwctl.cli.helpers import exit_with_error

from ....core.constants import LEGACY_SETTINGS_FILE_NAME, SETTINGS_FILE_NAME
from ....services.exceptions import ServiceError
from ....services.project_service import check_project_path_exists, rename_legacy_settings


@click.command('migrate-settings')
@click.argument('path')
def migrate_settings(path):
    """Rename the legacy settings file of PATH to the current name"""
    try:
        check_project_path_exists(path)
        new_path = Path(path) / SETTINGS_FILE_NAME
        if new_path.exists():
            click.echo(f"{new_path} already exists, nothing to migrate")
            return
        rename_legacy_settings(Path(path) / LEGACY_SETTINGS_FILE_NAME, new_path)
    except ServiceError as e:
        exit_with_error(e)

    click.echo(f"Migrated {LEGACY_SETTINGS_FILE_NAME} to {new_path}")
