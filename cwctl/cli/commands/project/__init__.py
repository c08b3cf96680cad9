"""Project command group and sub-commands."""

import click

from .create import create
from .validate import validate
from .detect import detect
from .migrate_settings import migrate_settings

__all__ = [
    'project',
    'create',
    'validate',
    'detect',
    'migrate_settings',
]


@click.group()
def project():
    """Create and validate Codewind projects"""
    pass


# Register all sub-commands
project.add_command(create)
project.add_command(validate)
project.add_command(detect)
project.add_command(migrate_settings)
