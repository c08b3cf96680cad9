"""Main CLI entry point for cwctl."""

import logging

import click

from .. import __version__
from .commands.connections import connections
from .commands.project import project
from .commands.version import version


@click.group()
@click.version_option(__version__, prog_name='cwctl')
@click.option('--verbose', '-v', is_flag=True, help='Log HTTP requests and file operations')
def cli(verbose):
    """cwctl - Manage Codewind projects and connections"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


# Register commands
cli.add_command(version)
cli.add_command(project)
cli.add_command(connections)


if __name__ == '__main__':
    cli()
