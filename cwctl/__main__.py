"""Allow running cwctl with ``python -m cwctl``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
