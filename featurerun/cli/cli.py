"""Main CLI module for featurerun."""

import click

from .commands.report import report

@click.group()
@click.version_option(package_name="featurerun")
def cli():
    """featurerun CLI for building reports from recorded feature runs."""
    pass

# Register commands
cli.add_command(report)

if __name__ == '__main__':
    cli()
