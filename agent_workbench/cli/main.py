"""Main CLI entry point for Agent Workbench."""

import logging

import click

from .commands.config import config
from .commands.containers import containers
from .commands.demo import demo
from .commands.shell import shell

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """Agent Workbench - Simulated AI agent containers talking over MCP"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


# Register commands
cli.add_command(containers)
cli.add_command(config)
cli.add_command(demo)
cli.add_command(shell)


if __name__ == '__main__':
    cli()
