"""List configured containers."""

import click
from rich.console import Console

from ..helpers import build_container_table, load_project_config


@click.command()
def containers():
    """List the containers declared for this project"""
    console = Console()
    config = load_project_config()

    if not config.containers:
        console.print("[yellow]No containers configured.[/yellow]")
        console.print("Use 'agent-workbench config add-container' to declare one.")
        return

    fresh = [spec.to_container() for spec in config.containers]
    console.print(build_container_table(fresh, title="Containers"))
    console.print(f"Boot delay: {config.boot_delay}s | OS: {config.os_label}")
