"""Quick start walkthrough command."""

import click
from rich.console import Console

from ..helpers import create_workbench, format_message_table, print_terminal
from ...core.constants import BOOT_DELAY_ENVVAR, DEMO_COMMANDS
from ...services.exceptions import WorkbenchError


@click.command()
@click.option('--boot-delay', type=click.FloatRange(min=0), envvar=BOOT_DELAY_ENVVAR,
              help='Override the simulated boot delay in seconds')
@click.pass_context
def demo(ctx, boot_delay):
    """Start every container, run the quick start commands and show MCP traffic"""
    console = Console()
    workbench = create_workbench(boot_delay)

    try:
        containers = workbench.list_containers()
        if not containers:
            console.print("[yellow]No containers configured.[/yellow]")
            return

        for container in containers:
            workbench.start_container(container.id)
        with console.status(f"Booting {len(containers)} container(s)..."):
            workbench.wait_for_startups()

        for container in containers:
            for command in DEMO_COMMANDS:
                workbench.execute(container.id, command)

        snapshot = workbench.snapshot()
        for container in snapshot.containers:
            print_terminal(console, container)
            console.print()

        console.print("[bold]MCP Communication[/bold]")
        if snapshot.messages:
            click.echo(format_message_table(snapshot.messages, snapshot.containers))
        else:
            console.print("[yellow]No MCP messages. Configure at least two containers to see agents share context.[/yellow]")

    except WorkbenchError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(1)
    finally:
        workbench.close()
