"""Interactive terminal shell for workbench containers."""

from typing import Optional

import click
import questionary
from rich.console import Console

from ..helpers import (
    build_container_table,
    create_workbench,
    format_message_table,
    print_terminal,
)
from ...core.constants import BOOT_DELAY_ENVVAR
from ...core.orchestrator import SessionOrchestrator
from ...services.exceptions import WorkbenchError

SHELL_HELP = """Lines starting with ':' control the workbench, anything else is
typed into the selected container's terminal.

  :ps              list containers
  :start [ID]      start a container (default: selected)
  :stop [ID]       stop a container (default: selected)
  :use [ID]        select a container (prompts when ID is omitted)
  :wait            wait for starting containers to finish booting
  :log [ID]        print a container's full terminal log
  :messages [ID]   list MCP messages, optionally only those for one container
  :help            show this help
  :exit, :quit     leave the shell
"""


class WorkbenchShell:
    """Read-eval loop over a workbench's terminals."""

    def __init__(self, workbench: SessionOrchestrator, console: Console, selected: Optional[str] = None):
        self.workbench = workbench
        self.console = console
        containers = workbench.list_containers()
        self.selected = selected or (containers[0].id if containers else None)
        self.commands = {
            'ps': self.ps,
            'start': self.start,
            'stop': self.stop,
            'use': self.use,
            'wait': self.wait,
            'log': self.log,
            'messages': self.messages,
            'help': self.help,
        }

    def prompt_text(self) -> str:
        if self.selected is None:
            return "workbench> "
        container = self.workbench.get_container(self.selected)
        if container.is_running:
            return container.prompt
        return f"[{container.name} ({container.status.value})] "

    def handle(self, line: str) -> bool:
        """Handle one input line. Returns False when the shell should exit."""
        line = line.strip()
        if not line.startswith(':'):
            self.submit(line)
            return True

        name, _, argument = line[1:].partition(' ')
        argument = argument.strip() or None
        if name in ('exit', 'quit'):
            return False
        handler = self.commands.get(name)
        if handler is None:
            self.console.print(f"[red]Unknown shell command ':{name}'. Try :help[/red]")
            return True
        try:
            handler(argument)
        except WorkbenchError as e:
            self.console.print(f"[red]Error: {e}[/red]")
        return True

    def submit(self, command: str) -> None:
        if not command:
            return
        if self.selected is None:
            self.console.print("[yellow]No container selected. Use :use ID[/yellow]")
            return
        try:
            before = self.workbench.get_container(self.selected).session_log
            self.workbench.set_terminal_input(self.selected, command)
            container = self.workbench.submit_terminal_input(self.selected).container(self.selected)
        except WorkbenchError as e:
            self.console.print(f"[red]Error: {e}[/red]")
            return

        log = container.session_log
        if log[:len(before)] == before:
            new_lines = log[len(before):]
        else:
            new_lines = log
        # The trailing prompt is shown by the next input prompt.
        if new_lines and new_lines[-1] == container.prompt:
            new_lines = new_lines[:-1]
        for line in new_lines:
            self.console.print(line, markup=False, emoji=False, highlight=False)

    def ps(self, argument):
        self.console.print(build_container_table(self.workbench.list_containers()))

    def _target(self, argument) -> Optional[str]:
        container_id = argument or self.selected
        if container_id is None:
            self.console.print("[yellow]No container selected. Use :use ID[/yellow]")
        return container_id

    def start(self, argument):
        container_id = self._target(argument)
        if container_id is None:
            return
        self.workbench.start_container(container_id)
        self.console.print(f"[yellow]Starting {container_id}...[/yellow]")

    def stop(self, argument):
        container_id = self._target(argument)
        if container_id is None:
            return
        self.workbench.stop_container(container_id)
        self.console.print(f"[green]Stopped {container_id}[/green]")

    def use(self, argument):
        if argument is None:
            choices = [
                questionary.Choice(f"{c.name} ({c.status.value})", value=c.id)
                for c in self.workbench.list_containers()
            ]
            argument = questionary.select("Select a container:", choices=choices).ask()
            if argument is None:
                return
        container = self.workbench.get_container(argument)
        self.selected = container.id
        self.console.print(f"Using [cyan]{container.name}[/cyan] ({container.id})")

    def wait(self, argument):
        with self.console.status("Waiting for containers to boot..."):
            self.workbench.wait_for_startups()
        for container in self.workbench.list_containers():
            if container.is_running:
                self.console.print(f"[green]{container.id} is running[/green]")

    def log(self, argument):
        container_id = self._target(argument)
        if container_id is None:
            return
        container = self.workbench.get_container(container_id)
        print_terminal(self.console, container)

    def messages(self, argument):
        messages = self.workbench.list_messages(argument)
        if not messages:
            self.console.print("[yellow]No MCP messages yet.[/yellow]")
            return
        click.echo(format_message_table(messages, self.workbench.list_containers()))

    def help(self, argument):
        click.echo(SHELL_HELP)


@click.command()
@click.option('--boot-delay', type=click.FloatRange(min=0), envvar=BOOT_DELAY_ENVVAR,
              help='Override the simulated boot delay in seconds')
@click.option('--container', 'container_id', help='Container to select initially')
@click.pass_context
def shell(ctx, boot_delay, container_id):
    """Open an interactive terminal on the workbench containers"""
    console = Console()
    workbench = create_workbench(boot_delay)

    try:
        if container_id is not None:
            workbench.get_container(container_id)
    except WorkbenchError as e:
        console.print(f"[red]Error: {e}[/red]")
        workbench.close()
        ctx.exit(1)

    session = WorkbenchShell(workbench, console, selected=container_id)
    console.print("Agent Workbench shell. Type :help for commands.")
    try:
        while True:
            try:
                line = click.prompt(session.prompt_text(), default='', show_default=False, prompt_suffix='')
            except (EOFError, click.Abort):
                break
            if not session.handle(line):
                break
    finally:
        workbench.close()
