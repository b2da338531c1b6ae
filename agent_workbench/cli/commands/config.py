"""Configuration management commands for Agent Workbench."""

from pathlib import Path

import click
from rich.console import Console
from rich.prompt import Confirm

from ...core.constants import DATA_DIR_NAME
from ...models.container import AgentKind, ResourceQuota
from ...utils.config_manager import ConfigManager

AGENT_CHOICES = [kind.value for kind in AgentKind] + ['none']


def _config_manager() -> ConfigManager:
    return ConfigManager(Path.cwd() / DATA_DIR_NAME)


@click.group()
def config():
    """Manage workbench configuration"""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Display current workbench configuration"""
    try:
        workbench_config = _config_manager().load_config()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo("Workbench Configuration:")
    click.echo(workbench_config.model_dump_json(indent=2))


@config.command('set-boot-delay')
@click.argument('seconds', type=click.FloatRange(min=0))
def set_boot_delay(seconds):
    """Set the simulated container boot delay"""
    _config_manager().set_boot_delay(seconds)
    click.echo(f"Set boot delay to {seconds}s")


@config.command('add-container')
@click.argument('container_id')
@click.argument('name')
@click.option('--agent', type=click.Choice(AGENT_CHOICES), default='none', show_default=True,
              help='AI agent bound to the container')
@click.option('--cpu', default=ResourceQuota().cpu, show_default=True, help='CPU quota')
@click.option('--memory', default=ResourceQuota().memory, show_default=True, help='Memory quota')
@click.option('--storage', default=ResourceQuota().storage, show_default=True, help='Storage quota')
def add_container(container_id, name, agent, cpu, memory, storage):
    """Add or update a container declaration"""
    agent_kind = None if agent == 'none' else AgentKind(agent)
    _config_manager().add_container(
        container_id,
        name,
        agent_kind=agent_kind,
        resources=ResourceQuota(cpu=cpu, memory=memory, storage=storage),
    )
    click.echo(f"Added container: {container_id} ({name})")


@config.command('remove-container')
@click.argument('container_id')
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation prompt')
def remove_container(container_id, yes):
    """Remove a container declaration"""
    console = Console()
    if not yes and not Confirm.ask(f"Remove container '{container_id}'?"):
        console.print("[yellow]Cancelled[/yellow]")
        return

    if _config_manager().remove_container(container_id):
        console.print(f"[green]Removed container '{container_id}'[/green]")
    else:
        console.print(f"[yellow]Container '{container_id}' not found[/yellow]")


@config.command()
def reset():
    """Reset workbench configuration to defaults"""
    _config_manager().reset()
    click.echo("Workbench configuration reset to defaults")
