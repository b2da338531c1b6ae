"""CLI Helper Functions for Agent Workbench.

This module provides reusable helper functions for CLI commands to reduce
code duplication and standardize behavior across all commands.

The helpers provide:
- Project context and configuration loading
- Workbench construction with error handling
- Consistent table formatting for containers and MCP messages
- Terminal log rendering
"""

import sys
from pathlib import Path
from typing import Optional, Sequence

import click
from rich.console import Console
from rich.table import Table
from tabulate import tabulate

from agent_workbench.core.clock import format_timestamp
from agent_workbench.core.constants import DATA_DIR_NAME
from agent_workbench.core.orchestrator import SessionOrchestrator, build_workbench
from agent_workbench.models.config import WorkbenchConfig
from agent_workbench.models.container import Container, ContainerStatus
from agent_workbench.models.mcp import MCPMessage
from agent_workbench.utils.config_manager import ConfigManager

STATUS_STYLES = {
    ContainerStatus.RUNNING: "green",
    ContainerStatus.STARTING: "yellow",
    ContainerStatus.STOPPED: "red",
}


def get_project_context() -> tuple[Path, Path]:
    """Get project root and data directory.

    Returns:
        Tuple of (project_root, data_dir)

    Note:
        Does not check if data_dir exists - a missing config means defaults.
    """
    project_root = Path.cwd()
    data_dir = project_root / DATA_DIR_NAME
    return project_root, data_dir


def load_project_config(boot_delay: Optional[float] = None) -> WorkbenchConfig:
    """Load the project's workbench config, exiting on an invalid file.

    Args:
        boot_delay: Overrides the configured boot delay when given
    """
    _, data_dir = get_project_context()
    try:
        config = ConfigManager(data_dir).load_config()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if boot_delay is not None:
        config = config.model_copy(update={"boot_delay": boot_delay})
    return config


def create_workbench(boot_delay: Optional[float] = None) -> SessionOrchestrator:
    """Build a workbench from the project's configuration."""
    return build_workbench(load_project_config(boot_delay))


def status_markup(status: ContainerStatus) -> str:
    style = STATUS_STYLES.get(status, "white")
    return f"[{style}]{status.value}[/{style}]"


def build_container_table(containers: Sequence[Container], title: str = "Containers") -> Table:
    """Create a rich table describing containers."""
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("AI Agent", style="magenta")
    table.add_column("Status")
    table.add_column("CPU")
    table.add_column("Memory")
    table.add_column("Storage")

    for container in containers:
        table.add_row(
            container.id,
            container.name,
            container.agent_label or "None",
            status_markup(container.status),
            container.resources.cpu,
            container.resources.memory,
            container.resources.storage,
        )
    return table


def format_message_table(messages: Sequence[MCPMessage], containers: Sequence[Container]) -> str:
    """Format MCP messages as a plain text table.

    Container ids are shown with their names when the container is known.
    """
    names = {c.id: c.name for c in containers}

    def label(container_id: str) -> str:
        name = names.get(container_id)
        return f"{name} ({container_id})" if name else container_id

    rows = [
        [
            message.id,
            format_timestamp(message.created_at) if message.created_at else "",
            f"{label(message.sender)} -> {label(message.recipient)}",
            message.kind.value,
            message.content,
        ]
        for message in messages
    ]
    return tabulate(rows, headers=["ID", "TIME", "ROUTE", "KIND", "CONTENT"], tablefmt="simple")


def print_terminal(console: Console, container: Container) -> None:
    """Print a container's full terminal output."""
    console.print(f"[bold]{container.name}[/bold] ({status_markup(container.status)})")
    for line in container.session_log:
        console.print(line, markup=False, emoji=False, highlight=False)
