"""Models for Agent Workbench."""

from .config import ContainerSpec, WorkbenchConfig
from .container import AgentKind, Container, ContainerStatus, ResourceQuota
from .mcp import MCPMessage, MCPMessageKind
from .session import WorkbenchSnapshot

__all__ = [
    'AgentKind',
    'Container',
    'ContainerSpec',
    'ContainerStatus',
    'MCPMessage',
    'MCPMessageKind',
    'ResourceQuota',
    'WorkbenchConfig',
    'WorkbenchSnapshot'
]
