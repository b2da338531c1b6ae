"""Snapshot model returned by the session orchestrator."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .container import Container
from .mcp import MCPMessage


class WorkbenchSnapshot(BaseModel):
    """Point-in-time copy of every container and the message bus."""
    containers: List[Container] = Field(default_factory=list)
    messages: List[MCPMessage] = Field(default_factory=list)

    def container(self, container_id: str) -> Optional[Container]:
        """Find a container in the snapshot by id."""
        for container in self.containers:
            if container.id == container_id:
                return container
        return None
