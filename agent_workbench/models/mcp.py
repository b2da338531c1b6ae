"""Models for MCP (Model Context Protocol) messages exchanged between containers."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MCPMessageKind(str, Enum):
    """Kind of context carried by an MCP message."""
    CONTEXT = "context"
    CODE = "code"
    REQUEST = "request"
    RESPONSE = "response"


class MCPMessage(BaseModel):
    """A message on the inter-agent bus.

    A message without ``id`` and ``created_at`` is a draft; the bus fills both
    in when it is published. Published messages are never modified.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = Field(None, description="Creation-ordered id assigned by the bus")
    sender: str = Field(..., alias="from", description="Id of the sending container")
    recipient: str = Field(..., alias="to", description="Id of the receiving container")
    kind: MCPMessageKind = MCPMessageKind.CONTEXT
    content: str = ""
    created_at: Optional[datetime] = None

    @property
    def is_draft(self) -> bool:
        return self.id is None or self.created_at is None

    def involves(self, container_id: str) -> bool:
        """Whether the container sent or received this message."""
        return container_id in (self.sender, self.recipient)
