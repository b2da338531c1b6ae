"""Container models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import DEFAULT_RESOURCES, PROMPT_ID_LENGTH, PROMPT_TEMPLATE


class ContainerStatus(str, Enum):
    """Container lifecycle status."""
    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"


class AgentKind(str, Enum):
    """AI agent variant bound to a container."""
    CLAUDE = "claude"
    GEMINI = "gemini"

    @property
    def label(self) -> str:
        return self.value.upper()


class ResourceQuota(BaseModel):
    """Descriptive resource quota. Not enforced."""
    cpu: str = DEFAULT_RESOURCES["cpu"]
    memory: str = DEFAULT_RESOURCES["memory"]
    storage: str = DEFAULT_RESOURCES["storage"]


class Container(BaseModel):
    """A simulated isolated execution environment and its terminal session."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., frozen=True, min_length=1)
    name: str = Field(..., frozen=True)
    status: ContainerStatus = ContainerStatus.STOPPED
    agent_kind: Optional[AgentKind] = Field(None, frozen=True)
    resources: ResourceQuota = Field(default_factory=ResourceQuota)
    session_log: List[str] = Field(default_factory=list)
    pending_input: str = ""

    @property
    def prompt(self) -> str:
        """Shell prompt marker, e.g. ``root@tainer-1:~# ``."""
        return PROMPT_TEMPLATE.format(host=self.id[-PROMPT_ID_LENGTH:])

    @property
    def is_running(self) -> bool:
        return self.status == ContainerStatus.RUNNING

    @property
    def agent_label(self) -> str:
        """Upper-case agent label, or an empty string when no agent is bound."""
        return self.agent_kind.label if self.agent_kind else ""
