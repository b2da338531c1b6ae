"""Workbench configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.constants import DEFAULT_BOOT_DELAY, DEFAULT_OS_LABEL
from .container import AgentKind, Container, ResourceQuota


class ContainerSpec(BaseModel):
    """Declaration of a container to create when the workbench is built."""
    id: str = Field(..., min_length=1)
    name: str
    agent_kind: Optional[AgentKind] = None
    resources: ResourceQuota = Field(default_factory=ResourceQuota)

    def to_container(self) -> Container:
        """Create a fresh, stopped container from this spec."""
        return Container(
            id=self.id,
            name=self.name,
            agent_kind=self.agent_kind,
            resources=self.resources.model_copy(),
        )


def default_containers() -> List[ContainerSpec]:
    return [
        ContainerSpec(id="container-1", name="Claude Terminal", agent_kind=AgentKind.CLAUDE),
        ContainerSpec(id="container-2", name="Gemini Terminal", agent_kind=AgentKind.GEMINI),
    ]


class WorkbenchConfig(BaseModel):
    """Workbench configuration for a project."""
    boot_delay: float = Field(DEFAULT_BOOT_DELAY, ge=0)
    os_label: str = DEFAULT_OS_LABEL
    reset_log_on_restart: bool = False
    containers: List[ContainerSpec] = Field(default_factory=default_containers)

    @field_validator("containers")
    @classmethod
    def _unique_ids(cls, containers: List[ContainerSpec]) -> List[ContainerSpec]:
        seen = set()
        for spec in containers:
            if spec.id in seen:
                raise ValueError(f"Duplicate container id: {spec.id}")
            seen.add(spec.id)
        return containers

    def container_ids(self) -> List[str]:
        """Get list of all configured container ids."""
        return [spec.id for spec in self.containers]
