"""Container registry owning every container and its lifecycle state."""

import logging
from typing import Dict, Iterable, List, Optional

from ..models.container import Container, ContainerStatus
from ..services.exceptions import (
    ContainerNotFoundError,
    ContainerNotRunningError,
    InvalidTransitionError,
)
from .clock import Clock, SystemClock, stamp
from .constants import (
    BOOT_AGENT_LOADED,
    BOOT_MCP_ENABLED,
    BOOT_NO_AGENT,
    BOOT_OS_INITIALIZED,
    BOOT_STARTED,
    DEFAULT_OS_LABEL,
    STOPPED_LINE,
)

logger = logging.getLogger(__name__)


class ContainerRegistry:
    """Owns container records and enforces the lifecycle state machine.

    ``stopped -> starting -> running -> stopped``; a container that is still
    starting may also be stopped. Every operation validates its preconditions
    before touching any record, so a failed call leaves state unchanged.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        os_label: str = DEFAULT_OS_LABEL,
        reset_log_on_restart: bool = False,
    ):
        """Initialize an empty registry.

        Args:
            clock: Time source for log line timestamps
            os_label: Operating system name shown in the boot trace
            reset_log_on_restart: Empty the session log when a container boots
        """
        self.clock = clock or SystemClock()
        self.os_label = os_label
        self.reset_log_on_restart = reset_log_on_restart
        self._containers: Dict[str, Container] = {}

    def __len__(self) -> int:
        return len(self._containers)

    def __contains__(self, container_id: str) -> bool:
        return container_id in self._containers

    def add(self, container: Container) -> Container:
        """Register a new container."""
        if container.id in self._containers:
            raise ValueError(f"Container '{container.id}' already exists")
        self._containers[container.id] = container.model_copy(deep=True)
        logger.debug(f"Registered container {container.id} ({container.name})")
        return self.get(container.id)

    def get(self, container_id: str) -> Container:
        """Get a copy of a container by id."""
        return self._require(container_id).model_copy(deep=True)

    def list(self) -> List[Container]:
        """List copies of all containers in registration order."""
        return [c.model_copy(deep=True) for c in self._containers.values()]

    def first_running_peer(self, container_id: str) -> Optional[Container]:
        """Get the first running container other than the given one."""
        for container in self._containers.values():
            if container.id != container_id and container.is_running:
                return container.model_copy(deep=True)
        return None

    def start(self, container_id: str) -> Container:
        container = self._require(container_id)
        if container.status != ContainerStatus.STOPPED:
            raise InvalidTransitionError(container_id, container.status, "start")
        container.status = ContainerStatus.STARTING
        logger.info(f"Container {container_id} starting")
        return self.get(container_id)

    def complete_startup(self, container_id: str) -> bool:
        """Finish booting a starting container.

        Returns:
            False when the container is no longer starting, e.g. it was
            stopped before the boot delay elapsed
        """
        container = self._containers.get(container_id)
        if container is None or container.status != ContainerStatus.STARTING:
            logger.debug(f"Skipping startup completion for {container_id}")
            return False

        if self.reset_log_on_restart:
            container.session_log = []
        agent_line = (
            BOOT_AGENT_LOADED.format(agent=container.agent_label)
            if container.agent_kind else BOOT_NO_AGENT
        )
        container.session_log.extend([
            stamp(self.clock, BOOT_STARTED.format(name=container.name)),
            stamp(self.clock, BOOT_OS_INITIALIZED.format(os_label=self.os_label)),
            stamp(self.clock, agent_line),
            stamp(self.clock, BOOT_MCP_ENABLED),
            container.prompt,
        ])
        container.status = ContainerStatus.RUNNING
        logger.info(f"Container {container_id} running")
        return True

    def stop(self, container_id: str) -> Container:
        container = self._require(container_id)
        if container.status == ContainerStatus.STOPPED:
            raise InvalidTransitionError(container_id, container.status, "stop")
        container.status = ContainerStatus.STOPPED
        container.session_log.append(stamp(self.clock, STOPPED_LINE))
        container.pending_input = ""
        logger.info(f"Container {container_id} stopped")
        return self.get(container_id)

    def ensure_running(self, container_id: str) -> Container:
        """Get a copy of a container, failing unless it is running."""
        return self._require_running(container_id).model_copy(deep=True)

    def append_log(self, container_id: str, lines: Iterable[str]) -> None:
        self._require(container_id).session_log.extend(lines)

    def set_input(self, container_id: str, text: str) -> None:
        self._require(container_id).pending_input = text

    def clear_log(self, container_id: str) -> None:
        """Reset the session log to a single fresh prompt line."""
        container = self._require_running(container_id)
        container.session_log = [container.prompt]

    def _require(self, container_id: str) -> Container:
        container = self._containers.get(container_id)
        if container is None:
            raise ContainerNotFoundError(container_id)
        return container

    def _require_running(self, container_id: str) -> Container:
        container = self._require(container_id)
        if not container.is_running:
            raise ContainerNotRunningError(container_id, container.status)
        return container
