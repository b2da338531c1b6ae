"""Session orchestrator coordinating the registry, interpreter and message bus."""

import itertools
import logging
import threading
from typing import Dict, List, Optional

from ..models.config import WorkbenchConfig
from ..models.container import Container
from ..models.mcp import MCPMessage
from ..models.session import WorkbenchSnapshot
from ..services.exceptions import ContainerNotFoundError
from .clock import Clock, SystemClock, stamp
from .constants import DEFAULT_BOOT_DELAY
from .interpreter import CommandInterpreter
from .message_bus import MessageBus
from .registry import ContainerRegistry
from .scheduler import TimerScheduler

logger = logging.getLogger(__name__)


class SessionOrchestrator:
    """Entry point for every container and terminal request.

    All mutations go through a single lock so the registry and the bus have
    one writer at a time, including startup callbacks fired from timer
    threads. Mutating calls return a fresh ``WorkbenchSnapshot``.
    """

    def __init__(
        self,
        registry: ContainerRegistry,
        bus: MessageBus,
        interpreter: Optional[CommandInterpreter] = None,
        scheduler=None,
        clock: Optional[Clock] = None,
        boot_delay: float = DEFAULT_BOOT_DELAY,
    ):
        self.registry = registry
        self.bus = bus
        self.interpreter = interpreter or CommandInterpreter()
        self.scheduler = scheduler or TimerScheduler()
        self.clock = clock or SystemClock()
        self.boot_delay = boot_delay
        self._lock = threading.RLock()
        # Latest boot per starting container; a callback from an older boot is stale.
        self._boots: Dict[str, int] = {}
        self._boot_counter = itertools.count(1)

    def start_container(self, container_id: str) -> WorkbenchSnapshot:
        """Begin booting a stopped container; it becomes running after the boot delay."""
        with self._lock:
            self.registry.start(container_id)
            boot = next(self._boot_counter)
            self._boots[container_id] = boot
            self.scheduler.schedule(
                container_id,
                self.boot_delay,
                lambda: self._complete_startup(container_id, boot),
            )
            return self.snapshot()

    def stop_container(self, container_id: str) -> WorkbenchSnapshot:
        """Stop a starting or running container, cancelling any pending boot."""
        with self._lock:
            self.registry.stop(container_id)
            self._boots.pop(container_id, None)
            self.scheduler.cancel(container_id)
            return self.snapshot()

    def set_terminal_input(self, container_id: str, text: str) -> WorkbenchSnapshot:
        with self._lock:
            self.registry.ensure_running(container_id)
            self.registry.set_input(container_id, text)
            return self.snapshot()

    def submit_terminal_input(self, container_id: str) -> WorkbenchSnapshot:
        """Run the pending input of a running container.

        Raises:
            ContainerNotFoundError: If the id is unknown
            ContainerNotRunningError: If the container is not running
        """
        with self._lock:
            container = self.registry.ensure_running(container_id)
            command = container.pending_input.strip()
            if not command:
                return self.snapshot()

            peer = self.registry.first_running_peer(container_id)
            result = self.interpreter.interpret(container, command, peer)
            logger.debug(f"{container_id}: '{command}' matched rule {result.rule}")

            if result.clear:
                self.registry.clear_log(container_id)
                self.registry.set_input(container_id, "")
                return self.snapshot()

            self.registry.append_log(container_id, [
                f"{container.prompt}{command}",
                stamp(self.clock, result.response),
                container.prompt,
            ])
            self.registry.set_input(container_id, "")
            if result.message is not None:
                self.bus.publish(result.message)
            return self.snapshot()

    def execute(self, container_id: str, command: str) -> WorkbenchSnapshot:
        """Type a command into a terminal and submit it."""
        with self._lock:
            self.set_terminal_input(container_id, command)
            return self.submit_terminal_input(container_id)

    def get_container(self, container_id: str) -> Container:
        with self._lock:
            return self.registry.get(container_id)

    def list_containers(self) -> List[Container]:
        with self._lock:
            return self.registry.list()

    def list_messages(self, container_id: Optional[str] = None) -> List[MCPMessage]:
        """List published messages, optionally only those a container sent or received."""
        with self._lock:
            if container_id is None:
                return self.bus.list()
            if container_id not in self.registry:
                raise ContainerNotFoundError(container_id)
            return self.bus.for_container(container_id)

    def snapshot(self) -> WorkbenchSnapshot:
        with self._lock:
            return WorkbenchSnapshot(
                containers=self.registry.list(),
                messages=self.bus.list(),
            )

    def wait_for_startups(self, timeout: Optional[float] = None) -> None:
        """Block until every scheduled boot has completed or been cancelled."""
        self.scheduler.join(timeout)

    def close(self) -> None:
        """Drop pending boots. Containers still starting stay starting."""
        self.scheduler.shutdown()

    def _complete_startup(self, container_id: str, boot: int) -> None:
        with self._lock:
            if self._boots.get(container_id) != boot:
                logger.debug(f"Ignoring startup callback from an earlier boot of {container_id}")
                return
            del self._boots[container_id]
            self.registry.complete_startup(container_id)


def build_workbench(
    config: Optional[WorkbenchConfig] = None,
    clock: Optional[Clock] = None,
    scheduler=None,
) -> SessionOrchestrator:
    """Create an orchestrator with a registry populated from configuration."""
    config = config or WorkbenchConfig()
    clock = clock or SystemClock()
    registry = ContainerRegistry(
        clock=clock,
        os_label=config.os_label,
        reset_log_on_restart=config.reset_log_on_restart,
    )
    for spec in config.containers:
        registry.add(spec.to_container())
    return SessionOrchestrator(
        registry=registry,
        bus=MessageBus(clock=clock),
        scheduler=scheduler,
        clock=clock,
        boot_delay=config.boot_delay,
    )
