"""Tests for ContainerRegistry."""

import pytest

from agent_workbench.core.registry import ContainerRegistry
from agent_workbench.models.container import Container, ContainerStatus
from agent_workbench.services.exceptions import (
    ContainerNotFoundError,
    ContainerNotRunningError,
    InvalidTransitionError,
)

BOOT_TRACE = [
    "[12:00:00] Container Claude Terminal started",
    "[12:00:00] Ubuntu 22.04 LTS initialized",
    "[12:00:00] CLAUDE AI Agent loaded",
    "[12:00:00] MCP Protocol enabled",
    "root@tainer-1:~# ",
]


def boot(registry, container_id):
    registry.start(container_id)
    assert registry.complete_startup(container_id)


class TestRegistration:
    """Test adding and reading containers."""

    def test_list_preserves_registration_order(self, registry):
        """Test containers are listed in insertion order."""
        assert [c.id for c in registry.list()] == ["container-1", "container-2"]
        assert len(registry) == 2
        assert "container-1" in registry
        assert "missing" not in registry

    def test_duplicate_id_rejected(self, registry, claude_container):
        """Test registering the same id twice."""
        with pytest.raises(ValueError):
            registry.add(claude_container)

    def test_get_unknown(self, registry):
        """Test unknown ids raise ContainerNotFoundError."""
        with pytest.raises(ContainerNotFoundError) as exc_info:
            registry.get("missing")
        assert exc_info.value.container_id == "missing"

    def test_get_returns_copy(self, registry):
        """Test callers cannot mutate registry state through snapshots."""
        snapshot = registry.get("container-1")
        snapshot.session_log.append("tampered")
        snapshot.status = ContainerStatus.RUNNING

        container = registry.get("container-1")
        assert container.session_log == []
        assert container.status == ContainerStatus.STOPPED

    def test_add_copies_container(self, fixed_clock):
        """Test later changes to the added object do not leak in."""
        registry = ContainerRegistry(clock=fixed_clock)
        container = Container(id="box-1", name="Box")
        registry.add(container)
        container.session_log.append("outside")
        assert registry.get("box-1").session_log == []


class TestLifecycle:
    """Test the lifecycle state machine."""

    def test_start_moves_to_starting(self, registry):
        """Test stopped -> starting."""
        container = registry.start("container-1")
        assert container.status == ContainerStatus.STARTING
        assert container.session_log == []

    @pytest.mark.parametrize("booted", [False, True])
    def test_start_twice_fails_without_change(self, registry, booted):
        """Test start on a starting or running container."""
        registry.start("container-1")
        if booted:
            registry.complete_startup("container-1")
        before = registry.get("container-1")

        with pytest.raises(InvalidTransitionError) as exc_info:
            registry.start("container-1")

        assert exc_info.value.action == "start"
        assert registry.get("container-1") == before

    def test_complete_startup_appends_boot_trace(self, registry):
        """Test starting -> running writes the boot trace and a prompt."""
        boot(registry, "container-1")

        container = registry.get("container-1")
        assert container.status == ContainerStatus.RUNNING
        assert container.session_log == BOOT_TRACE

    def test_boot_trace_without_agent(self, fixed_clock):
        """Test a container with no agent bound."""
        registry = ContainerRegistry(clock=fixed_clock, os_label="Debian 12")
        registry.add(Container(id="plain", name="Plain"))
        boot(registry, "plain")

        log = registry.get("plain").session_log
        assert log[1] == "[12:00:00] Debian 12 initialized"
        assert log[2] == "[12:00:00] No AI Agent loaded"

    def test_complete_startup_noop_when_not_starting(self, registry):
        """Test completion is ignored for stopped or running containers."""
        assert registry.complete_startup("container-1") is False
        assert registry.get("container-1").status == ContainerStatus.STOPPED

        boot(registry, "container-1")
        assert registry.complete_startup("container-1") is False
        assert registry.get("container-1").session_log == BOOT_TRACE

    def test_complete_startup_unknown_id(self, registry):
        """Test completion for an id that does not exist."""
        assert registry.complete_startup("missing") is False

    def test_stop_running(self, registry):
        """Test running -> stopped appends one line and clears input."""
        boot(registry, "container-1")
        registry.set_input("container-1", "ls")

        container = registry.stop("container-1")

        assert container.status == ContainerStatus.STOPPED
        assert container.session_log == BOOT_TRACE + ["[12:00:00] Container stopped"]
        assert container.pending_input == ""

    def test_stop_starting(self, registry):
        """Test a starting container can be stopped and then never boots."""
        registry.start("container-1")
        registry.stop("container-1")

        assert registry.complete_startup("container-1") is False
        container = registry.get("container-1")
        assert container.status == ContainerStatus.STOPPED
        assert container.session_log == ["[12:00:00] Container stopped"]

    def test_stop_stopped_fails(self, registry):
        """Test stop on a stopped container."""
        with pytest.raises(InvalidTransitionError) as exc_info:
            registry.stop("container-1")
        assert exc_info.value.status == ContainerStatus.STOPPED
        assert registry.get("container-1").session_log == []

    def test_restart_keeps_history(self, registry):
        """Test the log is kept across restarts by default."""
        boot(registry, "container-1")
        registry.stop("container-1")
        boot(registry, "container-1")

        log = registry.get("container-1").session_log
        assert len(log) == 11
        assert log[:5] == BOOT_TRACE

    def test_restart_can_reset_log(self, fixed_clock, claude_container):
        """Test reset_log_on_restart empties the log before booting."""
        registry = ContainerRegistry(clock=fixed_clock, reset_log_on_restart=True)
        registry.add(claude_container)
        boot(registry, "container-1")
        registry.stop("container-1")
        boot(registry, "container-1")

        assert registry.get("container-1").session_log == BOOT_TRACE

    def test_containers_are_independent(self, registry):
        """Test one container's transitions do not affect another."""
        boot(registry, "container-1")
        assert registry.get("container-2").status == ContainerStatus.STOPPED


class TestTerminalState:
    """Test log and input operations."""

    def test_clear_log(self, registry):
        """Test clear leaves exactly one prompt and keeps status."""
        boot(registry, "container-1")
        registry.append_log("container-1", ["a", "b", "c"])

        registry.clear_log("container-1")

        container = registry.get("container-1")
        assert container.session_log == ["root@tainer-1:~# "]
        assert container.status == ContainerStatus.RUNNING

    def test_clear_log_requires_running(self, registry):
        """Test clear on a stopped container."""
        with pytest.raises(ContainerNotRunningError):
            registry.clear_log("container-1")

    def test_append_log_and_set_input(self, registry):
        """Test raw log and input mutation."""
        registry.append_log("container-2", ["one", "two"])
        registry.set_input("container-2", "pwd")

        container = registry.get("container-2")
        assert container.session_log == ["one", "two"]
        assert container.pending_input == "pwd"

    def test_ensure_running(self, registry):
        """Test the running precondition helper."""
        with pytest.raises(ContainerNotRunningError) as exc_info:
            registry.ensure_running("container-1")
        assert exc_info.value.status == ContainerStatus.STOPPED

        boot(registry, "container-1")
        assert registry.ensure_running("container-1").is_running

    def test_first_running_peer(self, registry, fixed_clock):
        """Test peer lookup picks the first other running container."""
        registry.add(Container(id="container-3", name="Third"))
        assert registry.first_running_peer("container-1") is None

        boot(registry, "container-1")
        assert registry.first_running_peer("container-1") is None

        boot(registry, "container-3")
        boot(registry, "container-2")
        assert registry.first_running_peer("container-1").id == "container-2"
        assert registry.first_running_peer("container-2").id == "container-1"
