import pytest
from click.testing import CliRunner
from datetime import datetime, timedelta

from agent_workbench.core.orchestrator import build_workbench
from agent_workbench.core.registry import ContainerRegistry
from agent_workbench.core.scheduler import ManualScheduler
from agent_workbench.models.config import ContainerSpec, WorkbenchConfig
from agent_workbench.models.container import AgentKind, Container


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start=None):
        self.current = start or datetime(2024, 1, 1, 12, 0, 0)

    def now(self):
        return self.current

    def tick(self, seconds=1):
        self.current += timedelta(seconds=seconds)


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixed_clock():
    """Provides a clock frozen at 2024-01-01 12:00:00."""
    return FixedClock()


@pytest.fixture
def manual_scheduler():
    """Provides a scheduler driven by a logical clock."""
    return ManualScheduler()


@pytest.fixture
def claude_container():
    return Container(id="container-1", name="Claude Terminal", agent_kind=AgentKind.CLAUDE)


@pytest.fixture
def gemini_container():
    return Container(id="container-2", name="Gemini Terminal", agent_kind=AgentKind.GEMINI)


@pytest.fixture
def registry(fixed_clock, claude_container, gemini_container):
    """Provides a registry holding the two default containers, both stopped."""
    registry = ContainerRegistry(clock=fixed_clock)
    registry.add(claude_container)
    registry.add(gemini_container)
    return registry


@pytest.fixture
def workbench_config():
    return WorkbenchConfig(boot_delay=2.0)


@pytest.fixture
def workbench(workbench_config, fixed_clock, manual_scheduler):
    """Provides an orchestrator over the default containers with deterministic timing."""
    return build_workbench(workbench_config, clock=fixed_clock, scheduler=manual_scheduler)


@pytest.fixture
def three_container_config():
    return WorkbenchConfig(
        boot_delay=2.0,
        containers=[
            ContainerSpec(id="container-a", name="Alpha", agent_kind=AgentKind.CLAUDE),
            ContainerSpec(id="container-b", name="Beta", agent_kind=AgentKind.GEMINI),
            ContainerSpec(id="container-c", name="Gamma"),
        ],
    )
