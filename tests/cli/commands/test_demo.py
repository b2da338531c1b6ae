from unittest.mock import patch

from agent_workbench.cli.commands.config import config
from agent_workbench.cli.commands.demo import demo
from agent_workbench.services.exceptions import ContainerNotRunningError

WIDE = {"COLUMNS": "200"}


class TestDemoCommand:
    """Smoke tests for the quick start demo."""

    def test_demo_runs_quick_start(self, isolated_cli_runner):
        """Test both terminals run the commands and agents exchange context."""
        result = isolated_cli_runner.invoke(demo, ['--boot-delay', '0'], env=WIDE)

        assert result.exit_code == 0, result.output
        assert "Container Claude Terminal started" in result.output
        assert "Claude AI: I can help you with code generation" in result.output
        assert "Gemini AI: Ready to assist with coding tasks" in result.output
        assert "CLAUDE AI: Generating code for: a Python function" in result.output
        assert "app.py  requirements.txt  src/  tests/  README.md" in result.output
        assert "MCP Communication" in result.output
        assert "Claude Terminal (container-1) -> Gemini Terminal (container-2)" in result.output
        assert "Gemini Terminal (container-2) -> Claude Terminal (container-1)" in result.output
        assert "Sharing code generation context: a Python function" in result.output

    def test_demo_boot_delay_from_env(self, isolated_cli_runner):
        env = dict(WIDE, AGENT_WORKBENCH_BOOT_DELAY="0")
        result = isolated_cli_runner.invoke(demo, [], env=env)
        assert result.exit_code == 0, result.output

    def test_demo_single_container(self, isolated_cli_runner):
        """Test no messages are exchanged without a second container."""
        isolated_cli_runner.invoke(config, ['remove-container', 'container-2', '-y'])

        result = isolated_cli_runner.invoke(demo, ['--boot-delay', '0'], env=WIDE)

        assert result.exit_code == 0
        assert "No MCP messages" in result.output

    def test_demo_no_containers(self, isolated_cli_runner):
        isolated_cli_runner.invoke(config, ['remove-container', 'container-1', '-y'])
        isolated_cli_runner.invoke(config, ['remove-container', 'container-2', '-y'])

        result = isolated_cli_runner.invoke(demo, ['--boot-delay', '0'])

        assert result.exit_code == 0
        assert "No containers configured." in result.output

    @patch('agent_workbench.core.orchestrator.SessionOrchestrator.execute')
    def test_demo_reports_errors(self, mock_execute, isolated_cli_runner):
        """Test workbench errors end the demo with a message."""
        mock_execute.side_effect = ContainerNotRunningError("container-1", "starting")

        result = isolated_cli_runner.invoke(demo, ['--boot-delay', '0'], env=WIDE)

        assert result.exit_code == 1
        assert "must be running to use terminal" in result.output
