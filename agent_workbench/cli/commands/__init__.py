"""CLI commands for Agent Workbench."""
