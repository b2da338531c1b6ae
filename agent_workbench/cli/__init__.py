"""Command line interface for Agent Workbench."""
