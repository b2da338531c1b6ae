"""Agent Workbench - Simulated AI agent containers exchanging context over MCP."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
