"""Utilities for Agent Workbench."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager'
]
