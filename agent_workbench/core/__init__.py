"""Core container, terminal and message bus logic for Agent Workbench.

Import components from their modules, e.g.
``from agent_workbench.core.orchestrator import SessionOrchestrator``.
"""
