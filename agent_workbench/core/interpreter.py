"""Command interpreter for simulated container terminals.

Commands are matched against an ordered list of rules and the first match
wins. The order matters: ``ai help ls`` is an agent help request, not a
directory listing.

1. ``clear`` (exact) resets the terminal
2. ``ai help`` prints agent help
3. ``ai generate`` echoes the request and shares it with a running peer
4. ``ls`` prints the workspace listing
5. ``pwd`` prints the working directory
6. anything else is reported as an unknown command
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..models.container import AgentKind, Container
from ..models.mcp import MCPMessage, MCPMessageKind
from .constants import (
    AI_GENERATE_PREFIX,
    AI_GENERATE_TOKEN,
    AI_HELP_TOKEN,
    CLAUDE_HELP_TEXT,
    CLEAR_COMMAND,
    COMMAND_NOT_FOUND,
    DIRECTORY_LISTING,
    GEMINI_HELP_TEXT,
    GENERATE_CONTEXT,
    GENERATE_RESPONSE,
    LS_TOKEN,
    PWD_TOKEN,
    WORKDIR,
)


@dataclass
class InterpretResult:
    """Outcome of interpreting one command line."""
    rule: str
    response: Optional[str] = None
    clear: bool = False
    message: Optional[MCPMessage] = None  # draft, published by the orchestrator


@dataclass
class CommandRule:
    """A named matcher paired with the response it produces."""
    name: str
    matches: Callable[[str], bool]
    respond: Callable[[Container, str, Optional[Container]], InterpretResult]


def _clear(container, command, peer):
    return InterpretResult(rule="clear", clear=True)


def _ai_help(container, command, peer):
    text = CLAUDE_HELP_TEXT if container.agent_kind == AgentKind.CLAUDE else GEMINI_HELP_TEXT
    return InterpretResult(rule="ai-help", response=text)


def _ai_generate(container, command, peer):
    request = command.replace(AI_GENERATE_PREFIX, "", 1)
    response = GENERATE_RESPONSE.format(request=request)
    if container.agent_label:
        response = f"{container.agent_label} {response}"

    message = None
    if peer is not None and peer.id != container.id:
        message = MCPMessage(
            sender=container.id,
            recipient=peer.id,
            kind=MCPMessageKind.CONTEXT,
            content=GENERATE_CONTEXT.format(request=request),
        )
    return InterpretResult(rule="ai-generate", response=response, message=message)


def _ls(container, command, peer):
    return InterpretResult(rule="ls", response=DIRECTORY_LISTING)


def _pwd(container, command, peer):
    return InterpretResult(rule="pwd", response=WORKDIR)


def _not_found(container, command, peer):
    return InterpretResult(rule="not-found", response=COMMAND_NOT_FOUND.format(command=command))


DEFAULT_RULES = (
    CommandRule("clear", lambda command: command == CLEAR_COMMAND, _clear),
    CommandRule("ai-help", lambda command: AI_HELP_TOKEN in command, _ai_help),
    CommandRule("ai-generate", lambda command: AI_GENERATE_TOKEN in command, _ai_generate),
    CommandRule("ls", lambda command: LS_TOKEN in command, _ls),
    CommandRule("pwd", lambda command: PWD_TOKEN in command, _pwd),
)

FALLBACK_RULE = CommandRule("not-found", lambda command: True, _not_found)


class CommandInterpreter:
    """Evaluates terminal commands without touching any state."""

    def __init__(self, rules: Optional[Sequence[CommandRule]] = None):
        self.rules: List[CommandRule] = list(rules if rules is not None else DEFAULT_RULES)

    def interpret(
        self,
        container: Container,
        command: str,
        peer: Optional[Container] = None,
    ) -> InterpretResult:
        """Interpret a command typed into a container's terminal.

        Args:
            container: Snapshot of the container the command was typed into
            command: Raw command line
            peer: Another running container that may receive shared context

        Returns:
            The response to log, or a clear request, plus an optional draft message
        """
        for rule in self.rules:
            if rule.matches(command):
                return rule.respond(container, command, peer)
        return FALLBACK_RULE.respond(container, command, peer)
