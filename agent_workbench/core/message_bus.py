"""Append-only message bus carrying MCP messages between containers."""

import itertools
import logging
from typing import List, Optional

from ..models.mcp import MCPMessage
from .clock import Clock, SystemClock
from .constants import MESSAGE_ID_TEMPLATE

logger = logging.getLogger(__name__)


class MessageBus:
    """Stores published messages in insertion order.

    Messages are never modified or removed once published. Retention is
    unbounded.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or SystemClock()
        self._messages: List[MCPMessage] = []
        self._sequence = itertools.count(1)

    def __len__(self) -> int:
        return len(self._messages)

    def publish(self, message: MCPMessage) -> MCPMessage:
        """Append a message, filling in ``id`` and ``created_at`` when unset.

        Returns:
            The stored message
        """
        update = {}
        if message.id is None:
            update["id"] = MESSAGE_ID_TEMPLATE.format(sequence=next(self._sequence))
        if message.created_at is None:
            update["created_at"] = self.clock.now()
        stored = message.model_copy(update=update) if update else message
        self._messages.append(stored)
        logger.info(
            f"Published {stored.kind.value} message {stored.id}: "
            f"{stored.sender} -> {stored.recipient}"
        )
        return stored

    def list(self) -> List[MCPMessage]:
        """List all messages in publication order."""
        return list(self._messages)

    def for_container(self, container_id: str) -> List[MCPMessage]:
        """List messages sent or received by a container."""
        return [m for m in self._messages if m.involves(container_id)]
