"""Service layer errors shared by the workbench core and CLI."""

from .exceptions import (
    WorkbenchError,
    ContainerNotFoundError,
    InvalidTransitionError,
    ContainerNotRunningError,
)

__all__ = [
    "WorkbenchError",
    "ContainerNotFoundError",
    "InvalidTransitionError",
    "ContainerNotRunningError",
]
