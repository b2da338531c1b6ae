"""Custom exceptions for the workbench service layer."""


class WorkbenchError(Exception):
    """Base exception for all workbench errors."""

    pass


class ContainerNotFoundError(WorkbenchError):
    """Exception raised when a container id is not known to the registry."""

    def __init__(self, container_id: str):
        self.container_id = container_id
        super().__init__(f"Container '{container_id}' not found")


class InvalidTransitionError(WorkbenchError):
    """Exception raised when a lifecycle request is not valid in the current status."""

    def __init__(self, container_id: str, status, action: str):
        self.container_id = container_id
        self.status = status
        self.action = action
        super().__init__(
            f"Cannot {action} container '{container_id}' while it is {getattr(status, 'value', status)}"
        )


class ContainerNotRunningError(WorkbenchError):
    """Exception raised when terminal input targets a container that is not running."""

    def __init__(self, container_id: str, status):
        self.container_id = container_id
        self.status = status
        super().__init__(
            f"Container '{container_id}' must be running to use terminal "
            f"(status: {getattr(status, 'value', status)})"
        )
