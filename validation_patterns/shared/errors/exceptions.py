"""
Failure taxonomy shared by every layer.

Each class corresponds to one row of the error mapping table in
``handlers.py``. No framework imports allowed.

Built-in exceptions also take part in the mapping:
``ValueError``/``TypeError`` are bad arguments and
``PermissionError`` is treated as unauthorized.
"""


class NotFoundError(Exception):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource_name: str, key: object = None) -> None:
        if key is None:
            message = resource_name
        else:
            message = f"Entity '{resource_name}' with key '{key}' was not found."
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(Exception):
    """Raised when the caller is not authenticated."""

    def __init__(self, message: str = "Authentication is required.") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidOperationError(Exception):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class OperationCancelledError(Exception):
    """Raised when the caller cancelled the request mid-flight."""

    def __init__(self, message: str = "The operation was cancelled.") -> None:
        self.message = message
        super().__init__(self.message)
