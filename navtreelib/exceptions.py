"""Exception types for NavTreeLib.

Two kinds of failure matter to callers:

- Caller bugs (missing arguments, removing a root) raise immediately,
  before any side effect, and should never be swallowed.
- Data source failures are recoverable. Child loads report them through
  the event channel and notifier and hand the failure back as a value.
"""

from typing import Any, Optional


class NavTreeError(Exception):
    """Base class for all NavTreeLib errors."""


class InvalidArgument(NavTreeError, ValueError):
    """A required argument was missing or empty."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"'{argument}' is required")


class InvalidState(NavTreeError, RuntimeError):
    """The tree is not in a state that allows the requested operation."""


class SourceFailure(NavTreeError):
    """The data source rejected or failed a request.

    Attributes:
        operation: Name of the data source call that failed
        node: Tree node the request was made for, if any
        cause: The original error raised by the data source
    """

    def __init__(self, operation: str, cause: BaseException, node: Any = None):
        self.operation = operation
        self.cause = cause
        self.node = node
        super().__init__(f"{operation} failed: {cause}")

    @property
    def reason(self) -> str:
        """Human-readable reason, suitable for a notification."""
        return str(self.cause) or type(self.cause).__name__
