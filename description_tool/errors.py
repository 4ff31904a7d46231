"""Errors raised while handling a tool execute call.

Every error carries the two strings the calling platform shows to its
operators: a short ``error`` and an optional ``details`` line.
"""

from typing import Optional


class ToolError(Exception):
    """Base class for errors reported back in the failure envelope."""

    error = "Tool execution failed"

    def __init__(self, details: Optional[str] = None, error: Optional[str] = None):
        self.error = error or self.error
        self.details = details
        super().__init__(details or self.error)


class ValidationError(ToolError):
    """A required parameter is missing, blank or has the wrong type."""

    error = "Missing required parameters"


class MalformedRequestError(ToolError):
    """The body is not JSON or is not shaped like a parameter object."""

    error = "Invalid request format"
