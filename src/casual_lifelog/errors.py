"""
Exception types raised or carried by casual-lifelog.
"""

from typing import Optional


class LifelogError(Exception):
    """Base class for all casual-lifelog errors."""


class RemoteError(LifelogError):
    """
    A remote mirror operation failed (network, auth, or server side).

    Never raised out of the reconciliation layer; it travels inside a
    failed RemoteResult so callers can branch on it explicitly.
    """

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message


class ClassificationError(LifelogError):
    """
    The classifier failed or returned an unusable response.

    Attributes:
        input_text: The text the user submitted, if any, so it can be resubmitted
    """

    def __init__(self, message: str, input_text: Optional[str] = None):
        super().__init__(message)
        self.input_text = input_text
