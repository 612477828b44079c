"""
Exceptions raised by the callback list.

Handler failures are never wrapped: whatever a handler raises reaches the
caller of ``CallbackList.call`` unchanged. Only misuse of the container
itself is reported with these types.
"""

from typing import Any


class CallbackListError(Exception):
    """Base exception for callback list errors."""
    pass


class CallbackNotFoundError(CallbackListError, KeyError):
    """Raised when no entry carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"No callback registered under name {self.name!r}"


class InvalidCallbackError(CallbackListError, TypeError):
    """Raised when a non-callable value is added."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Callback must be callable, got {type(value).__name__}: {value!r}")
