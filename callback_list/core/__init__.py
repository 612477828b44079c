"""
Core callback list components.

- Entry: stored (handler, name) pair
- CallbackList: ordered container invoked as a single callback
- Error types for lookup failures and misuse
"""

from .entry import Entry
from .errors import CallbackListError, CallbackNotFoundError, InvalidCallbackError
from .callback_list import CallbackList
from .factory import create_callback_list

__all__ = [
    "Entry",
    "CallbackList",
    "CallbackListError",
    "CallbackNotFoundError",
    "InvalidCallbackError",
    "create_callback_list",
]
