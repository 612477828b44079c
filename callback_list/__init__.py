"""
Callback list: an ordered set of callbacks invoked as one.

Handlers are called in insertion order with the same arguments, and their
return values are collected positionally.
"""

from .core import (
    CallbackList,
    CallbackListError,
    CallbackNotFoundError,
    Entry,
    InvalidCallbackError,
    create_callback_list,
)

__all__ = [
    "CallbackList",
    "Entry",
    "CallbackListError",
    "CallbackNotFoundError",
    "InvalidCallbackError",
    "create_callback_list",
]

__version__ = "0.1.0"
