"""
Factory for building callback lists from configuration.
"""

from typing import Iterable, Optional

from ..config import CallbackListConfig
from .callback_list import CallbackList, HandlerSpec


def create_callback_list(
    config: Optional[CallbackListConfig] = None,
    callbacks: Optional[Iterable[HandlerSpec]] = None,
) -> CallbackList:
    """
    Create a callback list from configuration.

    Args:
        config: Callback list configuration (defaults when omitted)
        callbacks: Handlers or (handler, name) pairs to register, in order

    Returns:
        Configured CallbackList
    """
    config = config or CallbackListConfig()
    return CallbackList(callbacks, label=config.label, log_calls=config.log_calls)
