"""
Console logging for applications that use callback lists.

The library never configures logging itself; call configure_logging once
at startup to route every ``callback_list.*`` logger through rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from ..config.schemas import LoggingConfig

console = Console()


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Replace the root logger's handlers with a single RichHandler.

    Args:
        config: Level, timestamp, path and traceback settings (defaults when omitted)

    Returns:
        The root logger
    """
    config = config or LoggingConfig()

    if config.compact_errors:
        install(console=console, show_locals=False, width=100, extra_lines=3, word_wrap=True)
    else:
        install(console=console, show_locals=True)

    handler = RichHandler(
        console=console,
        show_time=config.show_time,
        show_path=config.show_path,
        tracebacks_show_locals=not config.compact_errors,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(config.level)
    return root
