"""Stored (handler, name) pair."""

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class Entry:
    """A registered handler and its optional, non-unique name."""
    handler: Callable[..., Any]
    name: Optional[str] = None            # None: unreachable by name

    def matches(self, name: str) -> bool:
        return self.name is not None and self.name == name
