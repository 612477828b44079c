import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .entry import Entry
from .errors import CallbackNotFoundError, InvalidCallbackError

Handler = Callable[..., Any]
HandlerSpec = Union[Handler, Tuple[Handler, Optional[str]]]


class CallbackList:
    """
    Ordered list of callbacks invoked together.

    Provides:
    - Insertion-ordered storage of optionally named handlers
    - Invocation of every handler with the same arguments
    - Positional collection of return values
    - Lookup and removal by name (first match wins)

    The list is itself callable, so it can be passed anywhere a single
    callback is expected, and it is always truthy, even when empty, so
    `cb or default` keeps a list the caller passed in. A handler that
    raises aborts the call: later handlers are not invoked and the
    exception reaches the caller as is.
    """

    def __init__(
        self,
        callbacks: Optional[Iterable[HandlerSpec]] = None,
        label: Optional[str] = None,
        log_calls: bool = False,
    ):
        self._entries: List[Entry] = []
        self.label = label
        self.log_calls = log_calls
        self.logger = logging.getLogger(f"callback_list.{label}" if label else "callback_list")

        for item in callbacks or []:
            if isinstance(item, tuple):
                self.add(*item)
            else:
                self.add(item)

        self.logger.debug(f"CallbackList initialized with {len(self._entries)} callbacks")

    def add(self, handler: Handler, name: Optional[str] = None) -> None:
        """Append a handler, optionally under a name."""
        if not callable(handler):
            raise InvalidCallbackError(handler)

        self._entries.append(Entry(handler, name))
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Added callback: {name or _describe(handler)}")

    def call(self, *args: Any, **kwargs: Any) -> List[Any]:
        """
        Invoke every handler in insertion order.

        Args:
            *args: Positional arguments forwarded to each handler
            **kwargs: Keyword arguments forwarded to each handler

        Returns:
            One result per handler, in order (None where a handler returns nothing)
        """
        entries = list(self._entries)
        self.logger.debug(f"Calling {len(entries)} callbacks")

        verbose = self.log_calls and self.logger.isEnabledFor(logging.DEBUG)
        results = []
        for entry in entries:
            if verbose:
                self.logger.debug(f"Invoking {entry.name or _describe(entry.handler)}")
            results.append(entry.handler(*args, **kwargs))
        return results

    def __call__(self, *args: Any, **kwargs: Any) -> List[Any]:
        return self.call(*args, **kwargs)

    def get_all(self) -> List[Handler]:
        """Get all handlers in insertion order."""
        return [entry.handler for entry in self._entries]

    def get(self, name: str) -> Handler:
        """
        Get the first handler registered under name.

        Raises:
            CallbackNotFoundError: If no entry carries the name
        """
        for entry in self._entries:
            if entry.matches(name):
                return entry.handler
        raise CallbackNotFoundError(name)

    def has(self, name: str) -> bool:
        return any(entry.matches(name) for entry in self._entries)

    def remove(self, name: str) -> None:
        """Remove the first entry registered under name. Unknown names are ignored."""
        for index, entry in enumerate(self._entries):
            if entry.matches(name):
                del self._entries[index]
                self.logger.debug(f"Removed callback: {name}")
                return

    def clear(self) -> None:
        """Remove all entries."""
        dropped = len(self._entries)
        self._entries = []
        self.logger.debug(f"Cleared {dropped} callbacks")

    # Introspection

    def names(self) -> List[str]:
        """Names of the named entries, in order, duplicates included."""
        return [entry.name for entry in self._entries if entry.name is not None]

    def entries(self) -> List[Entry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Handler]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        label = f"{self.label}, " if self.label else ""
        return f"CallbackList({label}{len(self._entries)} callbacks)"


def _describe(handler: Handler) -> str:
    # repr() of an arbitrary callable may raise
    return getattr(handler, "__qualname__", None) or type(handler).__qualname__
