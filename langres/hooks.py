"""Observer registry for resource manager notifications."""

import itertools
import logging
from collections.abc import Callable

_log = logging.getLogger(__name__)

RESOURCES_CHANGED = "resources.changed"
LANGUAGE_CHANGED = "language.changed"


class HookRegistry:
    """Per-owner event handlers.

    ``on`` returns a token that ``off`` accepts. Handlers for one event run
    in registration order; a handler that raises is logged and the remaining
    handlers still run.
    """

    def __init__(self):
        self._handlers: dict[str, dict[int, Callable]] = {}
        self._tokens = itertools.count(1)

    def on(self, name: str, handler: Callable, /) -> int:
        """Register a handler for an event and return its token."""
        token = next(self._tokens)
        self._handlers.setdefault(name, {})[token] = handler
        return token

    def off(self, token: int) -> bool:
        """Remove the handler registered under *token*."""
        for handlers in self._handlers.values():
            if token in handlers:
                del handlers[token]
                return True
        return False

    def emit(self, name: str, /, **kwargs) -> None:
        """Emit an event, calling all registered handlers."""
        for handler in list(self._handlers.get(name, {}).values()):
            try:
                handler(**kwargs)
            except Exception:
                _log.exception("Handler %r failed for %s", handler, name)

    def count(self, name: str, /) -> int:
        return len(self._handlers.get(name, {}))

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
