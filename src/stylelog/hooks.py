"""
LogRecord dataclass and per-logger hook registry.

Hooks observe every emitted (not filtered) log call. Each logger owns
its own HookRegistry; nothing is shared between loggers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class LogRecord:
    """A single emitted log call, passed to hooks.

    Attributes:
        timestamp: Wall-clock time of the emit call
        namespace: The emitting logger's namespace, if any
        level: Level name ('debug', 'log', 'info', 'warn', 'error', 'success')
        args: Positional arguments given to the emit call
    """
    timestamp: datetime
    namespace: Optional[str]
    level: str
    args: Tuple[Any, ...]


Hook = Callable[[str, LogRecord], Any]


class HookRegistry:
    """Insertion-ordered set of hook callables, keyed by identity.

    Registering the same callable twice keeps a single entry in its
    original position.
    """

    def __init__(self) -> None:
        self._hooks: Dict[Hook, None] = {}

    def add(self, hook: Hook) -> Callable[[], None]:
        """Register a hook. Returns a function that removes it again.

        The returned function is idempotent: calling it after the hook
        has already been removed does nothing.
        """
        self._hooks[hook] = None

        def unsubscribe() -> None:
            self._hooks.pop(hook, None)

        return unsubscribe

    def snapshot(self) -> List[Hook]:
        """Hooks in registration order, safe to iterate while mutating."""
        return list(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)
