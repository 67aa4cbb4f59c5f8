"""
Logger — level-filtered styled output with groups and hooks.

The emit rule is: a call shows when the logger is enabled and
rank(level) >= rank(minimum level). Filtered calls have no side effects
at all: nothing is formatted, printed, or passed to hooks.

Prefix layout:

    [14:03:07] [api] [INFO] payload...
    └ optional └ opt. └ level tag
      timestamp  namespace

Groups print a ``[GROUP] title`` line and indent everything until the
callback finishes. Group visibility follows the 'log' level's gate,
whichever levels are used inside.
"""

import asyncio
import inspect
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from .hooks import Hook, HookRegistry, LogRecord
from .levels import GROUP_STYLE, LOG_LEVELS, level_rank, merge_styles
from .options import LoggerOptions, coerce_options
from .sink import ConsoleSink


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Return the local time as a bracketed, locale-aware H:M:S string."""
    now = now if now is not None else datetime.now()
    return f"[{now.strftime('%X')}]"


class Logger:
    """A styled console logger.

    Usage::

        log = Logger(LoggerOptions(namespace='api', level='info'))
        log.info("listening on", 8080)
        unsubscribe = log.on_log(lambda level, record: seen.append(record))
        log.group("startup", lambda: log.info("step 1"))
        unsubscribe()
    """

    def __init__(self, options: Optional[LoggerOptions] = None, sink: Any = None):
        self.options = options if options is not None else LoggerOptions()
        self.sink = sink if sink is not None else ConsoleSink()
        self._styles = merge_styles(self.options.styles)
        self._min_rank = level_rank(self.options.level)
        self._enabled = True
        self._hooks = HookRegistry()

    # -- per-level emitters ------------------------------------------------

    def debug(self, *args: Any) -> None:
        self._emit('debug', args)

    def log(self, *args: Any) -> None:
        self._emit('log', args)

    def info(self, *args: Any) -> None:
        self._emit('info', args)

    def warn(self, *args: Any) -> None:
        self._emit('warn', args)

    def error(self, *args: Any) -> None:
        self._emit('error', args)

    def success(self, *args: Any) -> None:
        self._emit('success', args)

    # -- state -------------------------------------------------------------

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, value: Any) -> None:
        """Turn output on or off. Applies from the next call onward."""
        self._enabled = bool(value)

    @property
    def styles(self) -> Mapping[str, str]:
        """The merged, read-only level -> style map."""
        return self._styles

    @property
    def min_rank(self) -> int:
        return self._min_rank

    def is_level_enabled(self, level: str) -> bool:
        """Check whether a call at ``level`` would currently be shown.

        Unknown level names are never shown.
        """
        rank = LOG_LEVELS.get(level) if isinstance(level, str) else None
        return self._enabled and rank is not None and rank >= self._min_rank

    def on_log(self, callback: Hook) -> Callable[[], None]:
        """Register a hook called as ``callback(level, record)`` per emit.

        Returns:
            A zero-argument function that unregisters the hook
        """
        return self._hooks.add(callback)

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    # -- internals ---------------------------------------------------------

    def _prefix(self, tag: str, now: Optional[datetime] = None) -> str:
        parts = []
        if self.options.show_timestamp:
            parts.append(format_timestamp(now))
        if self.options.namespace:
            parts.append(f"[{self.options.namespace}]")
        parts.append(tag)
        return ' '.join(parts)

    def _emit(self, level: str, args: tuple) -> None:
        if not self.is_level_enabled(level):
            return
        # One clock reading for both the printed prefix and the record
        now = datetime.now()
        self.sink.print_styled(self._prefix(f"[{level.upper()}]", now),
                               self._styles[level], *args)

        record = LogRecord(timestamp=now,
                           namespace=self.options.namespace,
                           level=level, args=args)
        for hook in self._hooks.snapshot():
            try:
                hook(level, record)
            except Exception as e:
                self.sink.warn('[Logger] Hook error:', e)

    # -- groups ------------------------------------------------------------

    def group(self, title: str, callback: Callable[[], Any]) -> Any:
        """Run ``callback`` inside a visual group.

        The callback always runs, even when the group itself is hidden.
        The group closes when the callback returns or raises. If the
        callback returns an awaitable, the group stays open until it
        settles:

        - an asyncio future/task is returned as-is, with the close
          attached as a done-callback
        - any other awaitable (e.g. a coroutine) is wrapped in a
          coroutine that awaits it, closes the group, and passes the
          outcome through unchanged

        Returns:
            The callback's result (or the awaitable described above)
        """
        should_render = self._enabled and LOG_LEVELS['log'] >= self._min_rank

        if should_render:
            self.sink.group_open(self._prefix(f"[GROUP] {title}"), GROUP_STYLE)

        try:
            result = callback()
        except BaseException:
            if should_render:
                self.sink.group_close()
            raise

        if asyncio.isfuture(result):
            if should_render:
                result.add_done_callback(lambda _fut: self.sink.group_close())
            return result
        if inspect.isawaitable(result):
            return self._close_when_settled(result, should_render)

        if should_render:
            self.sink.group_close()
        return result

    async def _close_when_settled(self, awaitable: Any, should_render: bool) -> Any:
        try:
            return await awaitable
        finally:
            if should_render:
                self.sink.group_close()


def create_logger(options: Any = None, *, sink: Any = None, **overrides: Any) -> Logger:
    """Create a logger from options, a mapping, and/or keyword overrides.

    Unrecognized option keys are ignored. An unknown ``level`` shows
    everything instead of failing.

    Args:
        options: LoggerOptions, a mapping of option keys, or None
        sink: Output sink (default: a rich ConsoleSink)
        **overrides: Option keys applied on top of ``options``

    Returns:
        A new Logger with its own state and hooks

    Example::

        log = create_logger(level='warn', namespace='db')
        log.info('hidden')
        log.warn('shown')     # [db] [WARN] shown
    """
    return Logger(coerce_options(options, **overrides), sink=sink)


# =============================================================================
# Module-level default logger
# =============================================================================

_logger: Optional[Logger] = None


def init_logger(options: Any = None, *, sink: Any = None, **overrides: Any) -> Logger:
    """Replace the module-level default logger.

    Call once at program startup. Takes the same arguments as
    create_logger().

    Returns:
        The new default Logger
    """
    global _logger
    _logger = create_logger(options, sink=sink, **overrides)
    return _logger


def get_logger() -> Logger:
    """Get the module-level default logger, creating one if needed."""
    global _logger
    if _logger is None:
        _logger = create_logger()
    return _logger
