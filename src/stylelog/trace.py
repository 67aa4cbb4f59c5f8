"""
Function tracing decorator.

Routes trace output through the default logger (see get_logger()):
entry and return at 'debug', exceptions at 'error'.
"""

import functools
import inspect
from pathlib import Path
from typing import Any


def _short_repr(value: Any) -> str:
    """Abbreviate long strings and lists for trace lines."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the default logger.

    Shows function entry/exit with arguments and return values when the
    default logger would show 'debug' calls. Otherwise the function is
    called directly.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .logger import get_logger

        log = get_logger()
        if not log.is_level_enabled('debug'):
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        where = f"{module.__name__ if module else 'unknown'}.{func.__name__}"

        # Methods: show the bound instance as 'self'
        params = list(inspect.signature(func).parameters)
        args_repr = []
        remaining_args = args
        if args and params and params[0] in ('self', 'cls'):
            args_repr.append(params[0])
            remaining_args = args[1:]
        args_repr.extend(_short_repr(arg) for arg in remaining_args)
        args_repr.extend(f"{key}={_short_repr(value)}" for key, value in kwargs.items())

        log.debug(f">> {where}({', '.join(args_repr)})")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.error(f"!! {where} raised: {type(e).__name__}: {e}")
            raise

        if result is not None:
            log.debug(f"<< {where} returned: {_short_repr(result)}")
        return result

    return wrapper
