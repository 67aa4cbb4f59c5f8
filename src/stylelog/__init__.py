"""
stylelog — styled console logging with level filtering, groups and hooks.

Public API:
    create_logger   — build a Logger from options
    Logger          — the logger instance
    LoggerOptions   — immutable configuration snapshot
    LogRecord       — record passed to hooks
    init_logger     — replace the module-level default logger
    get_logger      — access the default logger
    ConsoleSink     — rich-backed styled sink (default)
    PlainSink       — unstyled print() sink
    LOG_LEVELS      — level name -> rank
    DEFAULT_STYLES  — level name -> default rich style
    trace           — function tracing decorator
"""

from stylelog._version import __version__, __app_name__
from .levels import LOG_LEVELS, DEFAULT_STYLES, GROUP_STYLE
from .options import LoggerOptions
from .hooks import LogRecord, HookRegistry
from .sink import ConsoleSink, PlainSink
from .logger import Logger, create_logger, init_logger, get_logger
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'LOG_LEVELS', 'DEFAULT_STYLES', 'GROUP_STYLE',
    'LoggerOptions', 'LogRecord', 'HookRegistry',
    'ConsoleSink', 'PlainSink',
    'Logger', 'create_logger', 'init_logger', 'get_logger',
    'trace',
]
