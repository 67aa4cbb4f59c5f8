"""
Log level ranks and default styles.

Levels form a closed, totally ordered set. The emit rule is:

    rank(message level) >= rank(minimum level)  →  message is shown

Level assignments:
    ←── verbose ─────────────────────────── severe ──→
    0      1     2      3      4       5
    debug  log   info   warn   error   success

Style tokens are rich style strings (see rich.style.Style.parse).
The defaults follow the Dracula palette.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional


LOG_LEVELS: Mapping[str, int] = MappingProxyType({
    'debug': 0,
    'log': 1,
    'info': 2,
    'warn': 3,
    'error': 4,
    'success': 5,
})

DEFAULT_STYLES: Mapping[str, str] = MappingProxyType({
    'debug': '#6272a4',           # Comment
    'log': '#f8f8f2',             # Foreground
    'info': 'bold #8be9fd',       # Cyan
    'warn': 'bold #f1fa8c',       # Yellow
    'error': 'bold #ff5555',      # Red
    'success': 'bold #50fa7b',    # Green
})

# Group titles are not tied to a level
GROUP_STYLE = 'bold #888888'


def level_rank(level: Any) -> int:
    """Return the rank of a level name.

    Unrecognized values (unknown names, non-strings) fall back to rank 0,
    the most verbose, rather than raising.
    """
    if not isinstance(level, str):
        return 0
    return LOG_LEVELS.get(level, 0)


def merge_styles(overrides: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Overlay caller styles on DEFAULT_STYLES.

    Only known levels are taken from ``overrides``; every level always
    resolves to a token. The result is read-only.
    """
    merged = dict(DEFAULT_STYLES)
    for name, style in (overrides or {}).items():
        if name in LOG_LEVELS and style is not None:
            merged[name] = style
    return MappingProxyType(merged)
