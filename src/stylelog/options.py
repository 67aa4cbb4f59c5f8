"""
Logger configuration snapshot.

Options are captured once when a logger is created and never change
afterwards. They can be given as a LoggerOptions instance, a plain
mapping, or keyword overrides to create_logger().

Mapping keys (unknown keys are ignored):
    show_timestamp / showTimestamp         prepend [HH:MM:SS]
    namespace                              prepend [namespace]
    styles                                 partial level -> rich style map
    level / minimum_level / minimumLevel   minimum level shown
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional


# Alternate spellings accepted by from_mapping()
_ALIASES = {
    'showTimestamp': 'show_timestamp',
    'minimum_level': 'level',
    'minimumLevel': 'level',
}


@dataclass(frozen=True)
class LoggerOptions:
    """Configuration for a single logger.

    Attributes:
        show_timestamp: Prefix each line with the local wall-clock time
        namespace: Optional tag shown as ``[namespace]``
        styles: Partial level -> style overrides (merged over defaults)
        level: Minimum level shown; unknown names mean "show everything"
    """
    show_timestamp: bool = False
    namespace: Optional[str] = None
    styles: Mapping[str, str] = field(default_factory=dict)
    level: str = 'debug'

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> 'LoggerOptions':
        """Build options from a mapping, ignoring unrecognized keys.

        Later keys win, so an alias following its canonical name
        overrides it.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (mapping or {}).items():
            key = _ALIASES.get(key, key)
            if key in known:
                values[key] = value
        if values.get('styles') is None:
            values.pop('styles', None)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> 'LoggerOptions':
        """Return a copy with recognized keyword overrides applied."""
        if not overrides:
            return self
        merged = {f.name: getattr(self, f.name) for f in fields(self)}
        merged.update(overrides)
        return LoggerOptions.from_mapping(merged)


def coerce_options(options: Any = None, **overrides: Any) -> LoggerOptions:
    """Normalize None, a mapping, or LoggerOptions into LoggerOptions."""
    if isinstance(options, LoggerOptions):
        base = options
    else:
        base = LoggerOptions.from_mapping(options)
    return base.with_overrides(**overrides)
