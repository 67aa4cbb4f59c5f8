"""
Console sinks — where formatted log lines end up.

A sink provides four operations:

    print_styled(prefix, style, *args)   styled prefix + payload
    group_open(title, style)             start an indented block
    group_close()                        end the innermost block
    warn(*args)                          plain warning (hook failures)

Terminals have no collapsible regions, so groups render as indentation
(two spaces per open group). Closing with no open group is a no-op.

ConsoleSink renders through rich. PlainSink ignores styles and writes
plain text, which is also what ConsoleSink degrades to when a style
cannot be parsed or the console has no colour support.
"""

import sys
from typing import Any, Optional, TextIO

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.protocol import is_renderable
from rich.style import Style
from rich.text import Text


INDENT = '  '


def describe(value: Any) -> str:
    """Text for a payload value; exceptions show their type name."""
    if isinstance(value, BaseException):
        text = str(value)
        return f"{type(value).__name__}: {text}" if text else type(value).__name__
    return str(value)


def _payload(args):
    return [arg if is_renderable(arg) else describe(arg) for arg in args]


class ConsoleSink:
    """Sink that renders styled prefixes with rich.

    Payload values are printed literally, the way print() would show
    them: strings are never parsed as rich markup, other values are
    converted with describe() unless they are rich renderables. Lines are
    never wrapped at the console width.

    Usage::

        sink = ConsoleSink()
        sink.print_styled('[INFO]', 'bold cyan', 'server started', 8080)
        sink.group_open('[GROUP] startup', 'bold')
        sink.print_styled('[DEBUG]', 'dim', 'loading config')
        sink.group_close()
    """

    def __init__(self, console: Optional[Console] = None,
                 error_console: Optional[Console] = None):
        self.console = console if console is not None else Console()
        self.error_console = (error_console if error_console is not None
                              else Console(stderr=True))
        self.depth = 0

    def _style(self, style: Any) -> Optional[Style]:
        """Parse a style token, or None when it is unusable."""
        if isinstance(style, Style):
            return style
        if not style or not isinstance(style, str):
            return None
        try:
            return Style.parse(style)
        except StyleSyntaxError:
            return None

    def _line(self, prefix: str, style: Optional[str]) -> Text:
        text = Text(INDENT * self.depth)
        text.append(prefix, style=self._style(style))
        return text

    def print_styled(self, prefix: str, style: Optional[str], *args: Any) -> None:
        self.console.print(self._line(prefix, style), *_payload(args),
                           markup=False, highlight=False, emoji=False,
                           soft_wrap=True)

    def group_open(self, title: str, style: Optional[str] = None) -> None:
        self.console.print(self._line(title, style),
                           markup=False, highlight=False, emoji=False,
                           soft_wrap=True)
        self.depth += 1

    def group_close(self) -> None:
        if self.depth > 0:
            self.depth -= 1

    def warn(self, *args: Any) -> None:
        if self.depth:
            args = (Text(INDENT * self.depth),) + args
        self.error_console.print(*_payload(args),
                                 markup=False, highlight=False, emoji=False,
                                 soft_wrap=True, style='yellow')


class PlainSink:
    """Sink that writes unstyled text with print().

    All output goes to the configured file handle (default: stdout);
    warnings go to ``warn_file`` (default: stderr). Style tokens are
    accepted and ignored.
    """

    def __init__(self, file: TextIO = None, warn_file: TextIO = None):
        self.file = file
        self.warn_file = warn_file
        self.depth = 0

    def print_styled(self, prefix: str, style: Optional[str], *args: Any) -> None:
        out = self.file if self.file is not None else sys.stdout
        print(INDENT * self.depth + prefix, *args, file=out)

    def group_open(self, title: str, style: Optional[str] = None) -> None:
        out = self.file if self.file is not None else sys.stdout
        print(INDENT * self.depth + title, file=out)
        self.depth += 1

    def group_close(self) -> None:
        if self.depth > 0:
            self.depth -= 1

    def warn(self, *args: Any) -> None:
        out = self.warn_file if self.warn_file is not None else sys.stderr
        print(INDENT * self.depth + ' '.join(describe(a) for a in args), file=out)
