from dataclasses import dataclass, field
from typing import IO, Iterable

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style
from rich.text import Span


@dataclass
class StyledLine:
    """One output line: the raw text plus rich style spans over it.

    Unlike ``rich.text.Text`` the text is kept byte for byte; control
    characters in descriptions or source lines are not stripped, so column
    arithmetic done on the raw strings stays valid.
    """

    plain: str = ""
    spans: list[Span] = field(default_factory=list)

    def append(self, text: str, style: Style | None = None) -> "StyledLine":
        start = len(self.plain)
        self.plain += text
        if style and text:
            self.spans.append(Span(start, len(self.plain), style))
        return self


def detect_color(file: IO[str] | None = None) -> bool:
    """Whether ``file`` (default: stderr) is a terminal that accepts color.

    Honours NO_COLOR / FORCE_COLOR through rich's console detection.
    """
    console = Console(file=file, stderr=file is None)
    return console.color_system is not None and not console.no_color


def to_ansi(line: StyledLine, color: bool) -> str:
    """Flatten a line into a string, with ANSI escapes only when ``color``.

    Spans never overlap; text between them is emitted unstyled.
    """
    if not color:
        return line.plain
    parts: list[str] = []
    pos = 0
    for span in sorted(line.spans, key=lambda s: s.start):
        parts.append(line.plain[pos : span.start])
        parts.append(span.style.render(line.plain[span.start : span.end], color_system=ColorSystem.STANDARD))
        pos = span.end
    parts.append(line.plain[pos:])
    return "".join(parts)


def join_lines(lines: Iterable[StyledLine], color: bool) -> str:
    return "".join(to_ansi(line, color) + "\n" for line in lines)
