from caret_core.models.position import SourceSnippet
from caret_core.models.severity import Color
from caret_core.render.console import StyledLine

# " NNNNN|" on numbered lines; the caret line must use the same width.
GUTTER_WIDTH = 7
CARET_GUTTER = " " * (GUTTER_WIDTH - 1) + "|"


def _numbered(prefix: str, lineno: int, text: str) -> StyledLine:
    return StyledLine(f"{prefix} {lineno:>5}| {text}")


def render_context(prefix: str, snippet: SourceSnippet) -> list[StyledLine]:
    """Line-numbered source lines around the error with a caret under the column."""
    if snippet.error_line is None:
        return []

    position = snippet.position
    lines: list[StyledLine] = []

    if snippet.previous_line is not None:
        lines.append(_numbered(prefix, position.line - 1, snippet.previous_line))

    lines.append(_numbered(prefix, position.line, snippet.error_line))

    if position.has_column:
        caret = StyledLine(f"{prefix}{CARET_GUTTER}{' ' * position.column}")
        caret.append("^", style=Color.RED.style)
        lines.append(caret)

    if snippet.next_line is not None:
        lines.append(_numbered(prefix, position.line + 1, snippet.next_line))

    return lines
