import logging

from caret_core.errors import SysError
from caret_core.models.position import Position, SourceSnippet

_logger = logging.getLogger("caret.source")


def extract_snippet(position: Position) -> SourceSnippet:
    """Best-effort read of the lines before, at and after ``position.line``.

    Never raises: unreadable files are logged on ``caret.source`` and yield an
    empty (or partial) snippet.
    """
    if not position.has_line or not position.is_file_backed:
        return SourceSnippet(position=position)

    found: dict[str, str] = {}
    target = position.line - 1

    try:
        f = open(position.file, "r", encoding="utf-8", errors="replace", newline="\n")
    except OSError as e:
        _log_failure(position, SysError(e, "opening file '%s'", position.file))
        return SourceSnippet(position=position)

    try:
        with f:
            for count, line in enumerate(f, start=1):
                if count < target:
                    continue
                text = line.rstrip("\r\n")
                if count == target:
                    found["previous_line"] = text
                elif count == target + 1:
                    found["error_line"] = text
                else:
                    found["next_line"] = text
                    break
    except OSError as e:
        _log_failure(position, SysError(e, "reading file '%s'", position.file))
    except (UnicodeError, ValueError) as e:
        _log_failure(position, e)

    return SourceSnippet(position=position, **found)


def _log_failure(position: Position, exc: Exception) -> None:
    reason = exc.description if isinstance(exc, SysError) else str(exc)
    _logger.error("error reading source file: %s\n%s", position.file, reason)
