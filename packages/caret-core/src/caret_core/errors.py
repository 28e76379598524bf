"""
Error hierarchy that renders itself as a diagnostic report.

Usage:

    from caret_core.errors import Error, SysError

    raise Error("attribute '%s' missing", "src", hint="add it to the derivation")

    try:
        open(path)
    except OSError as e:
        raise SysError(e, "opening file '%s'", path) from e

The rendered report (``err.message``) uses the process configuration from
``RenderConfig.from_env()``, is computed on first access and kept on the
instance. ``str(err)`` is ``err.prefix`` followed by that report, so prefixes
added while the error propagates show up without re-rendering it.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any

from caret_core.models.position import Position
from caret_core.models.report import DiagnosticReport
from caret_core.models.severity import Severity

__all__ = [
    "BaseError",
    "Error",
    "SysError",
    "UsageError",
    "hintfmt",
]


def hintfmt(template: str, *args: Any) -> str:
    """printf-style formatting that tolerates templates without placeholders."""
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError):
        return " ".join([template, *map(str, args)])


class BaseError(Exception):
    def __init__(
        self,
        template: str = "",
        *args: Any,
        severity: Severity | int = Severity.ERROR,
        name: str | None = None,
        hint: str | None = None,
        position: Position | None = None,
    ):
        self.description = hintfmt(template, *args)
        self.severity = severity
        self.hint = hint
        self.position = position
        self.prefix = ""
        self._name = name
        super().__init__(self.description)

    @property
    def name(self) -> str:
        return self._name if self._name is not None else type(self).__name__

    def add_prefix(self, prefix: str) -> "BaseError":
        self.prefix = prefix + self.prefix
        return self

    def to_report(self) -> DiagnosticReport:
        return DiagnosticReport(
            severity=self.severity,
            name=self.name,
            description=self.description,
            hint=self.hint,
            position=self.position,
        )

    @cached_property
    def message(self) -> str:
        from caret_core.config import RenderConfig
        from caret_core.render.report import render_report

        return render_report(self.to_report(), RenderConfig.from_env())

    def __str__(self) -> str:
        return self.prefix + self.message


class Error(BaseError):
    pass


class UsageError(Error):
    pass


class SysError(Error):
    """An OS-level failure; the system message is appended to the description."""

    def __init__(self, cause: OSError, template: str = "", *args: Any, **kwargs: Any):
        super().__init__(template, *args, **kwargs)
        self.errno = cause.errno
        reason = cause.strerror or str(cause)
        self.description = f"{self.description}: {reason}" if self.description else reason
        self.args = (self.description,)
