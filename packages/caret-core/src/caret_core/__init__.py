from .config import RenderConfig
from .errors import BaseError, Error, SysError, UsageError
from .models import STRING_SOURCE, DiagnosticReport, Position, Severity
from .render import ReportRenderer, render_report

__all__ = [
    "STRING_SOURCE",
    "BaseError",
    "DiagnosticReport",
    "Error",
    "Position",
    "RenderConfig",
    "ReportRenderer",
    "Severity",
    "SysError",
    "UsageError",
    "render_report",
]
