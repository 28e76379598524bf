from .position import STRING_SOURCE, Position, SourceSnippet, show_position
from .report import DiagnosticReport
from .severity import Color, Severity, SeverityStyle, style_for

__all__ = [
    "STRING_SOURCE",
    "Color",
    "DiagnosticReport",
    "Position",
    "Severity",
    "SeverityStyle",
    "SourceSnippet",
    "show_position",
    "style_for",
]
