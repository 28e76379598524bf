from .context import render_context
from .report import ReportRenderer, render_report

__all__ = ["ReportRenderer", "render_context", "render_report"]
