"""
Assembles a diagnostic report into text.

Layout (prefix omitted):

    error: --- name ------------------------------------------ program
    in file: path/to/file (3:4)

    description

         2| previous line
         3| error line
          |    ^
         4| next line

    hint

The header divider is padded with dashes to the configured width; when the
label, name and program name leave no room, exactly three dashes are kept and
the line simply runs long.
"""

import sys
from typing import IO

from caret_core.config import RenderConfig
from caret_core.models.position import Position, show_position
from caret_core.models.report import DiagnosticReport
from caret_core.models.severity import Color, style_for
from caret_core.render.console import StyledLine, detect_color, join_lines
from caret_core.render.context import render_context
from caret_core.source.extractor import extract_snippet

# Visible punctuation in either header variant: " --- " + " " + " " or " -----" + " ".
HEADER_PUNCTUATION = 7
MIN_DASHES = 3


def dash_count(used: int, width: int) -> int:
    return MIN_DASHES if used > width - MIN_DASHES else width - used


class ReportRenderer:
    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()

    def render_lines(self, report: DiagnosticReport) -> list[StyledLine]:
        prefix = self.config.prefix
        lines: list[StyledLine] = [self._header(report)]

        if report.position is not None:
            lines.append(self._location(report.position))
            lines.append(StyledLine(prefix))

        if report.description:
            lines.append(StyledLine(prefix + report.description))
            lines.append(StyledLine(prefix))

        if report.position is not None:
            context = render_context(prefix, extract_snippet(report.position))
            if context:
                lines.extend(context)
                lines.append(StyledLine(prefix))

            lines.append(StyledLine(prefix + (report.hint or "")))
            lines.append(StyledLine(prefix))

        return lines

    def render(self, report: DiagnosticReport, color: bool | None = None) -> str:
        if color is None:
            color = bool(self.config.color)
        return join_lines(self.render_lines(report), color)

    def print(self, report: DiagnosticReport, file: IO[str] | None = None) -> None:
        sink = file if file is not None else sys.stderr
        color = self.config.color
        if color is None:
            color = detect_color(sink)
        sink.write(self.render(report, color=color))
        sink.flush()

    def _header(self, report: DiagnosticReport) -> StyledLine:
        style = style_for(report.severity)
        program = self.config.program_name or ""
        prefix = self.config.prefix

        used = len(prefix) + len(style.label) + HEADER_PUNCTUATION + len(report.name) + len(program)
        dashes = "-" * dash_count(used, self.config.width)

        header = StyledLine(prefix)
        header.append(style.label, style=style.color.style)
        if report.name:
            header.append(f" --- {report.name} {dashes} {program}", style=Color.BLUE.style)
        else:
            header.append(f" -----{dashes} {program}", style=Color.BLUE.style)
        return header

    def _location(self, position: Position) -> StyledLine:
        prefix = self.config.prefix
        if not position.is_file_backed:
            return StyledLine(f"{prefix}from command line argument")
        line = StyledLine(f"{prefix}in file: ")
        line.append(f"{position.file} {show_position(position)}", style=Color.BLUE.style)
        return line


def render_report(report: DiagnosticReport, config: RenderConfig | None = None) -> str:
    return ReportRenderer(config).render(report)
