import logging
import sys
from functools import wraps
from typing import Optional

import click
from caret_core.config import RenderConfig, configure_logger
from caret_core.data.loader import load_report
from caret_core.errors import UsageError
from caret_core.models import DiagnosticReport, Position, Severity
from caret_core.render.report import ReportRenderer

_SEVERITY_NAMES = [s.name.lower() for s in Severity] + ["warning"]


def render_options(func):
    """Options shared by every command that prints a report."""

    @click.option("--program-name", type=str, default=None, help="Name shown at the end of the header divider.")
    @click.option("--prefix", type=str, default=None, help="Text prepended to every output line.")
    @click.option("--width", type=click.IntRange(min=1), default=None, help="Header width in columns [default: 80].")
    @click.option("--color/--no-color", default=None, help="Force color on or off (default: detect).")
    @click.option("--stdout", "to_stdout", is_flag=True, help="Write to stdout instead of stderr.")
    @click.option("--strict", is_flag=True, help="Exit with code 1 when the report is an error.")
    @click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
    @wraps(func)
    def wrapper(program_name, prefix, width, color, to_stdout, strict, verbose, **kwargs):
        configure_logger(logging.DEBUG if verbose else logging.WARNING)

        # Environment first, explicit options win.
        overrides = {
            "program_name": program_name,
            "prefix": prefix,
            "width": width,
            "color": color,
        }
        env_cfg = RenderConfig.from_env()
        config = env_cfg.model_copy(update={k: v for k, v in overrides.items() if v is not None})
        renderer = ReportRenderer(config)
        sink = sys.stdout if to_stdout else sys.stderr

        try:
            report = func(**kwargs)
        except UsageError as e:
            renderer.print(e.to_report(), file=sink)
            sys.exit(1)

        renderer.print(report, file=sink)
        if strict and report.severity == Severity.ERROR:
            sys.exit(1)

    return wrapper


@click.command("render")
@click.argument("report_path", type=click.Path(path_type=str, dir_okay=False))
@render_options
def render(report_path: str) -> DiagnosticReport:
    """Print a report loaded from a YAML document."""
    try:
        return load_report(report_path)
    except (FileNotFoundError, ValueError) as e:
        raise UsageError("cannot load report '%s': %s", report_path, e) from e


@click.command("show")
@click.option(
    "--severity",
    type=click.Choice(_SEVERITY_NAMES, case_sensitive=False),
    default="error",
    show_default=True,
    help="Severity tier of the report.",
)
@click.option("--name", type=str, default="", help="Short name shown in the header.")
@click.option("--description", type=str, default="", help="Human-readable description.")
@click.option("--hint", type=str, default=None, help="Remediation hint.")
@click.option(
    "--file",
    "file_",
    type=str,
    default=None,
    help="Source file the report points into ('(string)' for in-memory text).",
)
@click.option("--line", type=int, default=0, show_default=True, help="1-based line number.")
@click.option("--column", type=int, default=0, show_default=True, help="1-based column number.")
@render_options
def show(
    severity: str,
    name: str,
    description: str,
    hint: Optional[str],
    file_: Optional[str],
    line: int,
    column: int,
) -> DiagnosticReport:
    """Print a report built from command line options."""
    position = None
    if file_ is not None or line > 0:
        position = Position(file=file_ or "", line=line, column=column)
    return DiagnosticReport(
        severity=severity,
        name=name,
        description=description,
        hint=hint,
        position=position,
    )
