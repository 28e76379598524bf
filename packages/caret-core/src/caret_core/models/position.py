from pydantic import BaseModel, ConfigDict, field_validator

# Reserved file value for positions that point into in-memory text.
STRING_SOURCE = "(string)"


class Position(BaseModel):
    """A location in a source file. Line and column are 1-based; 0 means unknown."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    file: str = ""
    line: int = 0
    column: int = 0

    @field_validator("line", "column", mode="before")
    @classmethod
    def _coerce_int(cls, v):
        return 0 if v is None else int(v)

    @property
    def has_line(self) -> bool:
        return self.line > 0

    @property
    def has_column(self) -> bool:
        return self.line > 0 and self.column > 0

    @property
    def is_file_backed(self) -> bool:
        return self.file not in ("", STRING_SOURCE)

    def show(self) -> str:
        return show_position(self)


class SourceSnippet(BaseModel):
    """Up to three source lines around a position, filled left to right."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    position: Position
    previous_line: str | None = None
    error_line: str | None = None
    next_line: str | None = None


def show_position(position: Position) -> str:
    """Render ``(line:column)``, ``(line)`` or nothing."""
    if position.has_column:
        return f"({position.line}:{position.column})"
    if position.has_line:
        return f"({position.line})"
    return ""
