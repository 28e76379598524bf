from pydantic import BaseModel, ConfigDict, field_validator

from .position import Position
from .severity import Severity


class DiagnosticReport(BaseModel):
    """One problem to render: severity, name, description, hint and position."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    severity: Severity | int = Severity.ERROR
    name: str = ""
    description: str = ""
    hint: str | None = None
    position: Position | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, v):
        return Severity.parse(v)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _coerce_str(cls, v):
        return "" if v is None else str(v)
