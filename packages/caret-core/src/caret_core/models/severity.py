from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict
from rich.color import ColorSystem
from rich.style import Style


class Severity(IntEnum):
    """Diagnostic tiers, ordered from least to most verbose."""

    ERROR = 0
    WARN = 1
    INFO = 2
    TALKATIVE = 3
    CHATTY = 4
    DEBUG = 5
    VOMIT = 6

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity | int":
        """Coerce a member, number or name into a severity.

        Numbers outside the enumeration are returned unchanged so that they
        still render (as an invalid level) instead of being rejected.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            if key.lstrip("-").isdigit():
                return cls.parse(int(key))
            key = key.upper()
            if key == "WARNING":
                key = "WARN"
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"unknown severity: {value!r}") from None
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"unknown severity: {value!r}") from None
        try:
            return cls(number)
        except ValueError:
            return number


class Color(Enum):
    """Logical colors mapped onto rich style definitions."""

    RED = "bold red"
    YELLOW = "bold yellow"
    GREEN = "bold green"
    BLUE = "bold blue"
    NONE = ""

    @property
    def style(self) -> Style:
        return Style.parse(self.value) if self.value else Style.null()


class SeverityStyle(BaseModel):
    """Display label and color for one severity."""

    model_config = ConfigDict(frozen=True)
    label: str
    color: Color

    @property
    def color_on(self) -> str:
        return _ansi_pair(self.color)[0]

    @property
    def color_off(self) -> str:
        return _ansi_pair(self.color)[1]


def _ansi_pair(color: Color) -> tuple[str, str]:
    on, _, off = color.style.render("\0", color_system=ColorSystem.STANDARD).partition("\0")
    return on, off


_STYLES: dict[Severity, SeverityStyle] = {
    Severity.ERROR: SeverityStyle(label="error:", color=Color.RED),
    Severity.WARN: SeverityStyle(label="warning:", color=Color.YELLOW),
    Severity.INFO: SeverityStyle(label="info:", color=Color.GREEN),
    Severity.TALKATIVE: SeverityStyle(label="talk:", color=Color.GREEN),
    Severity.CHATTY: SeverityStyle(label="chat:", color=Color.GREEN),
    Severity.VOMIT: SeverityStyle(label="vomit:", color=Color.GREEN),
    Severity.DEBUG: SeverityStyle(label="debug:", color=Color.YELLOW),
}


def style_for(severity: Severity | int) -> SeverityStyle:
    try:
        return _STYLES[Severity(severity)]
    except (ValueError, KeyError):
        return SeverityStyle(label=f"invalid error level: {int(severity)}", color=Color.NONE)
