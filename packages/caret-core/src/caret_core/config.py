"""
Render configuration for caret.

Environment flags (all optional):

    CARET_PROGRAM_NAME = str
        Shown at the end of every header divider. Default: unset.

    CARET_PREFIX = str
        Prepended to every output line. Default: "".

    CARET_WIDTH = int >= 1
        Target header width in columns. Default: 80.

    CARET_COLOR = "1" | "0" | "auto"
        Force color on or off. Default: "auto" (detect on the output sink,
        honouring NO_COLOR).

Values that fail to parse fall back to the defaults.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_WIDTH",
    "RenderConfig",
    "configure_logger",
]

DEFAULT_WIDTH = 80

_LOGGER_NAME = "caret"
_logger = logging.getLogger(_LOGGER_NAME)


def configure_logger(level: int = logging.WARNING) -> None:
    """
    Ensure the caret logger has a handler in case the app didn't configure logging.
    Safe to call multiple times.
    """
    if not _logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        handler.setFormatter(formatter)
        _logger.addHandler(handler)
    _logger.setLevel(level)


def _env_bool(name: str, default: bool | None) -> bool | None:
    val = os.getenv(name)
    if val is None:
        return default
    val = str(val).strip().lower()
    if val in {"1", "true", "yes", "on"}:
        return True
    if val in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        out = int(val)
    except ValueError:
        return default
    return out if out >= minimum else default


class RenderConfig(BaseModel):
    """Immutable settings injected into the report renderer."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    program_name: str | None = None
    prefix: str = ""
    width: int = Field(default=DEFAULT_WIDTH, ge=1)
    color: bool | None = None

    @classmethod
    def from_env(cls) -> "RenderConfig":
        return cls(
            program_name=os.getenv("CARET_PROGRAM_NAME") or None,
            prefix=os.getenv("CARET_PREFIX", ""),
            width=_env_int("CARET_WIDTH", DEFAULT_WIDTH),
            color=_env_bool("CARET_COLOR", None),
        )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RenderConfig":
        from caret_core.data.loader import load_yaml_typed

        return load_yaml_typed(path, model=cls)
