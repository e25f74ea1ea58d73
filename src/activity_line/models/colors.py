"""ANSI color capability for the activity lines.

Colors are configured per role (icons, names, dimmed text) as one of three
forms, which map directly onto the YAML config:

    {c16: 3}                  16-color palette index
    {c256: 208}               256-color palette index
    {r: 255, g: 128, b: 0}    24-bit RGB

``None`` means "no color"; the text is returned unchanged.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from activity_line.constants import ANSI_RESET

_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


class Color16(BaseModel):
    """Standard (0-7) or bright (8-15) palette color."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    c16: int = Field(ge=0, le=15, description="16-color palette index")

    def escape(self) -> str:
        code = 30 + self.c16 if self.c16 < 8 else 90 + (self.c16 - 8)
        return f"\x1b[{code}m"


class Color256(BaseModel):
    """Extended 256-color palette color."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    c256: int = Field(ge=0, le=255, description="256-color palette index")

    def escape(self) -> str:
        return f"\x1b[38;5;{self.c256}m"


class RgbColor(BaseModel):
    """24-bit true color."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    def escape(self) -> str:
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m"


AnsiColor = Color16 | Color256 | RgbColor


def apply_color(text: str, color: AnsiColor | None) -> str:
    """Wrap text in the color's escape sequence and a reset.

    Args:
        text: Text to color.
        color: Color to apply, or None for plain text.

    Returns:
        The colored text, or the text unchanged when no color is given.
    """
    if color is None:
        return text
    return f"{color.escape()}{text}{ANSI_RESET}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences, leaving the visible text."""
    return _ANSI_ESCAPE_RE.sub("", text)
