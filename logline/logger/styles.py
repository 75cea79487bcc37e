# logline/logger/styles.py
"""
Terminal styling for rendered lines.

The formatter only knows style slots (StyleClass). A Styler turns a slot into
escape codes, or into nothing for plain output.
"""

from enum import Enum
from typing import Dict, Optional, Protocol, TextIO
from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style


class StyleClass(str, Enum):
    """Style slots used by the line formatter."""

    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"
    MAIN_THREAD = "main_thread"
    THREAD = "thread"
    TIMESTAMP = "timestamp"
    LOCATION = "location"

    def __str__(self) -> str:
        return self.value


DEFAULT_STYLES: Dict[StyleClass, str] = {
    StyleClass.ERROR: "bold red",
    StyleClass.WARN: "bold yellow",
    StyleClass.INFO: "bold green",
    StyleClass.DEBUG: "bold blue",
    StyleClass.TRACE: "bold magenta",
    StyleClass.MAIN_THREAD: "bright_green",
    StyleClass.THREAD: "bright_blue",
    StyleClass.TIMESTAMP: "cyan",
    StyleClass.LOCATION: "yellow",
}


class Styler(Protocol):
    def style(self, text: str, style_class: StyleClass) -> str: ...


class PlainStyler:
    """Leaves text untouched. Used for files, pipes and tests."""

    def style(self, text: str, style_class: StyleClass) -> str:
        return text


class RichStyler:
    """
    Renders style slots as ANSI escape codes through rich.

    Args:
        styles: Overrides for DEFAULT_STYLES, in rich style syntax
        color_system: rich colour system used for rendering
    """

    def __init__(
        self,
        styles: Optional[Dict[StyleClass, str]] = None,
        color_system: ColorSystem = ColorSystem.STANDARD,
    ) -> None:
        merged = {**DEFAULT_STYLES, **(styles or {})}
        self._styles: Dict[StyleClass, Style] = {
            style_class: Style.parse(definition)
            for style_class, definition in merged.items()
        }
        self._color_system = color_system

    def style(self, text: str, style_class: StyleClass) -> str:
        style = self._styles.get(style_class)
        if style is None:
            return text
        return style.render(text, color_system=self._color_system)


def default_styler(stream: TextIO, colors: Optional[bool] = None) -> Styler:
    """
    Pick a styler for a stream.

    Args:
        stream: Stream the handler writes to
        colors: True/False forces the choice, None asks rich whether the
            stream is a colour terminal (honours NO_COLOR and FORCE_COLOR)
    """
    if colors is None:
        console = Console(file=stream)
        colors = console.is_terminal and not console.no_color
    return RichStyler() if colors else PlainStyler()


__all__ = [
    "StyleClass",
    "DEFAULT_STYLES",
    "Styler",
    "PlainStyler",
    "RichStyler",
    "default_styler",
]
