"""
The named styles used for everything colorwrap prints.

Rather than sprinkling escape codes or Rich markup through the code, output
goes through a small, closed vocabulary:

    bulletin        headline text (bold blue)
    bullets         the "*** " prefix, already styled
    bulletin_title  "*** text ***", styled as a bulletin
    url             underlined
    project_name    bold
    path            yellow
    quote           "text" in green, with a configurable quotation mark

A ``Formatting`` is built once from a single resolved yes/no answer and then
shared read-only. When colors are off every style is the identity function,
so callers never need to branch on color support themselves.

Escape sequences come from Rich's ``Style.render`` using the standard 8-color
palette, so the output is understood by every color-capable terminal.

Each style is meant to be applied once to a plain run of text. Nesting one
style inside another is not supported: the closing reset of the inner style
also ends the outer one.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from rich.color import ColorSystem
from rich.style import Style

Wrap = Callable[[str], str]
"""A string transformation: apply a style, or pass the string through."""

BULLETS = "***"
DEFAULT_QUOTATION_MARK = '"'

BULLETIN_STYLE = Style(color="blue", bold=True)
URL_STYLE = Style(underline=True)
PROJECT_NAME_STYLE = Style(bold=True)
PATH_STYLE = Style(color="yellow")
QUOTE_STYLE = Style(color="green")

_PLACEHOLDER = "\0"


def wrap(colorful: bool, style: Style) -> Wrap:
    """Build a function that styles a string, or passes it through unchanged."""
    if not colorful:
        return _passthrough

    # Rich leaves empty text unstyled, so take the codes from a rendered placeholder
    prefix, _, suffix = style.render(_PLACEHOLDER, color_system=ColorSystem.STANDARD).partition(
        _PLACEHOLDER
    )

    def styled(string: str) -> str:
        return prefix + string + suffix

    return styled


def _passthrough(string: str) -> str:
    return string


@dataclass(frozen=True)
class Formatting:
    """Wraps strings with terminal colors and formatting, or passes them through.

    Args:
        colorful: The resolved decision. Captured at construction; the styles
            never look at the terminal again.
    """

    colorful: bool
    bulletin: Wrap = field(init=False, repr=False, compare=False)
    bullets: str = field(init=False, repr=False, compare=False)
    url: Wrap = field(init=False, repr=False, compare=False)
    project_name: Wrap = field(init=False, repr=False, compare=False)
    path: Wrap = field(init=False, repr=False, compare=False)
    _quote: Wrap = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Frozen dataclass: the style table is filled in once, here
        bulletin = wrap(self.colorful, BULLETIN_STYLE)
        object.__setattr__(self, "bulletin", bulletin)
        object.__setattr__(self, "bullets", bulletin(BULLETS) + " ")
        object.__setattr__(self, "url", wrap(self.colorful, URL_STYLE))
        object.__setattr__(self, "project_name", wrap(self.colorful, PROJECT_NAME_STYLE))
        object.__setattr__(self, "path", wrap(self.colorful, PATH_STYLE))
        object.__setattr__(self, "_quote", wrap(self.colorful, QUOTE_STYLE))

    def bulletin_title(self, string: str) -> str:
        """Wrap a string in bullets, one space of padding, and bulletin formatting."""
        return self.bulletin(f"{BULLETS} {string} {BULLETS}")

    def quote(self, string: str, quotation_mark: str = DEFAULT_QUOTATION_MARK) -> str:
        """Wrap a string in quotation marks and quote formatting.

        ``quotation_mark`` may be any string, including more than one character.
        """
        return self._quote(quotation_mark + string + quotation_mark)
