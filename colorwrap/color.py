"""
The user's color intent: ``auto``, ``never`` or ``always``.

``never`` and ``always`` are explicit overrides: force colors off for log
capture, or on when piping into a pager that understands escape sequences.
``auto`` defers to the terminal: colors only when stdout is a TTY whose
``TERM`` is not ``dumb``.

Parsing is the only place where anything can go wrong. Once a
``ColorArgument`` exists, resolving it to a yes/no answer always succeeds.
"""

from __future__ import annotations

from enum import Enum

from .errors import ColorArgumentError
from .terminal import ProcessTerminal, TerminalProbe

# Key the command-line option is registered under (``--color``)
OPTION_NAME = "color"


class ColorArgument(str, Enum):
    """Whether to apply terminal colors and formatting."""

    AUTO = "auto"
    NEVER = "never"
    ALWAYS = "always"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def choices(cls) -> list[str]:
        """Accepted keywords, in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, text: str) -> ColorArgument:
        """Parse a keyword case-insensitively.

        Raises:
            ColorArgumentError: if ``text`` is not one of the accepted keywords.
                Unknown text is never mapped to a default.
        """
        try:
            return cls(text.lower())
        except ValueError:
            raise ColorArgumentError(text, cls.choices()) from None

    def is_colorful(self, terminal: TerminalProbe | None = None) -> bool:
        """Resolve the intent against a terminal probe (the live process by default)."""
        if self is ColorArgument.ALWAYS:
            return True
        if self is ColorArgument.NEVER:
            return False
        probe = terminal if terminal is not None else ProcessTerminal()
        return probe.is_tty() and not probe.is_dumb()
