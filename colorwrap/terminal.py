"""
Information about the terminal the process may be attached to.

Two facts drive automatic color detection:
  - the terminal type advertised in the ``TERM`` environment variable, where
    ``dumb`` means "no escape sequences, please";
  - whether standard output is a terminal device at all (pipes and files are not).

Both are read fresh on every call. Nothing is cached, so a test that patches
``os.environ`` or ``sys.stdout`` sees its patch immediately.

The probe is a tiny protocol (``is_dumb()`` and ``is_tty()``) rather than a
set of module globals, so color resolution can be handed a ``StaticTerminal``
with fixed answers instead of a real TTY.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Protocol

TERM_VARIABLE = "TERM"
DUMB_TERMINAL = "dumb"


def terminal_type() -> str | None:
    """Terminal type from the ``TERM`` environment variable, or None if unset."""
    return os.environ.get(TERM_VARIABLE)


def _names_dumb_terminal(term: str | None) -> bool:
    return term is not None and term.casefold() == DUMB_TERMINAL


def is_dumb() -> bool:
    """Whether the terminal type is ``dumb`` (any case). Unset is not dumb."""
    return _names_dumb_terminal(terminal_type())


def is_tty() -> bool:
    """Whether standard output is attached to a terminal device.

    Any failure to ask (stdout closed or replaced by an object without a file
    descriptor) is reported as "not a terminal".
    """
    stream = sys.stdout
    if stream is None:
        return False
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


class TerminalProbe(Protocol):
    """Anything that can answer the two questions color detection asks."""

    def is_dumb(self) -> bool: ...

    def is_tty(self) -> bool: ...


class ProcessTerminal:
    """Probe backed by the live process environment and stdout."""

    @property
    def terminal_type(self) -> str | None:
        return terminal_type()

    def is_dumb(self) -> bool:
        return is_dumb()

    def is_tty(self) -> bool:
        return is_tty()

    def __repr__(self) -> str:
        return "ProcessTerminal()"


@dataclass(frozen=True)
class StaticTerminal:
    """Probe with fixed answers, for tests and callers that already know them.

    Args:
        term: The terminal type to report, or None for "unset".
        tty: Whether stdout should be reported as a terminal device.
    """

    term: str | None = None
    tty: bool = False

    @property
    def terminal_type(self) -> str | None:
        return self.term

    def is_dumb(self) -> bool:
        return _names_dumb_terminal(self.term)

    def is_tty(self) -> bool:
        return self.tty
