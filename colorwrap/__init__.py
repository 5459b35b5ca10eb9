"""colorwrap - Decide whether to color terminal output, and style it consistently"""

from .color import OPTION_NAME, ColorArgument
from .errors import ColorArgumentError
from .formatting import Formatting, Wrap, wrap
from .options import ColorOptions, add_color_option, evaluate
from .terminal import (
    ProcessTerminal,
    StaticTerminal,
    TerminalProbe,
    is_dumb,
    is_tty,
    terminal_type,
)

__all__ = [
    # Color policy
    "OPTION_NAME",
    "ColorArgument",
    # Errors
    "ColorArgumentError",
    # Formatting
    "Formatting",
    "Wrap",
    "wrap",
    # Options
    "ColorOptions",
    "add_color_option",
    "evaluate",
    # Terminal
    "ProcessTerminal",
    "StaticTerminal",
    "TerminalProbe",
    "is_dumb",
    "is_tty",
    "terminal_type",
]
