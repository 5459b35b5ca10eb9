"""
The ``--color`` command-line option.

``ColorOptions`` is what a command receives after its arguments are parsed:
the intent the user asked for plus the ``Formatting`` built from it. The
decision is made once, when the options are created, and every consumer then
shares the same read-only vocabulary.

Two ways in:
  - ``add_color_option(parser)`` for commands that own an ``argparse`` parser;
    an invalid keyword becomes an ordinary argparse usage error.
  - ``evaluate(args)`` for callers that only want the color decision out of
    an argument list; an invalid keyword raises ``ColorArgumentError``.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from .color import OPTION_NAME, ColorArgument
from .errors import ColorArgumentError
from .formatting import Formatting
from .terminal import TerminalProbe

FLAG = f"--{OPTION_NAME}"
USAGE = "apply terminal colors and formatting: " + " || ".join(
    f"'{choice}'" for choice in ColorArgument.choices()
)


@dataclass(frozen=True)
class ColorOptions:
    """Parsed color intent and the formatting that follows from it."""

    argument: ColorArgument
    formatting: Formatting

    @property
    def colorful(self) -> bool:
        return self.formatting.colorful

    @classmethod
    def create(
        cls, argument: ColorArgument, terminal: TerminalProbe | None = None
    ) -> ColorOptions:
        return cls(argument=argument, formatting=Formatting(argument.is_colorful(terminal)))

    @classmethod
    def from_namespace(
        cls, namespace: argparse.Namespace, terminal: TerminalProbe | None = None
    ) -> ColorOptions:
        """Build options from a namespace produced by a parser with ``--color``."""
        argument = getattr(namespace, OPTION_NAME, None)
        if argument is None:
            argument = ColorArgument.AUTO
        return cls.create(argument, terminal)


def _color_argument_type(text: str) -> ColorArgument:
    # argparse reports ArgumentTypeError messages verbatim
    try:
        return ColorArgument.parse(text)
    except ColorArgumentError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def add_color_option(
    parser: argparse.ArgumentParser, default: ColorArgument = ColorArgument.AUTO
) -> argparse.Action:
    """Register ``--color WHEN`` on ``parser``."""
    return parser.add_argument(
        FLAG,
        dest=OPTION_NAME,
        metavar="WHEN",
        type=_color_argument_type,
        default=default,
        help=f"{USAGE} (default: {default})",
    )


def evaluate(
    args: Sequence[str],
    terminal: TerminalProbe | None = None,
    default: ColorArgument = ColorArgument.AUTO,
) -> ColorOptions:
    """Pick ``--color`` out of ``args`` and resolve it.

    Arguments other than ``--color`` are ignored.

    Raises:
        ColorArgumentError: if the value is missing or not an accepted keyword.
    """
    scanner = argparse.ArgumentParser(add_help=False, allow_abbrev=False, exit_on_error=False)
    # Raw text; parsed below
    scanner.add_argument(FLAG, dest=OPTION_NAME, default=None)
    try:
        namespace, _ = scanner.parse_known_args(list(args))
    except argparse.ArgumentError as e:
        # --color given without a value
        raise ColorArgumentError("", ColorArgument.choices()) from e
    text = getattr(namespace, OPTION_NAME)
    argument = default if text is None else ColorArgument.parse(text)
    return ColorOptions.create(argument, terminal)
