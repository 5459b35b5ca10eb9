"""
Command-line entry point: style a piece of text the way colorwrap would.

    colorwrap path src/main
    colorwrap --color always quote --mark "'" hello
    colorwrap sample | less -R

Styled output goes to stdout; problems are reported on stderr through the
shared console. Exit status is 0 on success and 2 for a usage error (argparse
convention), which includes an invalid color keyword from the command line or
from COLORWRAP_COLOR.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from importlib.metadata import PackageNotFoundError, version

from rich.markup import escape

from .color import ColorArgument
from .config import default_color_argument, default_quotation_mark
from .console import console
from .errors import ColorArgumentError
from .formatting import DEFAULT_QUOTATION_MARK, Formatting
from .options import ColorOptions, add_color_option

USAGE_ERROR = 2


def get_version() -> str:
    """Installed package version, or "dev" when running from a source checkout."""
    try:
        return version("colorwrap")
    except PackageNotFoundError:
        return "dev"


def _sample(formatting: Formatting, text: str, quotation_mark: str) -> str:
    project = text or "rich"
    lines = [
        formatting.bulletin_title("colorwrap sample"),
        f"{formatting.bullets}Fetching {formatting.project_name(project)}",
        f"{formatting.bullets}Cloning from {formatting.url(f'https://github.com/example/{project}.git')}",
        f"{formatting.bullets}Checking out {formatting.project_name(project)} at "
        + formatting.quote("v1.0.0", quotation_mark),
        f"{formatting.bullets}Building into {formatting.path(f'build/{project}')}",
    ]
    return "\n".join(lines)


# Style name -> renderer(formatting, text, quotation_mark)
STYLES: dict[str, Callable[[Formatting, str, str], str]] = {
    "bulletin": lambda f, text, _: f.bulletin(text),
    "bullets": lambda f, text, _: f.bullets + text,
    "title": lambda f, text, _: f.bulletin_title(text),
    "url": lambda f, text, _: f.url(text),
    "project": lambda f, text, _: f.project_name(text),
    "path": lambda f, text, _: f.path(text),
    "quote": lambda f, text, mark: f.quote(text, mark),
    "sample": _sample,
}


def render(
    formatting: Formatting, style: str, text: str, quotation_mark: str = DEFAULT_QUOTATION_MARK
) -> str:
    """Apply the named style to ``text``.

    Raises:
        KeyError: if ``style`` is not one of STYLES.
    """
    return STYLES[style](formatting, text, quotation_mark)


def build_parser(
    default_color: ColorArgument = ColorArgument.AUTO, default_mark: str = DEFAULT_QUOTATION_MARK
) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorwrap",
        description="Print text with colorwrap's terminal styles.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    add_color_option(parser, default=default_color)
    parser.add_argument(
        "--mark",
        default=default_mark,
        help="quotation mark for the quote style (default: %(default)s)",
    )
    parser.add_argument("style", choices=list(STYLES), help="style to apply")
    parser.add_argument("text", nargs="*", help="text to style; words are joined with spaces")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    try:
        default_color = default_color_argument()
    except ColorArgumentError as e:
        console.print(f"[red]Error: COLORWRAP_COLOR: {escape(str(e))}[/red]")
        return USAGE_ERROR

    parser = build_parser(default_color, default_quotation_mark())
    args = parser.parse_args(argv)

    options = ColorOptions.from_namespace(args)
    print(render(options.formatting, args.style, " ".join(args.text), args.mark))
    return 0
