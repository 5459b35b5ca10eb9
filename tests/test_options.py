"""
Tests for the --color option surface (colorwrap/options.py).

Covers both entry points: ``add_color_option`` for commands with their own
argparse parser, and ``evaluate`` for callers that only need the decision.
Terminal state is always injected with StaticTerminal.
"""

import argparse

import pytest

from colorwrap.color import ColorArgument
from colorwrap.errors import ColorArgumentError
from colorwrap.formatting import Formatting
from colorwrap.options import USAGE, ColorOptions, add_color_option, evaluate
from colorwrap.terminal import StaticTerminal

TTY = StaticTerminal(tty=True)
PIPE = StaticTerminal(tty=False)
DUMB_TTY = StaticTerminal(term="dumb", tty=True)


class TestColorOptions:
    def test_create_resolves_once(self):
        options = ColorOptions.create(ColorArgument.AUTO, TTY)
        assert options.argument is ColorArgument.AUTO
        assert options.colorful is True
        assert options.formatting == Formatting(True)

    def test_create_always_on_pipe(self):
        assert ColorOptions.create(ColorArgument.ALWAYS, PIPE).colorful is True

    def test_create_never_on_tty(self):
        assert ColorOptions.create(ColorArgument.NEVER, TTY).colorful is False

    def test_from_namespace(self):
        namespace = argparse.Namespace(color=ColorArgument.NEVER)
        assert ColorOptions.from_namespace(namespace, TTY).colorful is False

    def test_from_namespace_without_color_defaults_to_auto(self):
        options = ColorOptions.from_namespace(argparse.Namespace(), TTY)
        assert options.argument is ColorArgument.AUTO
        assert options.colorful is True


class TestAddColorOption:
    @pytest.fixture
    def parser(self):
        parser = argparse.ArgumentParser(prog="tool")
        add_color_option(parser)
        return parser

    def test_default_is_auto(self, parser):
        assert parser.parse_args([]).color is ColorArgument.AUTO

    @pytest.mark.parametrize(
        "argv, expected",
        [
            (["--color", "Never"], ColorArgument.NEVER),
            (["--color=ALWAYS"], ColorArgument.ALWAYS),
            (["--color", "auto"], ColorArgument.AUTO),
        ],
    )
    def test_parses_case_insensitively(self, parser, argv, expected):
        assert parser.parse_args(argv).color is expected

    def test_custom_default(self):
        parser = argparse.ArgumentParser()
        add_color_option(parser, default=ColorArgument.NEVER)
        assert parser.parse_args([]).color is ColorArgument.NEVER

    def test_invalid_value_is_usage_error(self, parser, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parser.parse_args(["--color", "maybe"])
        assert excinfo.value.code == 2
        err = capsys.readouterr().err
        assert "invalid color argument 'maybe'" in err
        assert "'auto', 'never', 'always'" in err

    def test_help_text(self, parser):
        help_text = " ".join(parser.format_help().split())
        assert "--color WHEN" in help_text
        assert "apply terminal colors and formatting" in help_text
        assert "(default: auto)" in help_text

    def test_usage_lists_keywords(self):
        assert USAGE == "apply terminal colors and formatting: 'auto' || 'never' || 'always'"


class TestEvaluate:
    def test_no_option_means_auto(self):
        assert evaluate([], TTY).argument is ColorArgument.AUTO
        assert evaluate([], TTY).colorful is True
        assert evaluate([], PIPE).colorful is False

    def test_other_arguments_are_ignored(self):
        options = evaluate(["build", "--verbose", "--color", "always", "Foo"], PIPE)
        assert options.argument is ColorArgument.ALWAYS
        assert options.colorful is True

    def test_equals_form(self):
        assert evaluate(["--color=NEVER"], TTY).colorful is False

    def test_auto_on_dumb_terminal(self):
        assert evaluate(["--color", "auto"], DUMB_TTY).colorful is False

    def test_custom_default(self):
        assert evaluate([], TTY, default=ColorArgument.NEVER).argument is ColorArgument.NEVER

    def test_invalid_value_raises(self):
        with pytest.raises(ColorArgumentError) as excinfo:
            evaluate(["--color", "maybe"], TTY)
        assert excinfo.value.value == "maybe"

    @pytest.mark.parametrize("args", [["--color"], ["--color", "--verbose"]])
    def test_missing_value_raises_without_output(self, args, capsys):
        """A bare --color is reported to the caller, not printed and exited on."""
        with pytest.raises(ColorArgumentError) as excinfo:
            evaluate(args, TTY)
        assert excinfo.value.value == ""
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestEndToEnd:
    """Full path from process facts to a styled path."""

    def test_unset_term_not_a_tty(self):
        options = evaluate([], StaticTerminal(term=None, tty=False))
        assert options.colorful is False
        assert options.formatting.path("src/main") == "src/main"

    def test_unset_term_on_a_tty(self):
        options = evaluate([], StaticTerminal(term=None, tty=True))
        assert options.colorful is True
        styled = options.formatting.path("src/main")
        assert styled != "src/main"
        assert "src/main" in styled

    def test_dumb_terminal_on_a_tty(self):
        options = evaluate([], StaticTerminal(term="dumb", tty=True))
        assert options.colorful is False

    def test_always_overrides_dumb_pipe(self):
        options = evaluate(["--color", "always"], StaticTerminal(term="dumb", tty=False))
        assert options.colorful is True
