"""
Error types for colorwrap.

There is exactly one way for this package to fail: an unrecognised color
keyword. Capability probing and style application are total, so everything
else returns a value. The error is raised to whoever evaluates the command
line; colorwrap itself never guesses a replacement value.
"""

from collections.abc import Sequence


class ColorArgumentError(ValueError):
    """Raised when text does not name a color intent.

    Carries the offending text and the accepted keywords so callers can build
    their own message, while ``str(err)`` already reads well on a terminal.
    """

    def __init__(self, value: str, choices: Sequence[str]):
        self.value = value
        self.choices = tuple(choices)
        accepted = ", ".join(f"'{choice}'" for choice in self.choices)
        super().__init__(f"invalid color argument '{value}' (choose from {accepted})")
