"""
Shared Rich Console for colorwrap's own diagnostics.

Warnings and errors go to stderr through this one instance, so they never mix
with the styled text a command writes to stdout. Rich makes its own decision
about coloring stderr; that is independent of the ``--color`` decision, which
only governs stdout.

Usage:
    from .console import console
    console.print("[yellow]Warning: ...[/yellow]")
"""

from rich.console import Console

console = Console(stderr=True, highlight=False)
