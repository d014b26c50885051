"""Console diagnostics.

Failures go to stderr with a bold red label.  Notices and successes go to
stdout; the processor only emits them in verbose mode.
"""

from __future__ import annotations

import typer


class Reporter:
    def error(self, label: str, detail: str = "") -> None:
        """Print one failure line to stderr."""
        line = typer.style(label, fg = typer.colors.RED, bold = True)
        typer.echo(f"{line} {detail}" if detail else line, err = True)

    def notice(self, label: str, detail: str = "") -> None:
        line = typer.style(label, fg = typer.colors.YELLOW, bold = True)
        typer.echo(f"{line} {detail}" if detail else line)

    def success(self, message: str) -> None:
        typer.secho(message, fg = typer.colors.GREEN, bold = True)
