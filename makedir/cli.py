"""Command‑line interface for the **makedir** package.

``makedir [directories] [options]`` creates every directory given and runs
the requested scaffolding actions in each of them.

Implementation details
----------------------
* Uses **Typer** for the application object, console styling and exit
  codes.  The flag grammar (``-755`` permissions, ``-do``/``-go`` short
  spellings, ``--`` separator) is not something Click can express, so the
  command receives the raw tokens through :class:`RawArgsCommand` and hands
  them to :func:`makedir.classifier.classify`.
* All filesystem work is delegated to
  :class:`makedir.processor.DirectoryProcessor`.
* Only usage errors change the exit code.  Per-directory failures are
  printed and the run still exits with ``0``.
"""

from __future__ import annotations

import logging

import click
import typer
from typer.core import TyperCommand

from makedir.classifier import classify
from makedir.config import load_settings, setup_logging
from makedir.exceptions import ConfigError, NoTargetsError, UsageError
from makedir.processor import DirectoryProcessor
from makedir.reporting import Reporter

log = logging.getLogger(__name__)

RAW_ARGS_KEY = "makedir.raw_args"

OPTIONS_HELP = [("--git,     -g", "Initialize a Git repository."),
        ("--readme,  -r", "Generate a template README.md file."),
        ("--license, -l", "Generate a template MIT License file."),
        ("--docker,  -do", "Generate a template Dockerfile."), ("--go,      -go", "Initialize a Go module."),
        ("--cargo,   -c", "Initialize a Rust Cargo project."),
        ("--npm,     -n", "Initialize an npm project (package.json)."), ("--bun,     -b", "Initialize a Bun project."),
        ("--yarn,    -y", "Initialize a Yarn project."), ("--pnpm,    -p", "Initialize a pnpm project."),
        ("--deno,    -d", "Initialize a Deno project (deno.json)."),
        ("--verbose, -v", "Show detailed output for every step."), ("--help,    -h", "Show this message and exit."),
        ("-###", "Set directory permissions (octal, e.g. -700, -755)."),
        ("--", "Treat every following argument as a directory."), ]


def _heading(text: str) -> str:
    return typer.style(text, fg = typer.colors.YELLOW, bold = True)


def usage_text() -> str:
    lines = [f"{_heading('Usage:')} makedir [directories] [options]", "",
             f"{_heading('Help:')}  Creates one or more directories with optional project initialization.",
             "       Multiple directories can be specified, and options apply to all of them.", "",
             _heading("Options:"), ]
    for flags, text in OPTIONS_HELP:
        lines.append(f"    {typer.style(flags.ljust(18), fg = typer.colors.GREEN)}{text}")
    return "\n".join(lines)


class RawArgsCommand(TyperCommand):
    """Keep the command line untouched, ``--`` included, in ``ctx.meta``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, [])


app = typer.Typer(name = "makedir", help = "Create directories with optional project scaffolding.",
                  add_completion = False, )


@app.command(cls = RawArgsCommand, add_help_option = False)
def makedir(ctx: typer.Context) -> None:
    """Create directories and bootstrap each with the requested scaffolding."""
    tokens: list[str] = ctx.meta.get(RAW_ARGS_KEY, [])
    reporter = Reporter()

    try:
        plan = classify(tokens)
    except NoTargetsError as exc:
        reporter.error(str(exc))
        raise typer.Exit(code = 1) from exc
    except UsageError as exc:
        typer.echo(usage_text(), err = True)
        raise typer.Exit(code = 1) from exc

    if plan.show_help:
        typer.echo(usage_text())
        raise typer.Exit()

    try:
        settings = load_settings()
    except ConfigError as exc:
        reporter.error(str(exc))
        raise typer.Exit(code = 1) from exc
    setup_logging(settings.log_level)

    for warning in plan.warnings:
        reporter.error("Invalid permission format:", warning.token)

    processor = DirectoryProcessor(reporter = reporter, commands = settings.commands)
    outcomes = processor.process(plan)
    failed = [o.path for o in outcomes if not o.ok]
    log.debug("Processed %d target(s), %d with errors: %s", len(outcomes), len(failed), failed)


def main() -> None:  # pragma: no cover – thin wrapper
    """Entry point used by the ``makedir`` console script and ``python -m makedir``."""
    app()


if __name__ == "__main__":
    main()
