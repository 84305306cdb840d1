"""Main Typer application.

Entry point: ``ftee`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ftee import __version__
from ftee.config import check_delimiter, check_log_level, config
from ftee.core.errors import FteeError
from ftee.core.runner import split_files
from ftee.models.summary import RunSummary

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="ftee",
    help="ftee: a many-to-many file splitter.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

_EXAMPLE = [
    "[bold]EXAMPLE[/bold]",
    "Consider a file containing:",
    "  This is ignored",
    "  FTEE /tmp/out1",
    "  This goes into out1 only.",
    "  FTEE /tmp/out2",
    "  This goes into out2 only.",
    "  FTEE /tmp/out1 /tmp/out3",
    "  This goes into out1 and out3.",
    "Processing with ftee produces 3 output files:",
    "/tmp/out1: This goes into out1 only. / This goes into out1 and out3.",
    "/tmp/out2: This goes into out2 only.",
    "/tmp/out3: This goes into out1 and out3.",
]

# Typer's rich epilog joins single newlines, so every line is its own paragraph.
_EPILOG = "\n\n".join(
    _EXAMPLE
    + [
        "[bold]ERRORS[/bold]",
        "Lines before the first delimiter line are ignored. Text before the "
        "delimiter on a directive line is ignored too, so [bold]// FTEE out.txt[/bold] "
        "and [bold]# FTEE out.txt[/bold] both work. The delimiter must be "
        "surrounded by whitespace: [bold]//FTEE out.txt[/bold] is an error.",
        "If any error occurs, ftee deletes every output file it created and "
        "exits with a non-zero status.",
    ]
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ftee {__version__}")
        raise typer.Exit()


def _checked(check: Callable[[str], str]) -> Callable[[str], str]:
    """Wrap a config validator as a Typer option callback."""
    def _callback(value: str) -> str:
        try:
            return check(value)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc

    return _callback


def _print_summary(summary: RunSummary) -> None:
    table = Table(title="ftee run")
    table.add_column("Destination", style="cyan")
    for name in summary.destinations:
        table.add_row(escape(name))
    console.print(table)
    console.print(
        f"[bold]Inputs:[/bold] {len(summary.inputs)}  "
        f"[bold]Lines read:[/bold] {summary.lines_read}  "
        f"[bold]Directives:[/bold] {summary.directives}  "
        f"[bold]Payload:[/bold] {summary.payload_lines}  "
        f"[bold]Discarded:[/bold] {summary.discarded_lines}"
    )


@app.command(epilog=_EPILOG)
def split_cmd(
    infiles: list[str] = typer.Argument(
        ...,
        metavar="INFILE...",
        help="Input files, processed in order.",
    ),
    delimiter: str = typer.Option(
        config.delimiter,
        "--delimiter",
        "-d",
        callback=_checked(check_delimiter),
        help="The delimiter tag marking directive lines.",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Print the destinations and line counts after a successful run.",
    ),
    log_level: str = typer.Option(
        config.log_level,
        "--log-level",
        callback=_checked(check_log_level),
        help="Logging level for diagnostics written to stderr.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Copy lines from INFILEs to the output files named by delimiter lines.

    A line ending with [bold]DELIMITER outfile1 outfile2 ...[/bold] opens
    the named output files and writes every following line to each of them
    until the next delimiter line. Output files are truncated the first time
    they are named and appended to afterwards.
    """
    _configure_logging(log_level)
    try:
        result = split_files(infiles, delimiter)
    except FteeError as exc:
        err_console.print(f"[bold red]ftee:[/bold red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)

    if summary:
        _print_summary(result)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
