"""CLI entry point for speedtest-logger."""

from __future__ import annotations

import sys
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from speedtest_logger import (
    DEFAULT_CREDS_FILE,
    DEFAULT_CSV_FILE,
    DEFAULT_HEADER,
    DEFAULT_SPREADSHEET_ID,
    __version__,
)
from speedtest_logger import gsheet
from speedtest_logger.io import append_csv_row, load_report
from speedtest_logger.pipeline import build_row
from speedtest_logger.utils import previous_month_label

app = typer.Typer(
    name="speedtest-logger",
    help=(
        "Save the results of a speedtest report locally (to CSV) "
        "& remotely (to a Google Spreadsheet)."
    ),
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _noop(*_args: object, **_kwargs: object) -> None:
    return None


def _printer(quiet: bool) -> Callable[..., None]:
    return _noop if quiet else console.print


def _spinner(quiet: bool, message: str) -> AbstractContextManager[object]:
    return nullcontext() if quiet else console.status(message)


def _err(msg: str) -> None:
    err_console.print(f"[red]x[/red] {msg}")


def _ok(msg: str) -> str:
    return f"  [green]✓[/green] {msg}"


def _info(msg: str) -> str:
    return f"  [cyan]i[/cyan] {msg}"


# ── Callbacks ────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"speedtest-logger v{__version__}")
        raise typer.Exit()


# ── save command ─────────────────────────────────────────────────


@app.command()
def save(
    input_file: Path | None = typer.Argument(
        None,
        help="JSON file with the speedtest result; used when nothing is piped to stdin.",
    ),
    spreadsheet_id: str = typer.Argument(
        DEFAULT_SPREADSHEET_ID,
        help="Google spreadsheet ID.",
    ),
    worksheet_name: str | None = typer.Argument(
        None,
        help="Worksheet name to save the row to. [default: previous month, YYYY-MM]",
        show_default=False,
    ),
    save_to_google: bool = typer.Option(
        False, "--save-to-google/--no-save-to-google", "-g/-G",
        help="Whether to write results to a Google Spreadsheet.",
    ),
    google_creds_file: Path = typer.Option(
        Path(DEFAULT_CREDS_FILE), "--google-creds-file", "-k",
        help="JSON file containing your Google service-account credentials.",
    ),
    save_to_local_csv: bool = typer.Option(
        True, "--save-to-local-csv/--no-save-to-local-csv", "-c/-C",
        help="Whether to write results to the CSV file.",
    ),
    csv_file: Path = typer.Option(
        Path(DEFAULT_CSV_FILE), "--csv-file", "-f",
        help="Local CSV file to append the row to.",
    ),
    header: list[str] | None = typer.Option(
        None, "--header", "-h",
        help="Field name for the header row; repeat for each column. [default: all 23 columns]",
        show_default=False,
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Suppress progress output; errors are still reported.",
    ),
    version: bool | None = typer.Option(
        None, "--version", "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Append one speedtest result to a CSV file and/or a Google worksheet."""
    echo = _printer(quiet)
    columns = list(header) if header else list(DEFAULT_HEADER)
    worksheet_name = worksheet_name or previous_month_label()
    # User-supplied names are printed as literal text, never as markup.
    csv_label = escape(str(csv_file))
    creds_label = escape(str(google_creds_file))
    sheet_id_label = escape(spreadsheet_id)
    worksheet_label = escape(worksheet_name)

    try:
        # ── Load + map ───────────────────────────────────────────
        echo("[blue]>[/blue] Parsing result into row …")
        data, source = load_report(input_file, sys.stdin)
        if source != "stdin":
            echo(_info(f"No JSON in stdin; read filename '{escape(source)}'."))
        row = build_row(data)
        echo(_ok("Parsed result into row."))

        # ── CSV ──────────────────────────────────────────────────
        if save_to_local_csv:
            echo(f"[blue]>[/blue] Saving to CSV (file: {csv_label}) …")
            append_csv_row(csv_file, row, columns)
            echo(_ok(f"Saved to CSV (file: {csv_label})."))

        # ── Google Sheets ────────────────────────────────────────
        if save_to_google:
            echo(f"[blue]>[/blue] Loading Google credentials (file: {creds_label}) …")
            credentials = gsheet.load_credentials(google_creds_file)
            echo(_ok("Loaded Google credentials."))

            with _spinner(quiet, f"Loading Google Spreadsheet (ID: {sheet_id_label}) …"):
                spreadsheet = gsheet.open_spreadsheet(credentials, spreadsheet_id)
            echo(_ok(f"Loaded Google Spreadsheet (ID: {sheet_id_label})."))

            with _spinner(quiet, f"Finding Worksheet (name: {worksheet_label}) …"):
                worksheet, created = gsheet.find_or_create_worksheet(
                    spreadsheet, worksheet_name, columns
                )
            if created:
                echo(_info(f"No Worksheet found; created '{worksheet_label}' with header row."))
            else:
                echo(_ok(f"Found Worksheet (name: {worksheet_label})."))

            with _spinner(quiet, "Adding result row to Google Spreadsheet …"):
                gsheet.append_row(worksheet, row, columns)
            echo(_ok(f"Added result row to Google Spreadsheet (ID: {sheet_id_label})."))
    except Exception as exc:
        _err(f"Failed: {escape(str(exc))}")
        err_console.print_exception()
        raise typer.Exit(code=1)
