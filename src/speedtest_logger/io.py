"""I/O helpers — load report JSON, append rows to a local CSV file."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import IO, Any

import pandas as pd

# ── Loading ──────────────────────────────────────────────────────


def read_stdin_json(stream: IO[str] | None) -> Any | None:
    """Parse JSON piped into *stream*.

    Returns ``None`` when nothing usable was piped in: no stream, an
    interactive terminal, empty input or invalid JSON. A piped JSON ``null``
    is indistinguishable from no input and also yields ``None``, so the
    caller falls back to the input file.
    """
    if stream is None:
        return None
    try:
        if stream.isatty():
            return None
        text = stream.read()
    except (OSError, ValueError):
        return None
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def load_report_json(path: Path) -> Any:
    """Read *path* as UTF-8 and parse it as JSON.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If *path* is not a file, or its content is not valid JSON.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    if not path.is_file():
        raise ValueError(f"Input path is not a file: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Could not parse JSON in {path}: {exc.msg}") from exc


def load_report(input_file: Path | None, stream: IO[str] | None) -> tuple[Any, str]:
    """Load a report from *stream*, falling back to *input_file*.

    Returns the parsed document and a label for where it came from.
    """
    data = read_stdin_json(stream)
    if data is not None:
        return data, "stdin"
    if input_file is None:
        raise ValueError("No JSON in stdin and no input file given")
    return load_report_json(input_file), str(input_file)


# ── Writing ──────────────────────────────────────────────────────


def _csv_value(value: Any) -> Any:
    # 100.0 is written as 100.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _to_csv(frame: pd.DataFrame, path: Path, *, mode: str, header: bool) -> None:
    frame.to_csv(
        path,
        mode=mode,
        header=header,
        index=False,
        encoding="utf-8",
        lineterminator="\n",
    )


def append_csv_row(path: Path, row: Mapping[str, Any], header: Sequence[str]) -> Path:
    """Append *row* to the CSV at *path*, writing *header* first if needed.

    A regular file at *path* is assumed to already carry the header. Anything
    else gets the header written over it, so a directory at *path* fails here
    with an ``OSError``.
    """
    path = Path(path)
    columns = list(header)
    try:
        has_header = path.is_file()
    except OSError:
        has_header = False

    if not has_header:
        _to_csv(pd.DataFrame(columns=columns), path, mode="w", header=True)

    values = {column: _csv_value(value) for column, value in row.items()}
    frame = pd.DataFrame([values], columns=columns)
    _to_csv(frame, path, mode="a", header=False)
    return path
