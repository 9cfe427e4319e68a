"""Shared service-layer helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from civiltime.domain.entries import TimeEntry
from civiltime.infrastructure.entry_file import read_entry_records
from civiltime.services.result import ServiceResult, failure


def load_entries(path: Path, op: str) -> tuple[list[TimeEntry], ServiceResult | None]:
    """Read and validate entry records from *path*.

    Returns ``(entries, None)`` on success, or ``([], failed_result)``.
    Every invalid record is reported, not just the first.
    """
    try:
        records = read_entry_records(path)
    except FileNotFoundError:
        return [], failure(op, "FILE_NOT_FOUND", f"Entries file not found: {path}", path=str(path))
    except OSError as exc:
        msg = f"Cannot read entries file {path}: {exc.strerror or exc}"
        return [], failure(op, "INVALID_ENTRIES", msg, path=str(path))
    except ValueError as exc:
        return [], failure(op, "INVALID_ENTRIES", str(exc), path=str(path))

    entries: list[TimeEntry] = []
    errors: list[dict[str, Any]] = []
    for index, record in enumerate(records):
        try:
            entries.append(TimeEntry.model_validate(record))
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(p) for p in first["loc"]) or "entry"
            errors.append({"index": index, "field": field, "error": first["msg"]})

    if errors:
        return [], failure(
            op,
            "INVALID_ENTRIES",
            f"{len(errors)} invalid entr{'y' if len(errors) == 1 else 'ies'} in {path}",
            path=str(path),
            errors=errors,
        )
    return entries, None
