"""Entry record files exported from the entries API.

Three shapes are accepted:

- a JSON array of entry objects
- the list endpoint's response envelope, ``{"entries": [...]}``
- JSON lines, one entry object per line (``.jsonl``)

Records are returned as raw dicts; validation happens in the service
layer so every bad record can be reported with its index.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_entry_records(path: Path) -> list[dict[str, Any]]:
    """Load raw entry records from *path*.

    Raises ``FileNotFoundError`` for a missing file, other ``OSError``s for
    unreadable ones, and ``ValueError`` for content that is not one of the
    accepted shapes.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix == ".jsonl":
        records = [_parse_json(line, path) for line in raw.splitlines() if line.strip()]
    else:
        data = _parse_json(raw, path) if raw.strip() else []
        records = data.get("entries") if isinstance(data, dict) else data

    if not isinstance(records, list):
        msg = f"{path}: expected a list of entries"
        raise ValueError(msg)
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            msg = f"{path}: entry {index} is not an object"
            raise ValueError(msg)
    return records


def _parse_json(text: str, path: Path) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})"
        raise ValueError(msg) from exc
