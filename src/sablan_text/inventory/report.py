from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from sablan_text.inventory.scan import CorruptionRecord
from sablan_text.util.atomic_io import atomic_write_text

INVENTORY_JSON = "text-corruption-inventory.json"
INVENTORY_CSV = "text-corruption-inventory.csv"

CSV_HEADER = "file,line,class,confidence,token"


def _csv_row(r: CorruptionRecord) -> str:
    token = '"' + r.token.replace('"', '""') + '"'
    return f"{r.file},{r.line},{r.klass},{r.confidence},{token}"


def render_json(records: Iterable[CorruptionRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2)


def render_csv(records: Iterable[CorruptionRecord]) -> str:
    body = "\n".join(_csv_row(r) for r in records)
    return CSV_HEADER + "\n" + body + "\n"


def write_inventory(
    records: list[CorruptionRecord], out_dir: Path
) -> tuple[Path, Path]:
    json_path = out_dir / INVENTORY_JSON
    csv_path = out_dir / INVENTORY_CSV
    atomic_write_text(json_path, render_json(records))
    atomic_write_text(csv_path, render_csv(records))
    return json_path, csv_path


def count_by_class(records: Iterable[CorruptionRecord]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for r in records:
        counts[r.klass] = counts.get(r.klass, 0) + 1
    return counts
