from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CheckResult:
    exit_code: int
    lines: list[str]
    count: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def check_inventory(path: Path) -> CheckResult:
    """Turn a saved inventory into a CI status: 0 clean, 1 dirty, 2 unusable."""

    if not path.is_file():
        return CheckResult(2, ["Missing inventory file. Run: sablan-text scan"])

    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return CheckResult(2, ["Inventory format is invalid."])

    if not isinstance(records, list):
        return CheckResult(2, ["Inventory format is invalid."])

    if not records:
        return CheckResult(0, ["No corruption signatures detected."])

    first = records[0] if isinstance(records[0], dict) else {}
    example = (
        f"Example: {first.get('file')}:{first.get('line')} "
        f"[{first.get('class')}] {first.get('token')}"
    )
    return CheckResult(
        1,
        [f"Detected {len(records)} corruption signatures.", example],
        count=len(records),
    )
