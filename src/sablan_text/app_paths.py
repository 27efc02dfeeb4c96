from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    base_dir: Path

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"


def get_app_paths() -> AppPaths:
    home = os.environ.get("SABLAN_TEXT_HOME")
    if home:
        base = Path(home)
    else:
        base = Path.home() / ".sablan-text"
    (base / "logs").mkdir(parents=True, exist_ok=True)
    return AppPaths(base_dir=base)
