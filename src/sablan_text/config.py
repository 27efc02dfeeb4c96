from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "text-scan.json"

DEFAULT_TARGET_DIRS = ("frontend/src", "backend/src", "backend/prisma")
DEFAULT_ALLOWED_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".prisma")
DEFAULT_SKIP_DIRS = ("node_modules", ".next", "dist", ".git")
DEFAULT_REPORTS_DIR = "reports"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    target_dirs: tuple[str, ...]
    allowed_extensions: frozenset[str]
    skip_dirs: frozenset[str]
    reports_dir: str
    log_level: str


def _str_list(raw: object, default: tuple[str, ...]) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return default
    items = tuple(str(x).strip() for x in raw if isinstance(x, str) and x.strip())
    return items or default


def _extension(ext: str) -> str:
    e = ext.strip().lower()
    return e if e.startswith(".") else "." + e


def normalize_log_level(value: str | None) -> str:
    level = (value or "").strip().upper()
    return level if level in _LOG_LEVELS else DEFAULT_LOG_LEVEL


def read_config_file(path: Path) -> dict:
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: top level must be an object")
        return {}
    return data


def load_settings(root: Path, *, log_level: str | None = None) -> Settings:
    raw = read_config_file(root / CONFIG_FILENAME)

    target_dirs = _str_list(raw.get("target_dirs"), DEFAULT_TARGET_DIRS)
    allowed_extensions = frozenset(
        _extension(e)
        for e in _str_list(raw.get("allowed_extensions"), DEFAULT_ALLOWED_EXTENSIONS)
    )
    skip_dirs = frozenset(_str_list(raw.get("skip_dirs"), DEFAULT_SKIP_DIRS))
    reports_dir = raw.get("reports_dir")
    if not isinstance(reports_dir, str) or not reports_dir.strip():
        reports_dir = DEFAULT_REPORTS_DIR

    if log_level is None:
        log_level = os.environ.get("SABLAN_TEXT_LOG_LEVEL")

    return Settings(
        target_dirs=target_dirs,
        allowed_extensions=allowed_extensions,
        skip_dirs=skip_dirs,
        reports_dir=reports_dir.strip(),
        log_level=normalize_log_level(log_level),
    )
