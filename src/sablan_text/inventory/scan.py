from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from sablan_text.config import Settings

logger = logging.getLogger(__name__)

TOKEN_MAX_LEN = 180

_MOJIBAKE_RE = re.compile(r"[ØÙÛÃ]")
_QUESTION_RE = re.compile(r"\?{2,}|؟{2,}")
_LINE_SPLIT_RE = re.compile(r"\r?\n")

_CONFIDENCE = {
    "mojibake": 0.95,
    "replacement-char": 0.9,
}


@dataclass(frozen=True)
class CorruptionRecord:
    file: str
    line: int
    token: str
    klass: str
    confidence: float

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "line": self.line,
            "token": self.token,
            "class": self.klass,
            "confidence": self.confidence,
        }


def classify_line(text: str) -> str:
    if "\ufffd" in text:
        return "replacement-char"
    if _MOJIBAKE_RE.search(text):
        return "mojibake"
    if _QUESTION_RE.search(text):
        return "question-marks"
    return ""


def confidence_for(klass: str) -> float:
    return _CONFIDENCE.get(klass, 0.65)


def scan_file(path: Path, *, root: Path) -> list[CorruptionRecord]:
    # Undecodable bytes become U+FFFD and are reported as replacement-char.
    content = path.read_text(encoding="utf-8", errors="replace")
    rel = path.relative_to(root).as_posix()
    out: list[CorruptionRecord] = []
    for idx, line in enumerate(_LINE_SPLIT_RE.split(content)):
        klass = classify_line(line)
        if not klass:
            continue
        out.append(
            CorruptionRecord(
                file=rel,
                line=idx + 1,
                token=line.strip()[:TOKEN_MAX_LEN],
                klass=klass,
                confidence=confidence_for(klass),
            )
        )
    return out


def iter_source_files(directory: Path, settings: Settings):
    try:
        items = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f"Could not list {directory}: {e}")
        return
    for item in items:
        if item.name.startswith(".") and item.name != ".prisma":
            continue
        if item.is_dir():
            # Linked dirs are not entered: loops, and duplicate paths.
            if item.is_symlink() or item.name in settings.skip_dirs:
                continue
            yield from iter_source_files(item, settings)
            continue
        if item.suffix not in settings.allowed_extensions:
            continue
        yield item


def scan_tree(root: Path, settings: Settings) -> list[CorruptionRecord]:
    """Collect corruption signatures from the configured source dirs under ``root``."""

    records: list[CorruptionRecord] = []
    for rel_dir in settings.target_dirs:
        full = root / rel_dir
        if not full.is_dir():
            logger.debug(f"Skipping missing target dir: {full}")
            continue
        for path in iter_source_files(full, settings):
            try:
                found = scan_file(path, root=root)
            except OSError as e:
                logger.warning(f"Could not read {path}: {e}")
                continue
            if found:
                logger.debug(f"{path}: {len(found)} signature(s)")
            records.extend(found)
    logger.info(f"Scanned {root}: {len(records)} corruption signature(s)")
    return records
