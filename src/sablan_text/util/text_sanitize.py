from __future__ import annotations

import json
import math
import re
from typing import Iterable

FALLBACK_TEXT = "نامشخص"

# UTF-8 Persian/Arabic read back as Latin-1 starts most letters with these.
_MOJIBAKE_RE = re.compile(r"[ØÙÛ]")
_QUESTION_ONLY_RE = re.compile(r"[\s\ufeff?؟]+")
# Spreadsheet imports often carry a BOM; it counts as whitespace here.
_EDGE_SPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

# Below the int -> str digit limit of Python 3.11+.
_INT_CHUNK_DIGITS = 1000
_INT_CHUNK = 10**_INT_CHUNK_DIGITS


def trim_text(text: str) -> str:
    return _EDGE_SPACE_RE.sub("", text)


def _int_text(v: int) -> str:
    try:
        return str(v)
    except ValueError:
        pass
    sign = "-" if v < 0 else ""
    v = abs(v)
    chunks: list[int] = []
    while v:
        v, r = divmod(v, _INT_CHUNK)
        chunks.append(r)
    rest = "".join(f"{c:0{_INT_CHUNK_DIGITS}d}" for c in reversed(chunks[:-1]))
    return sign + str(chunks[-1]) + rest


def _number_text(v: float) -> str:
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v.is_integer():
        return _int_text(int(v))
    return repr(v)


def to_display_text(value: object) -> str:
    """Render any candidate value as the string a UI would show for it.

    Never raises: values whose conversion fails (circular containers, a
    broken ``__str__``) become ``""`` and are therefore treated as
    corrupted by the checks below.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            return _number_text(value)
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        if isinstance(value, (dict, list, tuple)):
            return json.dumps(
                value, ensure_ascii=False, separators=(",", ":"), default=str
            )
        if isinstance(value, int):
            return _int_text(value)
        return str(value)
    except Exception:
        return ""


def is_corrupted_ui_text(value: object) -> bool:
    if value is None:
        return True
    text = trim_text(to_display_text(value))
    if not text:
        return True
    if _MOJIBAKE_RE.search(text):
        return True
    if _QUESTION_ONLY_RE.fullmatch(text):
        return True
    if "??" in text:
        return True
    return False


def sanitize_ui_text(value: object, fallback: str = FALLBACK_TEXT) -> str:
    if is_corrupted_ui_text(value):
        return fallback
    return trim_text(to_display_text(value))


def sanitize_ui_text_with_candidates(
    candidates: Iterable[object], fallback: str = FALLBACK_TEXT
) -> str:
    """Return the first usable candidate, in order, or ``fallback``.

    Typical use passes a Persian field first and generic fields after it,
    e.g. ``[row.title_persian, row.title, row.contract_number]``.
    """

    for candidate in candidates:
        if not is_corrupted_ui_text(candidate):
            return trim_text(to_display_text(candidate))
    return fallback
