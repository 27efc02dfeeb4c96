from __future__ import annotations

from sablan_text.util.text_sanitize import FALLBACK_TEXT, sanitize_ui_text

FALLBACK_PERSIAN_TEXT = {
    "unknown": FALLBACK_TEXT,
}

CONTRACT_STATUS_LABELS: dict[str, str] = {
    "DRAFT": "پیش نویس",
    "PENDING_APPROVAL": "در انتظار تایید",
    "APPROVED": "تایید شده",
    "SIGNED": "امضا شده",
    "PRINTED": "چاپ شده",
    "CANCELLED": "لغو شده",
    "EXPIRED": "منقضی شده",
}


def contract_status_label(status: object, fallback: str = FALLBACK_TEXT) -> str:
    """Persian label for a contract status code.

    Unknown codes are shown as-is when readable, else as ``fallback``.
    """

    key = sanitize_ui_text(status, fallback="").upper()
    label = CONTRACT_STATUS_LABELS.get(key)
    if label is not None:
        return label
    return sanitize_ui_text(status, fallback=fallback)
