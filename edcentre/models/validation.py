"""Pure normalizers applied to every record field assignment.

Text normalizers never fail. The ``parse_*`` helpers are for untrusted input
(console, CSV cells) and return ``None`` when the text is not a number, so
callers can keep the previous value. Digit separators such as ``1_000`` are
not numbers here.
"""

from __future__ import annotations

import math

UNKNOWN_NAME = "Unknown"


def normalize_name(value: str | None) -> str:
    if value is None or not value.strip():
        return UNKNOWN_NAME
    return value.strip()


def trimmed(value: str | None) -> str:
    return "" if value is None else value.strip()


def verbatim(value: str | None) -> str:
    return "" if value is None else str(value)


def non_negative(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def as_float(value: float) -> float:
    return float(value)


def as_int(value: int) -> int:
    return int(value)


def parse_float(text: str | None) -> float | None:
    if text is None or "_" in text:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_int(text: str | None) -> int | None:
    if text is None or "_" in text:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None
