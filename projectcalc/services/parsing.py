"""Tolerant parsing of form input.

Invalid text never raises: it reads as 0, the same as a typed zero.
"""

from __future__ import annotations

import math
import re
from typing import Union

_NOT_AMOUNT_CHARS = re.compile(r"[^0-9,-]")


def _finite_or_zero(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value) or value == 0:
        return 0.0
    return value


def parse_amount(raw: str | None) -> float:
    """Parse decimal-comma text such as ``"50,50"`` or ``"R$ -10,00"``.

    Everything except digits, commas and minus signs is dropped (so a
    thousands dot disappears) and the first comma becomes the decimal point.
    """
    if not raw:
        return 0.0
    cleaned = _NOT_AMOUNT_CHARS.sub("", str(raw)).replace(",", ".", 1)
    if not cleaned:
        return 0.0
    return _finite_or_zero(cleaned)


def parse_hours(raw: Union[str, float, int, None]) -> float:
    """Hours are plain numbers (period decimal); bad or negative input is 0."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
        if not math.isfinite(value):
            return 0.0
    else:
        text = raw.strip()
        if not text:
            return 0.0
        value = _finite_or_zero(text)
    return value if value > 0 else 0.0
