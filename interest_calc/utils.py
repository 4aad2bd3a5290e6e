"""Utility functions for the interest calculator.

This module turns raw form text into numbers. Form fields are coerced
leniently, the way a numeric keypad field behaves while the user is typing:
surrounding whitespace is ignored, the longest numeric prefix is used and
text without any numeric prefix simply means "no value".
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_number(value: Any) -> Optional[float]:
    """Coerce form input into a ``float``.

    Parameters
    ----------
    value: Any
        Raw text from a form field, or a number already decoded from JSON.

    Returns
    -------
    Optional[float]
        The parsed value, or ``None`` when the input is empty, not a number or
        NaN. ``"12.5%"`` parses as ``12.5``; ``"abc"`` and ``""`` give ``None``.
    """
    if value is None:
        return None
    if _is_number(value):
        number = float(value)
        return None if math.isnan(number) else number
    if not isinstance(value, str):
        return None
    match = _FLOAT_PREFIX.match(value.strip())
    if not match:
        return None
    return float(match.group(0))


def parse_int(value: Any) -> Optional[int]:
    """Coerce form input into an ``int``.

    Only the leading run of digits counts, so ``"12.7"`` is ``12`` and ``"7 months"``
    is ``7``. Numbers are truncated toward zero. Anything else is ``None``.
    """
    if value is None:
        return None
    if _is_number(value):
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return None
        return int(value)
    if not isinstance(value, str):
        return None
    match = _INT_PREFIX.match(value.strip())
    if not match:
        return None
    return int(match.group(0))


def format_plain_number(value: Optional[float]) -> str:
    """Render a parsed value back into form text (``""`` when absent).

    Whole numbers lose their trailing ``.0`` so ``1000.0`` shows as ``1000``.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
