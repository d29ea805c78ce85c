from __future__ import annotations

import re
from typing import Any

INT_MAX = 2**31 - 1

_reNumber = re.compile(r"[+-]?[0-9]+")


def safeStr(val: Any) -> str:
    try:
        return str(val)
    except Exception:
        return ""


def parseBoundedInt(val: Any, minVal: int, maxVal: int) -> int:
    """
    strtonum(3) semantics: an optional sign followed by decimal digits, checked
    against [minVal, maxVal]. Raises ValueError whose message is the reason:
    "invalid", "too small" or "too large".
    """
    s = safeStr(val)
    if not _reNumber.fullmatch(s):
        raise ValueError("invalid")

    num = int(s)
    if num < minVal:
        raise ValueError("too small")
    if num > maxVal:
        raise ValueError("too large")
    return num


def displayStr(val: Any) -> str:
    # undecodable bytes from the config file come back as \xNN
    s = safeStr(val)
    try:
        return s.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="backslashreplace")
    except UnicodeEncodeError:
        return s.encode("utf-8", errors="backslashreplace").decode("utf-8")
