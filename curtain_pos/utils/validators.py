import math
import re

_INT_RE = re.compile(r"^[+-]?\d+$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty after stripping whitespace.
    """
    return bool(text and str(text).strip())


# ---- Numeric parsing & validators ----

def try_parse_int(x):
    """
    Best-effort parse to int. Only whole-number text (optional sign,
    surrounding whitespace) or an actual int is accepted; "3.5", "", "abc"
    and bools fail.

    Returns:
        (ok: bool, value: int|None)
    """
    if isinstance(x, bool):
        return False, None
    if isinstance(x, int):
        return True, x
    if isinstance(x, float):
        if math.isfinite(x) and x.is_integer():
            return True, int(x)
        return False, None
    text = str(x if x is not None else "").strip()
    if not _INT_RE.match(text):
        return False, None
    return True, int(text)


def try_parse_float(x):
    """
    Best-effort parse to a finite float.

    Returns:
        (ok: bool, value: float|None)

    ok == False means parsing failed (or the value was nan/inf) and value is None.
    """
    if isinstance(x, bool):
        return False, None
    try:
        val = float(x)
    except (TypeError, ValueError):
        return False, None
    if not math.isfinite(val):
        return False, None
    return True, val


def parse_leading_int_or_zero(x) -> int:
    """
    Integer prefix of the text: "12.5" -> 12, "7%" -> 7. Floats truncate.
    Anything without a leading integer becomes 0.
    """
    if isinstance(x, bool) or x is None:
        return 0
    if isinstance(x, int):
        return x
    if isinstance(x, float):
        return int(x) if math.isfinite(x) else 0
    m = _LEADING_INT_RE.match(str(x))
    return int(m.group(1)) if m else 0


def parse_amount_or_zero(x) -> float:
    """Money entry: unparsable or negative input becomes 0.0."""
    ok, val = try_parse_float(x)
    if not ok or val < 0:
        return 0.0
    return val


def is_strictly_positive_number(x) -> bool:
    """
    True iff x parses to a finite float and value > 0.
    """
    ok, val = try_parse_float(x)
    return bool(ok and val is not None and val > 0)
