from datetime import date, datetime
import logging
from typing import Union, Optional

from ..constants import CURRENCY

NumberLike = Union[float, int, str]

_log = logging.getLogger(__name__)


def today_str() -> str:
    """Return today's date as ISO string (YYYY-MM-DD)."""
    return date.today().isoformat()


def fmt_money(
    v: NumberLike,
    places: int = 2,
    *,
    strict: bool = False,
    sentinel: Optional[str] = None,
) -> str:
    """
    Format a number as money with thousands separators and a fixed number of decimals.

    Behavior on parse failure:
      - By default (strict=False, sentinel=None), returns str(v).
      - If `sentinel` is provided (e.g., "N/A"), returns that sentinel instead.
      - If `strict=True`, raises ValueError on parse failures.
    """
    try:
        x = float(v)
    except (TypeError, ValueError) as e:
        _log.debug("fmt_money: failed to parse %r as float: %s", v, e)
        if strict:
            raise ValueError(f"Could not parse {v!r} as a number.") from e
        return str(sentinel) if sentinel is not None else str(v)
    return f"{x:,.{places}f}"


def fmt_lkr(v: NumberLike) -> str:
    """fmt_money with the currency label, e.g. 'LKR 4,050.00'."""
    return f"{CURRENCY} {fmt_money(v)}"


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse a backend ISO timestamp (``2024-05-01T10:00:00.000Z``) to a naive
    local datetime. Returns None when missing or unparsable.
    """
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        _log.debug("parse_timestamp: unparsable %r", value)
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def is_same_day(value, day: date) -> bool:
    dt = parse_timestamp(value)
    return dt is not None and dt.date() == day
