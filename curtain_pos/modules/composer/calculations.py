"""
Pure helpers for order/bill money math. Used by the composer (live totals)
and by the dashboard (profit per bill).

Do not import repos or Qt here. Only compute numbers; formatting belongs
in the UI. Floats are used throughout and the operation order is fixed so
totals match what the backend receives to the last bit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ...constants import DISCOUNT_MAX, DISCOUNT_MIN

__all__ = [
    "Totals",
    "clamp_discount",
    "compute_totals",
    "allocate_discount",
    "status_from_paid",
]


@dataclass(frozen=True)
class Totals:
    sub_total: float
    discount_percent: int      # effective (clamped) percentage
    discount_amount: float
    grand_total: float
    balance: float


def clamp_discount(raw: int) -> int:
    """Effective discount percentage: raw value clamped into [0, 100]."""
    return min(max(raw, DISCOUNT_MIN), DISCOUNT_MAX)


def compute_totals(category_totals: Iterable[float], discount: int, payment: float) -> Totals:
    """
    category_totals: per-category Σ line_total, in category order.

      sub_total       = Σ category_totals
      discount_amount = sub_total * clamp(discount) / 100
      grand_total     = sub_total - discount_amount
      balance         = grand_total - payment   (not clamped; < 0 means overpaid)
    """
    sub_total = 0
    for t in category_totals:
        sub_total = sub_total + t
    effective = clamp_discount(discount)
    discount_amount = (sub_total * effective) / 100
    grand_total = sub_total - discount_amount
    balance = grand_total - payment
    return Totals(
        sub_total=sub_total,
        discount_percent=effective,
        discount_amount=discount_amount,
        grand_total=grand_total,
        balance=balance,
    )


def allocate_discount(item_totals: list[float], discount_amount: float) -> list[float]:
    """
    Split a bill-level discount across items in proportion to their totals.
    Every share is 0 when the item totals sum to 0.
    """
    sub_total = sum(item_totals)
    if sub_total <= 0:
        return [0.0 for _ in item_totals]
    return [discount_amount * (t / sub_total) for t in item_totals]


def status_from_paid(total: float, paid: float) -> str:
    """
    Payment badge for an order:
      - 'paid'    if paid >= total
      - 'partial' if 0 < paid < total
      - 'pending' if paid == 0
    """
    if paid >= total:
        return "paid"
    if paid > 0:
        return "partial"
    return "pending"
