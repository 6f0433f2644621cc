"""
Figures for the dashboard, computed client-side from the raw backend
lists (orders, stock, bills, order items, today's expenses).

No Qt and no network here: the controller fetches, this module counts.

"Today" is the local calendar date of each record's createdAt.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ...api.repositories.stock_repo import StockItem
from ...constants import LOW_STOCK_THRESHOLD, ORDER_STATUS_PENDING
from ...utils.helpers import is_same_day
from ...utils.validators import try_parse_float
from ..composer.calculations import allocate_discount


def _num(value) -> float:
    ok, val = try_parse_float(value)
    return val if ok else 0.0


def bill_id_of(item: dict) -> Optional[str]:
    """billId on an order item is either the id string or a populated bill object."""
    ref = item.get("billId") if isinstance(item, dict) else None
    if isinstance(ref, str):
        return ref
    if isinstance(ref, dict):
        return ref.get("_id") or None
    return None


def item_total(item: dict) -> float:
    """`total` when the backend sent one, else rate * quantity."""
    if item.get("total") is not None:
        return _num(item.get("total"))
    return _num(_num(item.get("itemRate")) * _num(item.get("itemQuantity")))


def item_cost(item: dict) -> float:
    unit = item.get("costPrice")
    if unit is None:
        unit = item.get("cost")
    return _num(unit) * _num(item.get("itemQuantity"))


def items_for_bill(bill: dict, items: Iterable[dict]) -> list[dict]:
    bill_id = str(bill.get("_id") or "")
    out = []
    for it in items:
        bid = bill_id_of(it)
        if bid and str(bid) == bill_id:
            out.append(it)
    return out


def bill_profit(bill: dict, items: Iterable[dict]) -> float:
    """
    Profit of one bill after its discount.

    The bill discount is read as a percentage of the item subtotal and is
    spread over the items in proportion to their totals:

      profit = Σ (item_total - discount_amount * share - costPrice * qty)

    A bill with no matching items contributes 0.
    """
    bill_items = items_for_bill(bill, items)
    if not bill_items:
        return 0.0

    totals = [item_total(it) for it in bill_items]
    sub_total = sum(totals)
    discount_amount = (sub_total * _num(bill.get("discount"))) / 100
    shares = allocate_discount(totals, discount_amount)

    profit = 0.0
    for it, total, share in zip(bill_items, totals, shares):
        profit += total - share - item_cost(it)
    return profit


def created_on(rows: Iterable[dict], day: date) -> list[dict]:
    return [r for r in rows if isinstance(r, dict) and is_same_day(r.get("createdAt"), day)]


def daily_sell(bills: Iterable[dict], day: date) -> float:
    return sum((_num(b.get("paidAmount")) for b in created_on(bills, day)), 0.0)


def daily_profit(bills: Iterable[dict], items: list[dict], day: date) -> float:
    return sum((bill_profit(b, items) for b in created_on(bills, day)), 0.0)


def low_stock(stock: Iterable[StockItem], threshold: int = LOW_STOCK_THRESHOLD) -> list[StockItem]:
    return [s for s in stock if s.quantity < threshold]


@dataclass
class DashboardMetrics:
    daily_sell: float = 0.0
    daily_profit: float = 0.0
    daily_expenses: float = 0.0
    net_daily_profit: float = 0.0
    today_orders: int = 0
    pending_orders: int = 0
    total_sales: float = 0.0
    pending_balance: float = 0.0
    low_stock_items: list[StockItem] = field(default_factory=list)
    expenses: list[dict] = field(default_factory=list)

    @property
    def low_stock_count(self) -> int:
        return len(self.low_stock_items)

    @classmethod
    def compute(
        cls,
        *,
        orders: list[dict],
        stock: list[StockItem],
        bills: list[dict],
        order_items: list[dict],
        expenses: list[dict],
        expense_total: float,
        day: Optional[date] = None,
    ) -> "DashboardMetrics":
        day = day or date.today()
        orders = [o for o in orders if isinstance(o, dict)]
        profit = daily_profit(bills, order_items, day)
        return cls(
            daily_sell=daily_sell(bills, day),
            daily_profit=profit,
            daily_expenses=expense_total,
            net_daily_profit=profit - expense_total,
            today_orders=len(created_on(orders, day)),
            pending_orders=sum(1 for o in orders if o.get("orderStatus") == ORDER_STATUS_PENDING),
            total_sales=sum((_num(o.get("orderAmount")) for o in orders), 0.0),
            pending_balance=sum((_num(o.get("balance")) for o in orders), 0.0),
            low_stock_items=low_stock(stock),
            expenses=list(expenses),
        )
