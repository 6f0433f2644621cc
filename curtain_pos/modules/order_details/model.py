from __future__ import annotations

from datetime import datetime
from typing import Iterable

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex

from ...utils.helpers import fmt_money, parse_timestamp

_EPOCH = datetime(1970, 1, 1)


def customer_of(order: dict) -> dict:
    c = order.get("customer")
    return c if isinstance(c, dict) else {}


def created_at(order: dict) -> datetime:
    return parse_timestamp(order.get("createdAt")) or _EPOCH


def sort_newest_first(orders: Iterable[dict]) -> list[dict]:
    """Newest createdAt first; orders without a timestamp sort as the epoch."""
    return sorted(orders, key=created_at, reverse=True)


def filter_orders(
    orders: Iterable[dict],
    *,
    customer_name: str = "",
    order_status: str = "",
    payment_status: str = "",
) -> list[dict]:
    """
    Customer name is a case-insensitive substring match; statuses match
    exactly. Empty filters match everything. Result is newest first.
    """
    needle = (customer_name or "").strip().lower()
    out = []
    for o in orders:
        if needle and needle not in str(customer_of(o).get("name") or "").lower():
            continue
        if order_status and o.get("orderStatus") != order_status:
            continue
        if payment_status and o.get("paymentStatus") != payment_status:
            continue
        out.append(o)
    return sort_newest_first(out)


def fmt_date(value) -> str:
    dt = parse_timestamp(value)
    return dt.date().isoformat() if dt else "-"


class OrdersTableModel(QAbstractTableModel):
    HEADERS = ["Date", "Customer", "Address", "Mobile 1", "Mobile 2",
               "Order Status", "Payment", "Fixing Date", "Amount", "Balance"]

    def __init__(self, rows: list | None = None):
        super().__init__()
        self._rows = rows or []

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        r = self._rows[index.row()]
        c = index.column()
        if role == Qt.DisplayRole:
            cust = customer_of(r)
            mapping = [
                fmt_date(r.get("createdAt")),
                cust.get("name") or "-",
                cust.get("address") or "-",
                cust.get("mobile1") or "-",
                cust.get("mobile2") or "-",
                r.get("orderStatus") or "",
                r.get("paymentStatus") or "",
                fmt_date(r.get("fixingDate")),
                fmt_money(r.get("orderAmount") or 0),
                fmt_money(r.get("balance") or 0),
            ]
            return mapping[c] if c < len(mapping) else None
        if role == Qt.TextAlignmentRole and c >= 8:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section] if section < len(self.HEADERS) else None
        return super().headerData(section, orientation, role)

    def at(self, row: int) -> dict:
        return self._rows[row]

    def replace(self, rows: list):
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()
