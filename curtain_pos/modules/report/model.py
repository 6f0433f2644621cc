"""
One day's report as the backend returns it (bills, order items, orders,
expenses), turned into bill rows with their items and profit plus the
day's totals. Profit uses the same allocation as the dashboard.
"""
from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex

from ...utils.helpers import fmt_money, parse_timestamp
from ...utils.validators import try_parse_float
from ..dashboard.metrics import bill_profit, items_for_bill


def _num(value) -> float:
    ok, val = try_parse_float(value)
    return val if ok else 0.0


def is_order_bill(bill: dict) -> bool:
    """Bills raised against an order carry orderId (or a populated order)."""
    return bool(bill.get("orderId") or bill.get("order"))


@dataclass
class ReportBill:
    bill: dict
    items: list[dict]
    profit: float

    @property
    def bill_id(self) -> str:
        return str(self.bill.get("_id") or "")

    @property
    def kind(self) -> str:
        return "Order" if is_order_bill(self.bill) else "Quick Sell"


def report_bills(report: dict) -> list[ReportBill]:
    items = report.get("orderItems") or []
    return [
        ReportBill(bill=b, items=items_for_bill(b, items), profit=bill_profit(b, items))
        for b in (report.get("bills") or [])
    ]


@dataclass
class ReportSummary:
    bill_count: int = 0
    order_count: int = 0
    sell: float = 0.0
    profit: float = 0.0
    expenses: float = 0.0

    @property
    def net_profit(self) -> float:
        return self.profit - self.expenses

    @classmethod
    def compute(cls, report: dict, bills: list[ReportBill]) -> "ReportSummary":
        return cls(
            bill_count=len(bills),
            order_count=len(report.get("orders") or []),
            sell=sum((_num(b.bill.get("paidAmount")) for b in bills), 0.0),
            profit=sum((b.profit for b in bills), 0.0),
            expenses=sum((_num(e.get("amount")) for e in (report.get("expenses") or [])), 0.0),
        )


def fmt_time(value) -> str:
    dt = parse_timestamp(value)
    return dt.strftime("%H:%M") if dt else "-"


def fmt_datetime(value) -> str:
    dt = parse_timestamp(value)
    return dt.strftime("%Y-%m-%d %H:%M") if dt else "-"


class ReportBillsModel(QAbstractTableModel):
    HEADERS = ["Bill No", "Type", "Time", "Bill Total", "Paid", "Discount", "Profit"]

    def __init__(self, rows: list[ReportBill] | None = None):
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
            b = r.bill
            mapping = [
                str(b.get("billNo") or "-"),
                r.kind,
                fmt_time(b.get("createdAt")),
                fmt_money(_num(b.get("billTotal"))),
                fmt_money(_num(b.get("paidAmount"))),
                str(b.get("discount") or 0),
                fmt_money(r.profit),
            ]
            return mapping[c] if c < len(mapping) else None
        if role == Qt.TextAlignmentRole and c >= 3:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section] if section < len(self.HEADERS) else None
        return super().headerData(section, orientation, role)

    def at(self, row: int) -> ReportBill:
        return self._rows[row]

    def replace(self, rows: list[ReportBill]):
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()
