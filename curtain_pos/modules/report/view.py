from __future__ import annotations

from PySide6.QtCore import Qt, QDate
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox, QLabel, QDateEdit,
    QPushButton, QSplitter, QTableWidget, QTableWidgetItem, QAbstractItemView,
)

from ...utils.helpers import fmt_lkr, fmt_money
from ...widgets.table_view import TableView
from .model import ReportSummary, fmt_datetime


def _table(headers: list[str]) -> QTableWidget:
    t = QTableWidget(0, len(headers))
    t.setHorizontalHeaderLabels(headers)
    t.setEditTriggers(QAbstractItemView.NoEditTriggers)
    t.verticalHeader().setVisible(False)
    t.horizontalHeader().setStretchLastSection(True)
    return t


def _fill(table: QTableWidget, rows: list[list[str]]):
    table.setRowCount(len(rows))
    for r, values in enumerate(rows):
        for c, v in enumerate(values):
            table.setItem(r, c, QTableWidgetItem(v))


class ReportView(QWidget):
    """
    Daily report for a chosen date:
      - Date picker + Get Report
      - Day totals (sell, profit, expenses, net)
      - Bills table; the selected bill's items below it
      - Expenses of the day
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)

        self.lab_title = QLabel("<h2>Daily Report</h2>")
        root.addWidget(self.lab_title)

        bar = QHBoxLayout()
        bar.addWidget(QLabel("Date:"))
        self.date_edit = QDateEdit()
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("yyyy-MM-dd")
        self.date_edit.setDate(QDate.currentDate())
        bar.addWidget(self.date_edit)
        self.btn_get = QPushButton("Get Report")
        bar.addWidget(self.btn_get)
        bar.addStretch(1)
        self.btn_cancel_bill = QPushButton("Cancel Bill")
        self.btn_cancel_bill.setStyleSheet("color: #CC0000;")
        bar.addWidget(self.btn_cancel_bill)
        root.addLayout(bar)

        self.lab_status = QLabel("")
        self.lab_status.setVisible(False)
        root.addWidget(self.lab_status)

        # ---- totals ---------------------------------------------------------
        totals = QGroupBox("Totals")
        g = QGridLayout(totals)
        self.lab_bills = QLabel("0")
        self.lab_sell = QLabel(fmt_lkr(0))
        self.lab_profit = QLabel(fmt_lkr(0))
        self.lab_expenses = QLabel(fmt_lkr(0))
        self.lab_net = QLabel(fmt_lkr(0))
        for i, (caption, lab) in enumerate((
            ("Bills:", self.lab_bills),
            ("Sell:", self.lab_sell),
            ("Profit:", self.lab_profit),
            ("Expenses:", self.lab_expenses),
            ("Net Profit:", self.lab_net),
        )):
            g.addWidget(QLabel(caption), 0, i * 2)
            g.addWidget(lab, 0, i * 2 + 1)
        root.addWidget(totals)

        # ---- bills / items / expenses ------------------------------------
        split = QSplitter(Qt.Vertical)

        bills_box = QGroupBox("Bills")
        self.tbl_bills = TableView()
        QVBoxLayout(bills_box).addWidget(self.tbl_bills)
        split.addWidget(bills_box)

        items_box = QGroupBox("Bill Items")
        self.tbl_items = _table(["Item Name", "Quantity", "Rate", "Cost Price", "Total", "Created At"])
        QVBoxLayout(items_box).addWidget(self.tbl_items)
        split.addWidget(items_box)

        expenses_box = QGroupBox("Expenses")
        self.tbl_expenses = _table(["Name", "Amount", "Date"])
        QVBoxLayout(expenses_box).addWidget(self.tbl_expenses)
        split.addWidget(expenses_box)

        root.addWidget(split, 1)

    def day(self) -> str:
        return self.date_edit.date().toString("yyyy-MM-dd")

    def set_day(self, day: str):
        self.date_edit.setDate(QDate.fromString(day, "yyyy-MM-dd"))

    def set_status(self, text: str, *, error: bool = False):
        self.lab_status.setText(text)
        self.lab_status.setStyleSheet("color: #CC0000;" if error else "color: #777;")
        self.lab_status.setVisible(bool(text))

    def set_summary(self, s: ReportSummary):
        self.lab_bills.setText(str(s.bill_count))
        self.lab_sell.setText(fmt_lkr(s.sell))
        self.lab_profit.setText(fmt_lkr(s.profit))
        self.lab_expenses.setText(fmt_lkr(s.expenses))
        self.lab_net.setText(fmt_lkr(s.net_profit))

    def set_items(self, items: list[dict]):
        _fill(self.tbl_items, [
            [str(i.get("itemName") or ""), str(i.get("itemQuantity") or 0),
             fmt_money(i.get("itemRate") or 0), fmt_money(i.get("costPrice") or 0),
             fmt_money(i.get("total") or 0), fmt_datetime(i.get("createdAt"))]
            for i in items
        ])

    def set_expenses(self, expenses: list[dict]):
        _fill(self.tbl_expenses, [
            [str(e.get("name") or ""), fmt_money(e.get("amount") or 0), fmt_datetime(e.get("date"))]
            for e in expenses
        ])
