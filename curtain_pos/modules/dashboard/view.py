from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGridLayout, QFrame,
    QGroupBox, QListWidget, QListWidgetItem, QTableWidget, QTableWidgetItem, QAbstractItemView,
)

from ...utils.helpers import fmt_money
from .metrics import DashboardMetrics

# (key, title, is_money)
DAILY_CARDS = [
    ("daily_sell", "Daily Sell", True),
    ("daily_profit", "Daily Profit", True),
    ("daily_expenses", "Daily Expenses", True),
    ("net_daily_profit", "Net Daily Profit", True),
]
OVERALL_CARDS = [
    ("today_orders", "Today Orders", False),
    ("pending_orders", "Pending Orders", False),
    ("total_sales", "Total Sales", True),
    ("pending_balance", "Pending Balance", True),
]

# lowest band of the stock colouring
CRITICAL_STOCK = 5


class KPICard(QFrame):
    def __init__(self, title: str, caption: str = "") -> None:
        super().__init__()
        self.setObjectName("kpi_card")
        self.setStyleSheet("""
            QFrame#kpi_card {
                border: 1px solid #e1e1e1;
                border-radius: 10px;
                background: #fff;
            }
        """)

        v = QVBoxLayout(self)
        v.setContentsMargins(12, 10, 12, 12)
        v.setSpacing(2)

        self.lbl_title = QLabel(title)
        f = self.lbl_title.font()
        f.setBold(True)
        self.lbl_title.setFont(f)

        self.lbl_value = QLabel("—")
        fv = QFont(self.lbl_value.font())
        fv.setPointSize(fv.pointSize() + 6)
        fv.setBold(True)
        self.lbl_value.setFont(fv)

        self.lbl_caption = QLabel(caption)
        self.lbl_caption.setStyleSheet("color: #777;")

        v.addWidget(self.lbl_title)
        v.addWidget(self.lbl_value)
        v.addWidget(self.lbl_caption)

    def set_value(self, s: str) -> None:
        self.lbl_value.setText(s)

    def value(self) -> str:
        return self.lbl_value.text()


class DashboardView(QWidget):
    """
    Pure-UI dashboard surface. The controller calls set_metrics().

      - Daily cards: sell, profit, expenses, net profit
      - Overall cards: today/pending orders, total sales, pending balance
      - Low stock list and today's expenses table
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.cards: dict[str, KPICard] = {}
        self._money_keys: set[str] = set()

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(10)

        top = QHBoxLayout()
        title = QLabel("<h2>Dashboard</h2>")
        title.setTextFormat(Qt.RichText)
        top.addWidget(title)
        top.addStretch(1)
        self.lab_status = QLabel("")
        self.lab_status.setStyleSheet("color: #CC0000;")
        top.addWidget(self.lab_status)
        self.btn_refresh = QPushButton("Refresh")
        top.addWidget(self.btn_refresh)
        root.addLayout(top)

        root.addLayout(self._card_row(DAILY_CARDS, "Today"))
        root.addLayout(self._card_row(OVERALL_CARDS, "All orders"))

        lower = QHBoxLayout()

        stock_box = QGroupBox("Low Stock Items")
        self.lst_low_stock = QListWidget()
        QVBoxLayout(stock_box).addWidget(self.lst_low_stock)
        lower.addWidget(stock_box, 1)

        exp_box = QGroupBox("Today's Expenses")
        self.tbl_expenses = QTableWidget(0, 2)
        self.tbl_expenses.setHorizontalHeaderLabels(["Name", "Amount (LKR)"])
        self.tbl_expenses.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.tbl_expenses.verticalHeader().setVisible(False)
        self.tbl_expenses.horizontalHeader().setStretchLastSection(True)
        QVBoxLayout(exp_box).addWidget(self.tbl_expenses)
        lower.addWidget(exp_box, 1)

        root.addLayout(lower, 1)

    def _card_row(self, specs, caption: str) -> QGridLayout:
        grid = QGridLayout()
        for col, (key, title, is_money) in enumerate(specs):
            card = KPICard(title, caption)
            self.cards[key] = card
            if is_money:
                self._money_keys.add(key)
            grid.addWidget(card, 0, col)
        return grid

    # ---------------- setters ----------------

    def set_status(self, text: str) -> None:
        self.lab_status.setText(text)

    def set_metrics(self, m: DashboardMetrics) -> None:
        for key, card in self.cards.items():
            v = getattr(m, key)
            card.set_value(fmt_money(v) if key in self._money_keys else str(v))

        self.lst_low_stock.clear()
        if not m.low_stock_items:
            self.lst_low_stock.addItem("No low stock items")
        for s in m.low_stock_items:
            it = QListWidgetItem(f"{s.item_name}  ({s.quantity:g})")
            it.setForeground(QColor("#CC0000") if s.quantity <= CRITICAL_STOCK else QColor("#B8860B"))
            self.lst_low_stock.addItem(it)

        rows = list(m.expenses)
        self.tbl_expenses.setRowCount(len(rows) + (1 if rows else 0))
        for r, exp in enumerate(rows):
            self.tbl_expenses.setItem(r, 0, QTableWidgetItem(str(exp.get("name") or "")))
            self.tbl_expenses.setItem(r, 1, QTableWidgetItem(fmt_money(exp.get("amount") or 0)))
        if rows:
            total = QTableWidgetItem(fmt_money(m.daily_expenses))
            label = QTableWidgetItem("Total")
            f = label.font()
            f.setBold(True)
            label.setFont(f)
            total.setFont(f)
            self.tbl_expenses.setItem(len(rows), 0, label)
            self.tbl_expenses.setItem(len(rows), 1, total)
