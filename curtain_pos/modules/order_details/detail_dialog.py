from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox, QLabel, QComboBox,
    QLineEdit, QPushButton, QTableWidget, QTableWidgetItem, QAbstractItemView,
)

from ...constants import ORDER_STATUS_CANCELLED, ORDER_STATUSES, PAYMENT_TYPES
from ...utils.helpers import fmt_money, parse_timestamp
from ...utils.validators import try_parse_float
from ..composer.calculations import status_from_paid
from .model import customer_of, fmt_date


def _num(value) -> float:
    ok, val = try_parse_float(value)
    return val if ok else 0.0


def _fill(table: QTableWidget, rows: list[list[str]]):
    table.setRowCount(len(rows))
    for r, values in enumerate(rows):
        for c, v in enumerate(values):
            table.setItem(r, c, QTableWidgetItem(v))


class OrderDetailDialog(QDialog):
    """
    One order: customer, status selector, items, bills, follow-up payment
    and cancel. Emits requests only; the controller talks to the backend.
    """

    statusChangeRequested = Signal(str)
    paymentRequested = Signal(str, str)     # amount text, payment type
    cancelRequested = Signal()

    def __init__(self, order: dict, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Order Details")
        self.resize(900, 620)
        self._order: dict = {}

        root = QVBoxLayout(self)

        # ---- customer + order info --------------------------------------
        top = QHBoxLayout()

        cust_box = QGroupBox("Customer Info")
        cg = QGridLayout(cust_box)
        self.lab_name = QLabel()
        self.lab_address = QLabel()
        self.lab_mobile1 = QLabel()
        self.lab_mobile2 = QLabel()
        for i, (caption, lab) in enumerate((
            ("Name:", self.lab_name),
            ("Address:", self.lab_address),
            ("Mobile 1:", self.lab_mobile1),
            ("Mobile 2:", self.lab_mobile2),
        )):
            cg.addWidget(QLabel(caption), i, 0)
            cg.addWidget(lab, i, 1)
        top.addWidget(cust_box)

        info_box = QGroupBox("Order Info")
        ig = QGridLayout(info_box)
        self.cmb_status = QComboBox()
        self.lab_payment_status = QLabel()
        self.lab_fixing = QLabel()
        self.lab_amount = QLabel()
        self.lab_balance = QLabel()
        for i, (caption, w) in enumerate((
            ("Status:", self.cmb_status),
            ("Payment Status:", self.lab_payment_status),
            ("Fixing Date:", self.lab_fixing),
            ("Order Amount:", self.lab_amount),
            ("Balance:", self.lab_balance),
        )):
            ig.addWidget(QLabel(caption), i, 0)
            ig.addWidget(w, i, 1)
        top.addWidget(info_box)
        root.addLayout(top)

        # ---- items / bills ----------------------------------------------
        self.tbl_items = self._table(["Item", "Quantity", "Rate", "Total"])
        items_box = QGroupBox("Items")
        QVBoxLayout(items_box).addWidget(self.tbl_items)
        root.addWidget(items_box, 1)

        self.tbl_bills = self._table(["Date", "Bill Total", "Paid Amount", "Discount", "Payment Type"])
        bills_box = QGroupBox("Bills")
        QVBoxLayout(bills_box).addWidget(self.tbl_bills)
        root.addWidget(bills_box, 1)

        # ---- payment ------------------------------------------------------
        self.payment_box = QGroupBox("Add Payment")
        pay = QHBoxLayout(self.payment_box)
        self.txt_amount = QLineEdit()
        self.txt_amount.setPlaceholderText("Enter amount")
        self.cmb_payment_type = QComboBox()
        for t in PAYMENT_TYPES:
            self.cmb_payment_type.addItem(t.replace("-", " ").title(), t)
        self.lab_preview = QLabel("")
        self.btn_pay = QPushButton("Add Payment")
        pay.addWidget(self.txt_amount)
        pay.addWidget(self.cmb_payment_type)
        pay.addWidget(self.lab_preview, 1)
        pay.addWidget(self.btn_pay)
        root.addWidget(self.payment_box)

        bottom = QHBoxLayout()
        self.btn_cancel_order = QPushButton("Cancel Order")
        self.btn_cancel_order.setStyleSheet("color: #CC0000;")
        self.btn_close = QPushButton("Close")
        bottom.addWidget(self.btn_cancel_order)
        bottom.addStretch(1)
        bottom.addWidget(self.btn_close)
        root.addLayout(bottom)

        # ---- signals ------------------------------------------------------
        self.cmb_status.currentIndexChanged.connect(self._status_changed)
        self.txt_amount.textChanged.connect(self._update_preview)
        self.btn_pay.clicked.connect(
            lambda: self.paymentRequested.emit(self.txt_amount.text(), self.cmb_payment_type.currentData())
        )
        self.btn_cancel_order.clicked.connect(self.cancelRequested)
        self.btn_close.clicked.connect(self.reject)

        self.set_order(order)

    @staticmethod
    def _table(headers: list[str]) -> QTableWidget:
        t = QTableWidget(0, len(headers))
        t.setHorizontalHeaderLabels(headers)
        t.setEditTriggers(QAbstractItemView.NoEditTriggers)
        t.verticalHeader().setVisible(False)
        t.horizontalHeader().setStretchLastSection(True)
        return t

    # ---- state -------------------------------------------------------------

    def order(self) -> dict:
        return self._order

    def set_order(self, order: dict):
        self._order = order or {}
        o = self._order
        cust = customer_of(o)
        self.lab_name.setText(str(cust.get("name") or "-"))
        self.lab_address.setText(str(cust.get("address") or "-"))
        self.lab_mobile1.setText(str(cust.get("mobile1") or "-"))
        self.lab_mobile2.setText(str(cust.get("mobile2") or "-"))

        self.set_status(o.get("orderStatus") or ORDER_STATUSES[0])
        self.lab_payment_status.setText(str(o.get("paymentStatus") or ""))
        self.lab_fixing.setText(fmt_date(o.get("fixingDate")))
        self.lab_amount.setText(fmt_money(_num(o.get("orderAmount"))))
        self.lab_balance.setText(fmt_money(_num(o.get("balance"))))

        _fill(self.tbl_items, [
            [str(i.get("itemName") or ""), str(i.get("itemQuantity") or 0),
             fmt_money(_num(i.get("itemRate"))), fmt_money(_num(i.get("total")))]
            for i in (o.get("items") or [])
        ])
        _fill(self.tbl_bills, [
            [self._when(b.get("createdAt")), fmt_money(_num(b.get("billTotal"))),
             fmt_money(_num(b.get("paidAmount"))), str(b.get("discount") or 0), str(b.get("paymentType") or "")]
            for b in (o.get("bills") or [])
        ])

        cancelled = o.get("orderStatus") == ORDER_STATUS_CANCELLED
        self.cmb_status.setEnabled(not cancelled)
        self.btn_cancel_order.setEnabled(not cancelled)
        # nothing left to collect
        self.payment_box.setVisible(not cancelled and _num(o.get("balance")) > 0)
        self._update_preview(self.txt_amount.text())

    def set_status(self, status: str):
        """
        Select `status` without emitting a change request. A status the
        selector does not offer (cancelled, or anything new from the
        backend) is shown as an extra entry rather than as "pending".
        """
        wanted = list(ORDER_STATUSES)
        if status and status not in ORDER_STATUSES:
            wanted.append(status)
        current = [self.cmb_status.itemData(i) for i in range(self.cmb_status.count())]
        self.cmb_status.blockSignals(True)
        if current != wanted:
            self.cmb_status.clear()
            for s in wanted:
                self.cmb_status.addItem(s, s)
        idx = self.cmb_status.findData(status)
        self.cmb_status.setCurrentIndex(idx if idx >= 0 else 0)
        self.cmb_status.blockSignals(False)

    def clear_payment(self):
        self.txt_amount.clear()

    @staticmethod
    def _when(value) -> str:
        dt = parse_timestamp(value)
        return dt.strftime("%Y-%m-%d %H:%M") if dt else "-"

    # ---- internals ---------------------------------------------------------

    def _status_changed(self, _index: int):
        status = self.cmb_status.currentData()
        if status and status != self._order.get("orderStatus"):
            self.statusChangeRequested.emit(status)

    def _update_preview(self, text: str):
        ok, amount = try_parse_float(text)
        if not ok or amount <= 0:
            self.lab_preview.setText("")
            return
        total = _num(self._order.get("orderAmount"))
        paid = total - _num(self._order.get("balance")) + amount
        self.lab_preview.setText(f"After payment: {status_from_paid(total, paid)}")
