from PySide6.QtWidgets import QGroupBox, QFormLayout, QLineEdit, QLabel, QPushButton, QVBoxLayout
from PySide6.QtGui import QFont
from PySide6.QtCore import Signal

from ..utils.helpers import fmt_lkr


class BillSummary(QGroupBox):
    """Discount/payment inputs and the derived totals strip."""

    discountEdited = Signal(str)
    paymentEdited = Signal(str)
    saveRequested = Signal()

    def __init__(self, parent=None, *, save_text: str = "Save & Print"):
        super().__init__("Bill Summary", parent)

        self.txt_discount = QLineEdit()
        self.txt_discount.setPlaceholderText("0")
        self.txt_payment = QLineEdit()
        self.txt_payment.setPlaceholderText("0")

        self.lab_sub = QLabel(fmt_lkr(0))
        self.lab_discount = QLabel(f"- {fmt_lkr(0)}")
        self.lab_grand = QLabel(fmt_lkr(0))
        self.lab_balance = QLabel(fmt_lkr(0))

        font = QFont()
        font.setPointSize(12)
        font.setBold(True)
        self.lab_grand.setFont(font)
        self.lab_discount.setStyleSheet("color: #CC0000;")
        self.lab_balance.setStyleSheet("color: #CC0000; font-weight: bold;")

        form = QFormLayout()
        form.addRow("Discount (%)", self.txt_discount)
        form.addRow("Subtotal:", self.lab_sub)
        form.addRow("Discount Amount:", self.lab_discount)
        form.addRow("Grand Total:", self.lab_grand)
        form.addRow("Payment (LKR)", self.txt_payment)
        form.addRow("Balance:", self.lab_balance)

        self.btn_save = QPushButton(save_text)
        self.btn_save.setStyleSheet("font-weight: bold; padding: 8px;")

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addStretch(1)
        lay.addWidget(self.btn_save)

        # textEdited: user typing only, so programmatic resets don't echo back
        self.txt_discount.textEdited.connect(self.discountEdited)
        self.txt_payment.textEdited.connect(self.paymentEdited)
        self.btn_save.clicked.connect(self.saveRequested)

    def set_totals(self, totals) -> None:
        self.lab_sub.setText(fmt_lkr(totals.sub_total))
        self.lab_discount.setText(f"- {fmt_lkr(totals.discount_amount)}")
        self.lab_grand.setText(fmt_lkr(totals.grand_total))
        self.lab_balance.setText(fmt_lkr(totals.balance))

    def clear_inputs(self) -> None:
        self.txt_discount.clear()
        self.txt_payment.clear()
