from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QComboBox, QPushButton

from ...constants import ORDER_FILTER_STATUSES, PAYMENT_STATUSES
from ...widgets.table_view import TableView


def _status_combo(values) -> QComboBox:
    cmb = QComboBox()
    cmb.addItem("All", "")
    for v in values:
        cmb.addItem(v, v)
    return cmb


class OrderDetailsView(QWidget):
    """
    Orders list:
      - Filters: customer name, order status, payment status
      - Table (newest first); double-click opens the order
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)

        title = QLabel("<h2>Order Details</h2>")
        root.addWidget(title)

        bar = QHBoxLayout()
        bar.addWidget(QLabel("Customer:"))
        self.txt_customer = QLineEdit()
        self.txt_customer.setPlaceholderText("Search by customer name…")
        bar.addWidget(self.txt_customer, 2)

        bar.addWidget(QLabel("Order Status:"))
        self.cmb_order_status = _status_combo(ORDER_FILTER_STATUSES)
        bar.addWidget(self.cmb_order_status)

        bar.addWidget(QLabel("Payment Status:"))
        self.cmb_payment_status = _status_combo(PAYMENT_STATUSES)
        bar.addWidget(self.cmb_payment_status)

        self.btn_open = QPushButton("Open")
        self.btn_reload = QPushButton("Reload")
        bar.addWidget(self.btn_open)
        bar.addWidget(self.btn_reload)
        root.addLayout(bar)

        self.lab_empty = QLabel("No orders found.")
        self.lab_empty.setVisible(False)
        root.addWidget(self.lab_empty)

        self.table = TableView()
        root.addWidget(self.table, 1)

    def filters(self) -> dict:
        return {
            "customer_name": self.txt_customer.text(),
            "order_status": self.cmb_order_status.currentData() or "",
            "payment_status": self.cmb_payment_status.currentData() or "",
        }
