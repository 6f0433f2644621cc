from __future__ import annotations

import logging

from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from .detail_dialog import OrderDetailDialog
from .model import OrdersTableModel, filter_orders, sort_newest_first
from .view import OrderDetailsView
from ...api.client import ApiClient
from ...api.errors import ApiError
from ...api.repositories.bills_repo import BillsRepo
from ...api.repositories.orders_repo import OrdersRepo
from ...utils import ui_helpers as ui
from ...utils.validators import is_strictly_positive_number, try_parse_float

logger = logging.getLogger(__name__)

INVALID_AMOUNT_MESSAGE = "Enter a valid amount"


class OrderDetailsController(BaseModule):
    """
    Orders list with filters, plus the per-order dialog:
    status change (reverted on failure), follow-up payment and cancel.
    """

    def __init__(self, client: ApiClient, current_user: dict | None = None):
        super().__init__()
        self.client = client
        self.user = current_user
        self.orders = OrdersRepo(client)
        self.bills = BillsRepo(client)

        self._all: list[dict] = []
        self.detail: OrderDetailDialog | None = None

        self.view = OrderDetailsView()
        self.model = OrdersTableModel([])
        self.view.table.setModel(self.model)

        self.view.txt_customer.textChanged.connect(lambda _=None: self.apply_filters())
        self.view.cmb_order_status.currentIndexChanged.connect(lambda _=None: self.apply_filters())
        self.view.cmb_payment_status.currentIndexChanged.connect(lambda _=None: self.apply_filters())
        self.view.btn_reload.clicked.connect(self.refresh)
        self.view.btn_open.clicked.connect(self._open_selected)
        self.view.table.doubleClicked.connect(lambda idx: self.open_order(self.model.at(idx.row())))

        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    # ---- list -------------------------------------------------------------

    def refresh(self) -> None:
        try:
            rows = self.orders.list_orders()
        except ApiError as e:
            logger.warning("Error fetching orders: %s", e)
            self._error("Orders", str(e))
            return
        self._all = sort_newest_first(r for r in rows if isinstance(r, dict))
        self.apply_filters()

    def apply_filters(self) -> None:
        rows = filter_orders(self._all, **self.view.filters())
        self.model.replace(rows)
        self.view.lab_empty.setVisible(not rows)

    def _open_selected(self):
        idx = self.view.table.currentIndex()
        if not idx.isValid():
            self._info("Orders", "Select an order first.")
            return
        self.open_order(self.model.at(idx.row()))

    # ---- detail dialog ----------------------------------------------------

    def open_order(self, row: dict) -> OrderDetailDialog | None:
        order_id = row.get("_id")
        try:
            order = self.orders.get_order(order_id)
        except ApiError as e:
            logger.warning("Error fetching order %s: %s", order_id, e)
            self._error("Order", str(e))
            return None
        order.setdefault("_id", order_id)

        dlg = OrderDetailDialog(order, self.view)
        dlg.statusChangeRequested.connect(self.change_status)
        dlg.paymentRequested.connect(self.add_payment)
        dlg.cancelRequested.connect(self.cancel_order)
        dlg.finished.connect(lambda _=None: self.refresh())
        self.detail = dlg
        dlg.open()
        return dlg

    def change_status(self, status: str) -> bool:
        dlg = self.detail
        order = dlg.order()
        previous = order.get("orderStatus") or ""
        try:
            self.orders.update_status(order["_id"], status)
        except ApiError as e:
            logger.warning("Status change %s -> %s failed for %s: %s", previous, status, order["_id"], e)
            self._error("Status", str(e))
            dlg.set_status(previous or "pending")
            return False
        order["orderStatus"] = status
        logger.info("Order %s status %s -> %s", order["_id"], previous, status)
        return True

    def add_payment(self, amount_text: str, payment_type: str) -> bool:
        dlg = self.detail
        order = dlg.order()
        if not is_strictly_positive_number(amount_text):
            self._warn("Payment", INVALID_AMOUNT_MESSAGE)
            return False
        _ok, amount = try_parse_float(amount_text)
        try:
            data = self.bills.add_payment(order["_id"], amount, order.get("balance"), payment_type)
        except ApiError as e:
            logger.warning("Payment for order %s rejected: %s", order["_id"], e)
            self._error("Payment", str(e))
            return False

        updated = data.get("order") or {}
        order["balance"] = updated.get("balance", order.get("balance"))
        order["paymentStatus"] = updated.get("paymentStatus", order.get("paymentStatus"))
        if data.get("bill"):
            order["bills"] = list(order.get("bills") or []) + [data["bill"]]
        logger.info("Recorded payment %.2f (%s) for order %s", amount, payment_type, order["_id"])
        dlg.clear_payment()
        dlg.set_order(order)
        return True

    def cancel_order(self) -> bool:
        dlg = self.detail
        order = dlg.order()
        if not self._confirm("Cancel Order", "Are you sure you want to cancel this order?"):
            return False
        try:
            self.orders.cancel_order(order["_id"])
        except ApiError as e:
            logger.warning("Cancel failed for order %s: %s", order["_id"], e)
            self._error("Cancel Order", str(e))
            return False
        logger.info("Cancelled order %s", order["_id"])
        self._info("Cancel Order", "Order cancelled successfully!")
        dlg.accept()
        return True

    # ---- messages ---------------------------------------------------------

    def _info(self, title: str, text: str):
        ui.info(self.view, title, text)

    def _warn(self, title: str, text: str):
        ui.warn(self.view, title, text)

    def _error(self, title: str, text: str):
        ui.error(self.view, title, text)

    def _confirm(self, title: str, text: str) -> bool:
        return ui.confirm(self.view, title, text)
