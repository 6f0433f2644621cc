from __future__ import annotations

import logging
from datetime import date

from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from .metrics import DashboardMetrics
from .view import DashboardView
from ...api.client import ApiClient
from ...api.errors import ApiError
from ...api.repositories.bills_repo import BillsRepo
from ...api.repositories.expenses_repo import ExpensesRepo
from ...api.repositories.orders_repo import OrdersRepo
from ...api.repositories.stock_repo import StockRepo

logger = logging.getLogger(__name__)


class DashboardController(BaseModule):
    """
    Pulls orders, stock, bills, order items and today's expenses, then
    pushes the computed DashboardMetrics to the view.

    A failed fetch keeps the previous figures on screen and shows the
    backend message in the status label.
    """

    def __init__(self, client: ApiClient, current_user: dict | None = None) -> None:
        super().__init__()
        self.client = client
        self.user = current_user
        self.orders = OrdersRepo(client)
        self.stock = StockRepo(client)
        self.bills = BillsRepo(client)
        self.expenses = ExpensesRepo(client)

        self.metrics = DashboardMetrics()
        self.view = DashboardView()
        self.view.btn_refresh.clicked.connect(lambda _=None: self.refresh())
        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    def refresh(self, day: date | None = None) -> bool:
        try:
            orders = self.orders.list_orders()
            stock = self.stock.list_stock()
            bills = self.bills.list_bills()
            items = self.bills.list_order_items()
            expense_rows, expense_total = self.expenses.today()
        except ApiError as e:
            logger.warning("Error fetching dashboard data: %s", e)
            self.view.set_status(f"Could not load dashboard: {e}")
            return False

        self.metrics = DashboardMetrics.compute(
            orders=orders,
            stock=stock,
            bills=bills,
            order_items=items,
            expenses=expense_rows,
            expense_total=expense_total,
            day=day,
        )
        logger.debug("Dashboard metrics: %r", self.metrics)
        self.view.set_status("")
        self.view.set_metrics(self.metrics)
        return True
