from __future__ import annotations

import logging

from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from .model import ReportBill, ReportBillsModel, ReportSummary, report_bills
from .view import ReportView
from ...api.client import ApiClient
from ...api.errors import ApiError
from ...api.repositories.bills_repo import BillsRepo
from ...api.repositories.reports_repo import ReportsRepo
from ...utils import ui_helpers as ui

logger = logging.getLogger(__name__)


class ReportController(BaseModule):
    """
    Daily report for the picked date (today on first show). Bills show
    their items and profit; a bill can be cancelled, after which the
    report is fetched again.
    """

    def __init__(self, client: ApiClient, current_user: dict | None = None):
        super().__init__()
        self.client = client
        self.user = current_user
        self.reports = ReportsRepo(client)
        self.bills = BillsRepo(client)

        self.report: dict = {}
        self.summary = ReportSummary()

        self.view = ReportView()
        self.model = ReportBillsModel([])
        self.view.tbl_bills.setModel(self.model)

        self.view.btn_get.clicked.connect(lambda _=None: self.load())
        self.view.btn_cancel_bill.clicked.connect(self._cancel_selected)
        self.view.tbl_bills.selectionModel().currentRowChanged.connect(
            lambda current, _previous: self.show_items(current.row())
        )

        self.load()

    def get_widget(self) -> QWidget:
        return self.view

    def refresh(self) -> None:
        self.load()

    def load(self, day: str | None = None) -> bool:
        if day:
            self.view.set_day(day)
        day = self.view.day()
        try:
            report = self.reports.for_date(day)
        except ApiError as e:
            logger.warning("Error fetching report for %s: %s", day, e)
            self.report = {}
            self._show([], ReportSummary())
            self.view.set_status(str(e), error=True)
            return False

        self.report = report
        bills = report_bills(report)
        self._show(bills, ReportSummary.compute(report, bills))
        self.view.set_status("" if bills else "No bills recorded.")
        logger.debug("Report %s: %r", day, self.summary)
        return True

    def _show(self, bills: list[ReportBill], summary: ReportSummary):
        self.summary = summary
        self.model.replace(bills)
        self.view.lab_title.setText(f"<h2>Daily Report - {self.view.day()}</h2>")
        self.view.set_summary(summary)
        self.view.set_items([])
        self.view.set_expenses(self.report.get("expenses") or [])

    def show_items(self, row: int):
        if 0 <= row < self.model.rowCount():
            self.view.set_items(self.model.at(row).items)
        else:
            self.view.set_items([])

    # ---- cancel -----------------------------------------------------------

    def _cancel_selected(self):
        idx = self.view.tbl_bills.currentIndex()
        if not idx.isValid():
            self._info("Bills", "Select a bill first.")
            return
        self.cancel_bill(self.model.at(idx.row()))

    def cancel_bill(self, bill: ReportBill) -> bool:
        if not self._confirm("Cancel Bill", "Are you sure you want to delete this bill?"):
            return False
        try:
            self.bills.cancel_bill(bill.bill_id)
        except ApiError as e:
            logger.warning("Cancel failed for bill %s: %s", bill.bill_id, e)
            self._error("Cancel Bill", str(e))
            return False
        logger.info("Cancelled bill %s", bill.bill_id)
        self._info("Cancel Bill", "Bill deleted successfully!")
        self.load()
        return True

    # ---- messages ---------------------------------------------------------

    def _info(self, title: str, text: str):
        ui.info(self.view, title, text)

    def _error(self, title: str, text: str):
        ui.error(self.view, title, text)

    def _confirm(self, title: str, text: str) -> bool:
        return ui.confirm(self.view, title, text)
