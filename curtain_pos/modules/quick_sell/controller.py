from __future__ import annotations

import logging

from ...api import get_print_service
from ...api.print_service import PrintService
from ..composer import OrderComposer, QuickSellCheckout
from ..composer_screen import ComposerScreen
from .view import QuickSellView

logger = logging.getLogger(__name__)


class QuickSellController(ComposerScreen):
    """
    Walk-in sale: payment must cover the grand total, quantities are
    checked against the stock mirror while editing, and the bill is sent
    to the receipt printer after the backend accepts it.
    """

    IN_STOCK_ONLY = True

    def __init__(
        self,
        client,
        current_user: dict | None = None,
        *,
        print_service: PrintService | None = None,
    ):
        super().__init__(client, current_user)
        self.checkout = QuickSellCheckout(
            self.composer,
            self.orders,
            print_service=print_service if print_service is not None else get_print_service(),
            stock=self.stock_repo,
        )

    def _make_composer(self) -> OrderComposer:
        return OrderComposer(self.catalog, enforce_stock=True, rows_per_category=0)

    def _make_view(self) -> QuickSellView:
        return QuickSellView()

    def save(self) -> None:
        result = self.checkout.submit()
        if not result.ok:
            self._warn("Cannot save sale", result.message)
            return

        bill_no = (result.data.get("bill") or {}).get("billNo")
        text = f"{result.message} Bill No: {bill_no}" if bill_no is not None else result.message
        self._info("Saved", text)
        for w in result.warnings:
            self._warn("Printing failed", w)
        self._after_success()
