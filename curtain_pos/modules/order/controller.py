from __future__ import annotations

import logging

from ..composer import FullOrderCheckout, OrderComposer
from ..composer_screen import ComposerScreen
from .view import OrderView

logger = logging.getLogger(__name__)


class OrderController(ComposerScreen):
    """
    Full order: customer + fixing date, partial payment allowed.
    Starts with one empty row per category.
    """

    def __init__(self, client, current_user: dict | None = None):
        super().__init__(client, current_user)
        self.checkout = FullOrderCheckout(self.composer, self.orders)

    def _make_composer(self) -> OrderComposer:
        return OrderComposer(self.catalog, enforce_stock=False, rows_per_category=1)

    def _make_view(self) -> OrderView:
        return OrderView()

    def save(self) -> None:
        customer = self.view.customer_form.customer()
        result = self.checkout.submit(customer)
        if not result.ok:
            self._warn("Cannot save order", result.message)
            return
        logger.debug("Created order: %r", result.data)
        self._info("Saved", result.message)
        self.view.customer_form.clear()
        self._after_success()
