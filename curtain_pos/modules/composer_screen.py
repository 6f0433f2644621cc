from __future__ import annotations

import logging

from PySide6.QtWidgets import QWidget

from .base_module import BaseModule
from .composer import Catalog, OrderComposer
from ..api.client import ApiClient
from ..api.errors import ApiError
from ..api.repositories.orders_repo import OrdersRepo
from ..api.repositories.stock_repo import StockRepo
from ..constants import CATEGORIES
from ..utils.ui_helpers import info, warn, error
from ..widgets.composer_panel import ComposerPanel

logger = logging.getLogger(__name__)


class ComposerScreen(BaseModule):
    """
    Wiring shared by the Order and Quick Sell screens.

    Flow for every edit: view signal -> composer mutation -> render().
    The view never computes anything; totals come from the composer.
    """

    # Quick Sell hides sold-out items from the dropdowns
    IN_STOCK_ONLY = False

    def __init__(self, client: ApiClient, current_user: dict | None = None):
        super().__init__()
        self.client = client
        self.user = current_user

        self.stock_repo = StockRepo(client)
        self.orders = OrdersRepo(client)

        self.catalog = Catalog()
        self.composer = self._make_composer()
        self.view: ComposerPanel = self._make_view()

        self._wire()
        self.load_stock()
        self.render()

    # ---- hooks ------------------------------------------------------------

    def _make_composer(self) -> OrderComposer:
        raise NotImplementedError

    def _make_view(self) -> ComposerPanel:
        raise NotImplementedError

    def save(self) -> None:
        raise NotImplementedError

    # ---- BaseModule -------------------------------------------------------

    def get_widget(self) -> QWidget:
        return self.view

    def refresh(self) -> None:
        self.load_stock()
        self.render()

    # ---- data -------------------------------------------------------------

    def load_stock(self) -> bool:
        try:
            self.catalog.replace(self.stock_repo.list_stock())
        except ApiError as e:
            logger.warning("Error fetching stock: %s", e)
            self.view.set_status(f"Could not load stock: {e}")
            return False
        self.view.set_status("")
        return True

    # ---- wiring -----------------------------------------------------------

    def _wire(self):
        for c in CATEGORIES:
            sec = self.view.section(c)
            sec.itemChosen.connect(lambda row, name, cat=c: self.on_item_chosen(cat, row, name))
            sec.quantityEdited.connect(lambda row, text, cat=c: self.on_quantity_edited(cat, row, text))
            sec.removeRequested.connect(lambda row, cat=c: self.on_remove_row(cat, row))
            sec.addRequested.connect(lambda cat=c: self.on_add_row(cat))

        self.view.summary.discountEdited.connect(self.on_discount_edited)
        self.view.summary.paymentEdited.connect(self.on_payment_edited)
        self.view.summary.saveRequested.connect(self.save)

    # ---- handlers ---------------------------------------------------------

    def on_item_chosen(self, category: str, row: int, name: str):
        self.composer.select_item(category, row, name)
        self.render_section(category)
        self.render_totals()

    def on_quantity_edited(self, category: str, row: int, text: str):
        _applied, msg = self.composer.set_quantity(category, row, text)
        if msg:
            self._warn("Insufficient stock", msg)
        # re-render either way so a rejected edit shows the kept value
        self.render_section(category)
        self.render_totals()

    def on_add_row(self, category: str):
        self.composer.add_row(category)
        self.render_section(category)

    def on_remove_row(self, category: str, row: int):
        self.composer.remove_row(category, row)
        self.render_section(category)
        self.render_totals()

    def on_discount_edited(self, text: str):
        self.composer.set_discount(text)
        self.render_totals()

    def on_payment_edited(self, text: str):
        self.composer.set_payment(text)
        self.render_totals()

    # ---- rendering --------------------------------------------------------

    def render(self):
        for c in CATEGORIES:
            self.render_section(c)
        self.render_totals()

    def render_section(self, category: str):
        self.view.section(category).set_rows(
            self.composer.rows(category),
            self.catalog.options(category, in_stock_only=self.IN_STOCK_ONLY),
        )

    def render_totals(self):
        self.view.summary.set_totals(self.composer.compute_totals())

    def _after_success(self):
        self.view.summary.clear_inputs()
        self.render()

    # ---- messages (single seam so tests can stub dialogs) -------------------

    def _info(self, title: str, text: str):
        info(self.view, title, text)

    def _warn(self, title: str, text: str):
        warn(self.view, title, text)

    def _error(self, title: str, text: str):
        error(self.view, title, text)
