from __future__ import annotations

import logging

from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from .model import StockTableModel
from .view import InventoryView
from ...api.client import ApiClient
from ...api.errors import ApiError
from ...api.repositories.stock_repo import StockItem, StockRepo
from ...utils import ui_helpers as ui

logger = logging.getLogger(__name__)


class InventoryController(BaseModule):
    """Stock list filtered by itemType on the backend; delete after confirmation."""

    def __init__(self, client: ApiClient, current_user: dict | None = None):
        super().__init__()
        self.client = client
        self.user = current_user
        self.stock = StockRepo(client)

        self.view = InventoryView()
        self.model = StockTableModel([])
        self.view.table.setModel(self.model)

        self.view.cmb_type.currentIndexChanged.connect(lambda _=None: self.refresh())
        self.view.btn_reload.clicked.connect(lambda _=None: self.refresh())
        self.view.btn_delete.clicked.connect(self._delete_selected)

        self.refresh()

    def get_widget(self) -> QWidget:
        return self.view

    def refresh(self) -> bool:
        item_type = self.view.item_type()
        try:
            rows = self.stock.list_stock(item_type or None)
        except ApiError as e:
            logger.warning("Error fetching stock (%s): %s", item_type or "All", e)
            self._error("Stock", str(e))
            return False
        self.model.replace(rows)
        self.view.set_empty(not rows)
        return True

    def _delete_selected(self):
        idx = self.view.table.currentIndex()
        if not idx.isValid():
            self._info("Stock", "Select an item first.")
            return
        self.delete_item(self.model.at(idx.row()))

    def delete_item(self, item: StockItem) -> bool:
        if not self._confirm("Delete Item", "Are you sure you want to delete this item?"):
            return False
        try:
            self.stock.delete_stock(item.item_id)
        except ApiError as e:
            logger.warning("Delete failed for stock %s: %s", item.item_id, e)
            self._error("Delete Item", str(e))
            return False
        logger.info("Deleted stock item %s (%s)", item.item_id, item.item_name)
        # list is updated in place, no re-fetch
        self.model.remove(item.item_id)
        self.view.set_empty(self.model.rowCount() == 0)
        return True

    # ---- messages ---------------------------------------------------------

    def _info(self, title: str, text: str):
        ui.info(self.view, title, text)

    def _error(self, title: str, text: str):
        ui.error(self.view, title, text)

    def _confirm(self, title: str, text: str) -> bool:
        return ui.confirm(self.view, title, text)
