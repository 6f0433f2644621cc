from __future__ import annotations

import logging
from typing import Iterable, Optional

from ...api.repositories.stock_repo import StockItem
from ...constants import CATEGORIES, CATEGORY_BY_ITEM_TYPE

logger = logging.getLogger(__name__)


class Catalog:
    """
    Stock list partitioned into the three composer categories.

    This is a screen-local mirror of backend stock: Quick Sell decrements it
    after a sale so dropdown counts stay right until the next re-fetch.
    """

    def __init__(self, items: Iterable[StockItem] = ()):
        self._slices: dict[str, list[StockItem]] = {c: [] for c in CATEGORIES}
        self.replace(items)

    def replace(self, items: Iterable[StockItem]) -> None:
        slices: dict[str, list[StockItem]] = {c: [] for c in CATEGORIES}
        for it in items:
            category = CATEGORY_BY_ITEM_TYPE.get(it.item_type)
            if category is None:
                logger.debug("Ignoring stock row %r with itemType %r", it.item_name, it.item_type)
                continue
            slices[category].append(it)
        self._slices = slices

    def options(self, category: str, *, in_stock_only: bool = False) -> list[StockItem]:
        rows = self._slices.get(category, [])
        if in_stock_only:
            return [r for r in rows if r.quantity > 0]
        return list(rows)

    def find(self, category: str, name: str) -> Optional[StockItem]:
        if not name:
            return None
        for it in self._slices.get(category, []):
            if it.item_name == name:
                return it
        return None

    def decrement(self, category: str, name: str, quantity: int) -> None:
        it = self.find(category, name)
        if it is not None:
            it.quantity -= quantity
