from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ...constants import CATEGORIES
from ...utils.validators import parse_amount_or_zero, parse_leading_int_or_zero, try_parse_int
from .calculations import Totals, compute_totals
from .catalog import Catalog

NO_ITEMS_MESSAGE = "Cannot save bill: No items selected!"


@dataclass
class LineItem:
    item_name: str = ""
    rate: float = 0.0
    quantity: int = 1

    @property
    def is_empty(self) -> bool:
        return not self.item_name

    @property
    def line_total(self) -> float:
        return self.rate * self.quantity


def _fmt_qty(q: float) -> str:
    return f"{q:g}"


class OrderComposer:
    """
    Line items for one order/bill, keyed by category, plus discount and
    payment entry. All money figures are derived on read by
    compute_totals(); nothing is cached.

    enforce_stock=True is the immediate-sale variant: quantity edits above
    the catalog's available count are refused.
    """

    def __init__(self, catalog: Catalog, *, enforce_stock: bool = False, rows_per_category: int = 0):
        self.catalog = catalog
        self.enforce_stock = enforce_stock
        self.rows_per_category = rows_per_category
        self.lines: dict[str, list[LineItem]] = {}
        self.discount: int = 0       # raw entry, clamped only when computing
        self.payment: float = 0.0
        self.reset()

    def reset(self) -> None:
        self.lines = {c: [LineItem() for _ in range(self.rows_per_category)] for c in CATEGORIES}
        self.discount = 0
        self.payment = 0.0

    # ---- row access -------------------------------------------------------

    def rows(self, category: str) -> list[LineItem]:
        return self.lines[category]

    def _line(self, category: str, index: int) -> Optional[LineItem]:
        rows = self.lines.get(category)
        if rows is None or not 0 <= index < len(rows):
            return None
        return rows[index]

    def add_row(self, category: str) -> None:
        self.lines[category].append(LineItem())

    def remove_row(self, category: str, index: int) -> None:
        rows = self.lines[category]
        if 0 <= index < len(rows):
            del rows[index]

    # ---- edits ------------------------------------------------------------

    def select_item(self, category: str, index: int, item_name: str) -> None:
        line = self._line(category, index)
        if line is None:
            return
        stock = self.catalog.find(category, item_name)
        line.item_name = item_name or ""
        line.rate = stock.sell_price if stock else 0
        line.quantity = 1

    def set_quantity(self, category: str, index: int, raw_value) -> tuple[bool, str]:
        """
        Returns (applied, message). Unparsable or non-positive input is
        dropped silently: (False, ""). An over-stock request in enforce_stock
        mode returns (False, <warning>) and leaves the line untouched.
        """
        line = self._line(category, index)
        if line is None:
            return False, ""
        ok, quantity = try_parse_int(raw_value)
        if not ok or quantity <= 0:
            return False, ""
        if self.enforce_stock:
            stock = self.catalog.find(category, line.item_name)
            if stock is not None and quantity > stock.quantity:
                return False, f"Cannot sell more than available stock ({_fmt_qty(stock.quantity)})"
        line.quantity = quantity
        return True, ""

    def set_discount(self, raw) -> None:
        self.discount = parse_leading_int_or_zero(raw)

    def set_payment(self, raw) -> None:
        self.payment = parse_amount_or_zero(raw)

    # ---- derived ----------------------------------------------------------

    def category_total(self, category: str) -> float:
        total = 0
        for line in self.lines[category]:
            if not line.is_empty:
                total = total + line.line_total
        return total

    def compute_totals(self) -> Totals:
        return compute_totals(
            (self.category_total(c) for c in CATEGORIES),
            self.discount,
            self.payment,
        )

    def selected_lines(self) -> Iterable[tuple[str, LineItem]]:
        for category in CATEGORIES:
            for line in self.lines[category]:
                if not line.is_empty:
                    yield category, line

    def build_submission_items(self) -> tuple[Optional[list[dict]], str]:
        """
        Wire items for the selected lines, cost looked up fresh from the
        catalog. Returns (None, NO_ITEMS_MESSAGE) when nothing is selected.
        """
        items = []
        for category, line in self.selected_lines():
            stock = self.catalog.find(category, line.item_name)
            items.append({
                "itemName": line.item_name,
                "itemQuantity": line.quantity,
                "itemRate": line.rate,
                "costPrice": stock.cost if stock else 0,
                "total": line.line_total,
            })
        if not items:
            return None, NO_ITEMS_MESSAGE
        return items, ""
