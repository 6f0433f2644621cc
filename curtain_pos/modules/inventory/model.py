from __future__ import annotations

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QColor

from ...api.repositories.stock_repo import StockItem
from ...constants import HIGH_STOCK_THRESHOLD, LOW_STOCK_THRESHOLD
from ...utils.helpers import fmt_money


def quantity_band(quantity: float) -> str:
    """'high' above 50, 'medium' for 20..50, 'low' below 20."""
    if quantity > HIGH_STOCK_THRESHOLD:
        return "high"
    if quantity >= LOW_STOCK_THRESHOLD:
        return "medium"
    return "low"


# band -> (background, text)
BAND_COLOURS = {
    "high": ("#DCFCE7", "#166534"),
    "medium": ("#FEF9C3", "#854D0E"),
    "low": ("#FEE2E2", "#991B1B"),
}


def fmt_qty(quantity: float) -> str:
    return f"{quantity:g}"


class StockTableModel(QAbstractTableModel):
    HEADERS = ["Item Name", "Type", "Color", "Quantity", "Cost", "Sell Price"]
    COL_QTY = 3

    def __init__(self, rows: list[StockItem] | None = None):
        super().__init__()
        self._rows = rows or []

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        s = self._rows[index.row()]
        c = index.column()
        if role == Qt.DisplayRole:
            mapping = [
                s.item_name,
                s.item_type,
                s.item_color or "-",
                fmt_qty(s.quantity),
                fmt_money(s.cost),
                fmt_money(s.sell_price),
            ]
            return mapping[c] if c < len(mapping) else None
        if c == self.COL_QTY and role in (Qt.BackgroundRole, Qt.ForegroundRole):
            background, text = BAND_COLOURS[quantity_band(s.quantity)]
            return QColor(background if role == Qt.BackgroundRole else text)
        if role == Qt.TextAlignmentRole:
            if c == self.COL_QTY:
                return int(Qt.AlignCenter)
            if c >= 4:
                return int(Qt.AlignRight | Qt.AlignVCenter)
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section] if section < len(self.HEADERS) else None
        return super().headerData(section, orientation, role)

    def at(self, row: int) -> StockItem:
        return self._rows[row]

    def replace(self, rows: list[StockItem]):
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()

    def remove(self, item_id: str) -> bool:
        for i, s in enumerate(self._rows):
            if s.item_id == item_id:
                self.beginRemoveRows(QModelIndex(), i, i)
                del self._rows[i]
                self.endRemoveRows()
                return True
        return False
