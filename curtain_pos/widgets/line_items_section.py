from PySide6.QtWidgets import (
    QGroupBox, QVBoxLayout, QHBoxLayout, QTableWidget, QTableWidgetItem,
    QComboBox, QPushButton, QAbstractItemView, QHeaderView,
)
from PySide6.QtCore import Qt, Signal

from ..utils.helpers import fmt_money


class LineItemsSection(QGroupBox):
    """
    One category's rows (Curtains / Poles / Accessories).

    The section holds no state of its own: it renders the rows it is given
    and reports edits through signals. The owning controller applies them
    to the composer and re-renders.
    """

    COLS = ["Item", "Quantity", "Rate (LKR)", "Line Total (LKR)", ""]
    COL_ITEM, COL_QTY, COL_RATE, COL_TOTAL, COL_DEL = range(5)

    itemChosen = Signal(int, str)        # row, item name ("" = none)
    quantityEdited = Signal(int, str)    # row, raw text
    removeRequested = Signal(int)
    addRequested = Signal()

    def __init__(self, title: str, parent=None):
        super().__init__(title, parent)
        if title.endswith("ies"):
            self.singular = title[:-3] + "y"
        else:
            self.singular = title[:-1] if title.endswith("s") else title

        self.tbl = QTableWidget(0, len(self.COLS))
        self.tbl.setHorizontalHeaderLabels(self.COLS)
        self.tbl.verticalHeader().setVisible(False)
        self.tbl.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.tbl.setEditTriggers(QAbstractItemView.AllEditTriggers)
        header = self.tbl.horizontalHeader()
        header.setSectionResizeMode(self.COL_ITEM, QHeaderView.Stretch)
        self.tbl.setColumnWidth(self.COL_QTY, 80)
        self.tbl.setColumnWidth(self.COL_RATE, 100)
        self.tbl.setColumnWidth(self.COL_TOTAL, 120)
        self.tbl.setColumnWidth(self.COL_DEL, 40)

        self.btn_add = QPushButton(f"+ Add {self.singular}")
        self.btn_add.clicked.connect(self.addRequested)

        lay = QVBoxLayout(self)
        lay.addWidget(self.tbl, 1)
        bar = QHBoxLayout()
        bar.addWidget(self.btn_add)
        bar.addStretch(1)
        lay.addLayout(bar)

        self.tbl.cellChanged.connect(self._cell_changed)

    # ---- rendering --------------------------------------------------------

    def set_rows(self, rows, options) -> None:
        """
        rows: list[LineItem]; options: list[StockItem] offered in each combo.
        """
        self.tbl.blockSignals(True)
        self.tbl.setRowCount(0)
        for r, line in enumerate(rows):
            self.tbl.insertRow(r)

            cmb = QComboBox()
            cmb.addItem(f"Select {self.singular}", "")
            for o in options:
                cmb.addItem(f"{o.item_name} ({o.quantity:g})", o.item_name)
            if line.item_name and cmb.findData(line.item_name) < 0:
                # selected earlier but no longer offered (e.g. sold out)
                cmb.addItem(line.item_name, line.item_name)
            cmb.setCurrentIndex(max(0, cmb.findData(line.item_name)))
            cmb.currentIndexChanged.connect(
                lambda _i, row=r, c=cmb: self.itemChosen.emit(row, c.currentData() or "")
            )
            self.tbl.setCellWidget(r, self.COL_ITEM, cmb)

            qty = QTableWidgetItem(str(line.quantity))
            qty.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.tbl.setItem(r, self.COL_QTY, qty)

            for col, value in ((self.COL_RATE, line.rate), (self.COL_TOTAL, line.line_total)):
                it = QTableWidgetItem(fmt_money(value))
                it.setFlags(Qt.ItemIsSelectable | Qt.ItemIsEnabled)
                it.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                self.tbl.setItem(r, col, it)

            btn = QPushButton("✕")
            btn.clicked.connect(lambda _=False, row=r: self.removeRequested.emit(row))
            self.tbl.setCellWidget(r, self.COL_DEL, btn)
        self.tbl.blockSignals(False)

    # ---- accessors used by controllers/tests -------------------------------

    def combo(self, row: int) -> QComboBox:
        return self.tbl.cellWidget(row, self.COL_ITEM)

    def quantity_text(self, row: int) -> str:
        return self.tbl.item(row, self.COL_QTY).text()

    def line_total_text(self, row: int) -> str:
        return self.tbl.item(row, self.COL_TOTAL).text()

    def row_count(self) -> int:
        return self.tbl.rowCount()

    def _cell_changed(self, row: int, col: int):
        if col != self.COL_QTY:
            return
        it = self.tbl.item(row, col)
        self.quantityEdited.emit(row, it.text() if it else "")
