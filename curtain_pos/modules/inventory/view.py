from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QPushButton

from ...constants import ITEM_TYPES
from ...widgets.table_view import TableView


class InventoryView(QWidget):
    """
    Stock list:
      - Type filter (All / Curtain / Poles / Other Accessories)
      - Table with quantity colouring; Delete removes the selected item
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)

        root.addWidget(QLabel("<h2>Stock Items</h2>"))

        bar = QHBoxLayout()
        bar.addStretch(1)
        bar.addWidget(QLabel("Type:"))
        self.cmb_type = QComboBox()
        self.cmb_type.addItem("All", "")
        for t in ITEM_TYPES:
            self.cmb_type.addItem(t, t)
        bar.addWidget(self.cmb_type)

        self.btn_delete = QPushButton("Delete")
        self.btn_delete.setStyleSheet("color: #CC0000;")
        self.btn_reload = QPushButton("Reload")
        bar.addWidget(self.btn_delete)
        bar.addWidget(self.btn_reload)
        root.addLayout(bar)

        self.lab_empty = QLabel("")
        self.lab_empty.setVisible(False)
        root.addWidget(self.lab_empty)

        self.table = TableView()
        root.addWidget(self.table, 1)

    def item_type(self) -> str:
        return self.cmb_type.currentData() or ""

    def set_empty(self, empty: bool):
        self.lab_empty.setText(f"No stock available for {self.cmb_type.currentText()}.")
        self.lab_empty.setVisible(empty)
