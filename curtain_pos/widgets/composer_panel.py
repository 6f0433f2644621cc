from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QSplitter
from PySide6.QtCore import Qt

from ..constants import CATEGORIES, CATEGORY_TITLES
from .bill_summary import BillSummary
from .line_items_section import LineItemsSection


class ComposerPanel(QWidget):
    """
    Left: one LineItemsSection per category (+ optional extra widget below).
    Right: BillSummary.
    """

    def __init__(self, title: str, parent=None, *, extra: QWidget | None = None):
        super().__init__(parent)

        heading = QLabel(title)
        heading.setStyleSheet("font-size: 18px; font-weight: bold;")
        self.lab_status = QLabel("")
        self.lab_status.setStyleSheet("color: #CC0000;")
        self.lab_status.setVisible(False)

        self.sections: dict[str, LineItemsSection] = {}
        left = QWidget()
        left_lay = QVBoxLayout(left)
        for c in CATEGORIES:
            sec = LineItemsSection(CATEGORY_TITLES[c])
            self.sections[c] = sec
            left_lay.addWidget(sec)
        if extra is not None:
            left_lay.addWidget(extra)
        left_lay.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(left)

        self.summary = BillSummary()

        splitter = QSplitter(Qt.Horizontal)
        splitter.addWidget(scroll)
        splitter.addWidget(self.summary)
        splitter.setSizes([750, 250])  # ~3:1 like the bill screens

        root = QVBoxLayout(self)
        top = QHBoxLayout()
        top.addWidget(heading)
        top.addStretch(1)
        top.addWidget(self.lab_status)
        root.addLayout(top)
        root.addWidget(splitter, 1)

    def section(self, category: str) -> LineItemsSection:
        return self.sections[category]

    def set_status(self, text: str) -> None:
        self.lab_status.setText(text)
        self.lab_status.setVisible(bool(text))
