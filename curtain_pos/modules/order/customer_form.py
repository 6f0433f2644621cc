from PySide6.QtWidgets import QGroupBox, QGridLayout, QLabel, QLineEdit, QDateEdit, QCheckBox, QHBoxLayout
from PySide6.QtCore import QDate

from ..composer.checkout import Customer
from ...utils.helpers import today_str


class CustomerForm(QGroupBox):
    """Customer details for a full order. Name and Mobile 1 are required."""

    def __init__(self, parent=None):
        super().__init__("Customer Details", parent)

        self.edt_name = QLineEdit()
        self.edt_mobile1 = QLineEdit()
        self.edt_mobile2 = QLineEdit()
        self.edt_address = QLineEdit()
        self.edt_description = QLineEdit()

        self.chk_fixing = QCheckBox("Set")
        self.date_fixing = QDateEdit()
        self.date_fixing.setCalendarPopup(True)
        self.date_fixing.setDisplayFormat("yyyy-MM-dd")
        self.date_fixing.setDate(QDate.fromString(today_str(), "yyyy-MM-dd"))
        self.date_fixing.setEnabled(False)
        self.chk_fixing.toggled.connect(self.date_fixing.setEnabled)

        grid = QGridLayout(self)

        def add(row: int, col: int, label: str, widget):
            grid.addWidget(QLabel(label), row, col * 2)
            grid.addWidget(widget, row, col * 2 + 1)

        add(0, 0, "Name *", self.edt_name)
        add(0, 1, "Mobile 1 *", self.edt_mobile1)
        add(1, 0, "Mobile 2", self.edt_mobile2)
        add(1, 1, "Address", self.edt_address)
        add(2, 0, "Description", self.edt_description)

        fixing = QHBoxLayout()
        fixing.addWidget(self.chk_fixing)
        fixing.addWidget(self.date_fixing, 1)
        grid.addWidget(QLabel("Fixing Date"), 2, 2)
        grid.addLayout(fixing, 2, 3)

    def customer(self) -> Customer:
        return Customer(
            name=self.edt_name.text().strip(),
            mobile1=self.edt_mobile1.text().strip(),
            mobile2=self.edt_mobile2.text().strip(),
            address=self.edt_address.text().strip(),
            description=self.edt_description.text().strip(),
            fixing_date=self.date_fixing.date().toString("yyyy-MM-dd") if self.chk_fixing.isChecked() else "",
        )

    def clear(self) -> None:
        for w in (self.edt_name, self.edt_mobile1, self.edt_mobile2, self.edt_address, self.edt_description):
            w.clear()
        self.chk_fixing.setChecked(False)
        self.date_fixing.setDate(QDate.fromString(today_str(), "yyyy-MM-dd"))
