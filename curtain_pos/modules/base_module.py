from PySide6.QtCore import QObject
from PySide6.QtWidgets import QWidget


class BaseModule(QObject):
    """One screen in the main window's stack."""

    def get_widget(self) -> QWidget:
        raise NotImplementedError

    def refresh(self) -> None:
        """Re-fetch backend data when the screen is shown again."""
