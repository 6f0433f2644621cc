from __future__ import annotations

import logging
import sys
from importlib import import_module

from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QStackedWidget,
    QSizePolicy,
)
from PySide6.QtCore import Qt

from .api import get_client
from .api.client import ApiClient
from .constants import APP_NAME
from .modules.base_module import BaseModule
from .utils.loggers import get_logger
from .utils.ui_helpers import wrap_center

logger = logging.getLogger(__name__)

# (nav title, controller module, controller class)
SCREENS = [
    ("Dashboard", "curtain_pos.modules.dashboard.controller", "DashboardController"),
    ("New Order", "curtain_pos.modules.order.controller", "OrderController"),
    ("Quick Sell", "curtain_pos.modules.quick_sell.controller", "QuickSellController"),
    ("Order Details", "curtain_pos.modules.order_details.controller", "OrderDetailsController"),
    ("Inventory", "curtain_pos.modules.inventory.controller", "InventoryController"),
    ("Daily Report", "curtain_pos.modules.report.controller", "ReportController"),
]


def _lazy_get(name: str, attr: str):
    """Import a module by name and fetch an attribute from it, with a clear error if missing."""
    try:
        mod = import_module(name)
    except ImportError as e:
        raise ImportError(f"Failed to import module '{name}': {e}") from e
    try:
        return getattr(mod, attr)
    except AttributeError as e:
        raise ImportError(f"'{attr}' not found in module '{name}'.") from e


class MainWindow(QMainWindow):
    """
    Left nav + stacked pages. Each screen is built the first time it is
    shown; showing it again asks the controller to refresh its data.
    """

    def __init__(self, client: ApiClient, current_user: dict | None = None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(980, 600)

        self.client = client
        self.user = current_user

        central = QWidget(self)
        layout = QVBoxLayout(central)
        self.setCentralWidget(central)

        self.nav = QListWidget()
        self.nav.setFixedWidth(130)
        self.nav.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)

        self.stack = QStackedWidget()

        row = QWidget()
        row_lay = QHBoxLayout(row)
        row_lay.addWidget(self.nav)
        row_lay.addWidget(self.stack, 1)
        layout.addWidget(row, 1)

        # index -> screen info / loaded controller (None when loading failed)
        self.module_info: list[dict] = []
        self.modules: dict[int, BaseModule | None] = {}

        for title, module_path, class_name in SCREENS:
            self._add_module_deferred(title, module_path, class_name)

        if self.nav.count():
            self.nav.setCurrentRow(0)
            self._on_nav_item_changed(0)
        self.nav.currentRowChanged.connect(self._on_nav_item_changed)

    def _add_module_deferred(self, title: str, module_path: str, class_name: str):
        self.module_info.append({
            "title": title,
            "module_path": module_path,
            "class_name": class_name,
        })
        self.stack.addWidget(wrap_center(QLabel(f"Loading {title}...")))
        self.nav.addItem(QListWidgetItem(title))

    def _on_nav_item_changed(self, index: int):
        if index < 0 or index >= len(self.module_info):
            return
        if index in self.modules:
            module = self.modules[index]
            if module is not None:
                module.refresh()
        else:
            self._load_module(index)
        self.stack.setCurrentIndex(index)

    def _load_module(self, index: int):
        info = self.module_info[index]
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            Controller = _lazy_get(info["module_path"], info["class_name"])
            controller = Controller(self.client, current_user=self.user)
        except Exception:
            logger.exception("Failed to load %s", info["title"])
            self._replace_placeholder_widget(index, wrap_center(QLabel(f"{info['title']}\n\nLoading failed")))
            self.modules[index] = None
        else:
            self._replace_placeholder_widget(index, controller.get_widget())
            self.modules[index] = controller
        finally:
            QApplication.restoreOverrideCursor()

    def _replace_placeholder_widget(self, index: int, widget: QWidget):
        current = self.stack.widget(index)
        self.stack.removeWidget(current)
        current.deleteLater()
        self.stack.insertWidget(index, widget)

    def module(self, title: str) -> BaseModule | None:
        for i, info in enumerate(self.module_info):
            if info["title"] == title:
                return self.modules.get(i)
        return None


def main():
    get_logger()

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    client = get_client()
    logger.info("Starting %s against %s", APP_NAME, client.base_url)

    win = MainWindow(client)
    win.resize(1200, 720)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
