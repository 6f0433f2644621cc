# tests/test_dashboard_ui.py
from datetime import datetime

import pytest

pytest.importorskip("PySide6")

from curtain_pos.modules.dashboard.controller import DashboardController


@pytest.fixture()
def backend(session):
    now = datetime.now().isoformat(timespec="seconds")
    session.ok("GET", "/orders/details", [
        {"_id": "o1", "orderStatus": "pending", "orderAmount": 4050, "balance": 1050, "createdAt": now},
    ])
    session.ok("GET", "/bills", [{"_id": "b1", "paidAmount": 3000, "discount": 0, "createdAt": now}])
    session.ok("GET", "/order-items", [
        {"billId": "b1", "itemName": "Velvet Red", "itemQuantity": 2, "itemRate": 1500, "costPrice": 900},
    ])
    session.ok("GET", "/expenses/today", {"success": True, "data": [{"name": "Tea", "amount": 250}], "total": 250})
    return session


def test_dashboard_renders_metrics(qtbot, client, backend):
    ctrl = DashboardController(client)
    qtbot.addWidget(ctrl.get_widget())

    cards = ctrl.view.cards
    assert cards["daily_sell"].value() == "3,000.00"
    assert cards["daily_profit"].value() == "1,200.00"
    assert cards["net_daily_profit"].value() == "950.00"
    assert cards["today_orders"].value() == "1"
    assert cards["pending_orders"].value() == "1"
    # every stock row under 20, whatever its itemType
    assert ctrl.metrics.low_stock_count == 4
    assert ctrl.view.tbl_expenses.rowCount() == 2   # row + total


def test_dashboard_fetch_failure_keeps_previous_figures(qtbot, client, backend):
    ctrl = DashboardController(client)
    qtbot.addWidget(ctrl.get_widget())
    backend.fail("GET", "/bills", 500, "Failed to fetch bills")

    assert ctrl.refresh() is False
    assert ctrl.view.lab_status.text() == "Could not load dashboard: Failed to fetch bills"
    assert ctrl.view.cards["daily_sell"].value() == "3,000.00"
