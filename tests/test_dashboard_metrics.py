# tests/test_dashboard_metrics.py
from datetime import date

import pytest

from curtain_pos.api.repositories.stock_repo import StockItem
from curtain_pos.modules.dashboard.metrics import (
    DashboardMetrics,
    bill_id_of,
    bill_profit,
    daily_profit,
    daily_sell,
    item_total,
)

DAY = date(2025, 3, 10)
TODAY = "2025-03-10T12:00:00"
YESTERDAY = "2025-03-09T18:30:00"


def _item(bill, name, qty, rate, cost, total=None):
    row = {"billId": bill, "itemName": name, "itemQuantity": qty, "itemRate": rate, "costPrice": cost}
    if total is not None:
        row["total"] = total
    return row


def test_bill_id_accepts_string_or_populated_object():
    assert bill_id_of({"billId": "b1"}) == "b1"
    assert bill_id_of({"billId": {"_id": "b2", "billNo": 4}}) == "b2"
    assert bill_id_of({"billId": None}) is None
    assert bill_id_of({}) is None


def test_item_total_prefers_total_field():
    assert item_total({"total": 90, "itemRate": 10, "itemQuantity": 3}) == 90
    assert item_total({"itemRate": 10, "itemQuantity": 3}) == 30
    assert item_total({"itemRate": "x", "itemQuantity": 3}) == 0


def test_bill_profit_allocates_discount_by_share():
    bill = {"_id": "b1", "discount": 10}
    items = [
        _item("b1", "Velvet Red", 3, 1500, 900, total=4500),   # share 0.9
        _item({"_id": "b1"}, "Hooks", 20, 25, 5),              # 500, share 0.1
        _item("other", "Brass Pole", 1, 2000, 1200),
    ]
    # sub 5000, discount 500 -> 450 / 50
    # (4500 - 450 - 2700) + (500 - 50 - 100) = 1350 + 350
    assert bill_profit(bill, items) == pytest.approx(1700)


def test_bill_profit_without_items_or_subtotal():
    assert bill_profit({"_id": "b9", "discount": 10}, [_item("b1", "x", 1, 1, 1)]) == 0
    zero = [_item("b1", "Free", 2, 0, 3)]
    assert bill_profit({"_id": "b1", "discount": 50}, zero) == -6


def test_bill_discount_is_not_clamped():
    items = [_item("b1", "Velvet Red", 1, 1000, 600)]
    assert bill_profit({"_id": "b1", "discount": 150}, items) == pytest.approx(1000 - 1500 - 600)


def test_daily_figures_only_count_today():
    bills = [
        {"_id": "b1", "paidAmount": 4050, "discount": 10, "createdAt": TODAY},
        {"_id": "b2", "paidAmount": "1000", "discount": 0, "createdAt": YESTERDAY},
        {"_id": "b3", "paidAmount": None, "discount": 0},
    ]
    items = [_item("b1", "Velvet Red", 3, 1500, 900), _item("b2", "Hooks", 10, 15, 5)]
    assert daily_sell(bills, DAY) == 4050
    assert daily_profit(bills, items, DAY) == pytest.approx(4050 - 2700)


def test_dashboard_metrics_compute():
    orders = [
        {"_id": "o1", "orderStatus": "pending", "orderAmount": 4050, "balance": 1050, "createdAt": TODAY},
        {"_id": "o2", "orderStatus": "completed", "orderAmount": 2000, "balance": 0, "createdAt": YESTERDAY},
        {"_id": "o3", "orderStatus": "pending", "orderAmount": "bad", "balance": None},
    ]
    stock = [
        StockItem("s1", "Velvet Red", "Curtain", 5, 900, 1500),
        StockItem("s2", "Brass Pole", "Poles", 20, 1200, 2000),
        StockItem("s3", "Hooks", "Other Accessories", 19, 5, 15),
    ]
    bills = [{"_id": "b1", "paidAmount": 3000, "discount": 0, "createdAt": TODAY}]
    items = [_item("b1", "Velvet Red", 2, 1500, 900)]

    m = DashboardMetrics.compute(
        orders=orders, stock=stock, bills=bills, order_items=items,
        expenses=[{"name": "Tea", "amount": 250}], expense_total=250.0, day=DAY,
    )

    assert m.daily_sell == 3000
    assert m.daily_profit == 1200
    assert m.daily_expenses == 250
    assert m.net_daily_profit == 950
    assert m.today_orders == 1
    assert m.pending_orders == 2
    assert m.total_sales == 6050
    assert m.pending_balance == 1050
    assert [s.item_name for s in m.low_stock_items] == ["Velvet Red", "Hooks"]
    assert m.low_stock_count == 2
