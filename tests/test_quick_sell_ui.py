# tests/test_quick_sell_ui.py
import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt

from curtain_pos.constants import CATEGORY_CURTAINS
from curtain_pos.modules.quick_sell.controller import QuickSellController


@pytest.fixture()
def screen(qtbot, client, printer, messages):
    service, _ = printer
    ctrl = QuickSellController(client, print_service=service)
    qtbot.addWidget(ctrl.get_widget())
    return ctrl


def _add_curtain(qtbot, screen, name="Velvet Red", qty="3"):
    sec = screen.view.section(CATEGORY_CURTAINS)
    qtbot.mouseClick(sec.btn_add, Qt.LeftButton)
    row = sec.row_count() - 1
    cmb = sec.combo(row)
    cmb.setCurrentIndex(cmb.findData(name))
    sec.tbl.item(row, sec.COL_QTY).setText(qty)
    return sec, row


def test_starts_empty_and_hides_sold_out_items(qtbot, screen):
    sec = screen.view.section(CATEGORY_CURTAINS)
    assert sec.row_count() == 0
    qtbot.mouseClick(sec.btn_add, Qt.LeftButton)
    cmb = sec.combo(0)
    assert cmb.findData("Velvet Red") > 0
    assert cmb.findData("Blue Sheer") < 0
    assert cmb.itemText(cmb.findData("Velvet Red")) == "Velvet Red (5)"


def test_over_stock_quantity_is_refused(qtbot, screen, messages):
    sec, row = _add_curtain(qtbot, screen, qty="9")
    assert messages.texts("warn") == ["Cannot sell more than available stock (5)"]
    assert sec.quantity_text(row) == "1"


def test_insufficient_payment_blocks_sale(qtbot, screen, session, messages):
    _add_curtain(qtbot, screen)
    qtbot.keyClicks(screen.view.summary.txt_discount, "10")
    qtbot.keyClicks(screen.view.summary.txt_payment, "4000")

    qtbot.mouseClick(screen.view.summary.btn_save, Qt.LeftButton)

    assert messages.texts("warn") == ["Payment must be at least LKR 4050.00"]
    assert session.calls_to("POST", "/orders/quick-sell") == []


def test_sale_prints_and_resets(qtbot, screen, session, printer, messages, stock_rows):
    _, print_session = printer
    session.ok("POST", "/orders/quick-sell", {"bill": {"billNo": 1042}})
    sold = [dict(r) for r in stock_rows]
    sold[0]["quantity"] = 2
    session.ok("GET", "/stock", sold)

    sec, _ = _add_curtain(qtbot, screen)
    qtbot.keyClicks(screen.view.summary.txt_payment, "4500")
    qtbot.mouseClick(screen.view.summary.btn_save, Qt.LeftButton)

    assert messages.texts("info") == ["Quick sell saved. Bill No: 1042"]
    assert print_session.calls[0].json["billNo"] == 1042
    assert sec.row_count() == 0
    assert screen.view.summary.txt_payment.text() == ""
    assert screen.catalog.find(CATEGORY_CURTAINS, "Velvet Red").quantity == 2

    qtbot.mouseClick(sec.btn_add, Qt.LeftButton)
    cmb = sec.combo(0)
    assert cmb.itemText(cmb.findData("Velvet Red")) == "Velvet Red (2)"


def test_print_failure_is_reported_after_save(qtbot, screen, session, printer, messages, fake_response):
    _, print_session = printer
    print_session.route("POST", "http://printer.test/print", fake_response(500))
    session.ok("POST", "/orders/quick-sell", {"bill": {"billNo": 8}})

    _add_curtain(qtbot, screen, qty="1")
    qtbot.keyClicks(screen.view.summary.txt_payment, "1500")
    qtbot.mouseClick(screen.view.summary.btn_save, Qt.LeftButton)

    assert messages.texts("info") == ["Quick sell saved. Bill No: 8"]
    (warning,) = messages.texts("warn")
    assert "could not be printed" in warning


def test_backend_rejection_keeps_the_sale_on_screen(qtbot, screen, session, messages):
    session.fail("POST", "/orders/quick-sell", 400, "Insufficient stock for Velvet Red")
    sec, row = _add_curtain(qtbot, screen)
    qtbot.keyClicks(screen.view.summary.txt_payment, "4500")
    qtbot.mouseClick(screen.view.summary.btn_save, Qt.LeftButton)

    assert messages.texts("warn") == ["Insufficient stock for Velvet Red"]
    assert sec.row_count() == 1
    assert sec.quantity_text(row) == "3"
    assert screen.view.summary.txt_payment.text() == "4500"
