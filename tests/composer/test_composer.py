# tests/composer/test_composer.py
import pytest

from curtain_pos.constants import CATEGORY_ACCESSORIES, CATEGORY_CURTAINS, CATEGORY_POLES
from curtain_pos.modules.composer import (
    NO_ITEMS_MESSAGE,
    OrderComposer,
    clamp_discount,
    compute_totals,
)


@pytest.fixture()
def composer(catalog):
    return OrderComposer(catalog, rows_per_category=1)


@pytest.fixture()
def quick(catalog):
    return OrderComposer(catalog, enforce_stock=True)


def test_catalog_partitions_by_item_type_and_skips_unknown(catalog):
    assert [s.item_name for s in catalog.options(CATEGORY_CURTAINS)] == ["Velvet Red", "Blue Sheer"]
    assert [s.item_name for s in catalog.options(CATEGORY_POLES)] == ["Brass Pole"]
    assert [s.item_name for s in catalog.options(CATEGORY_ACCESSORIES)] == ["Hooks"]
    assert catalog.find(CATEGORY_CURTAINS, "Loose Fabric") is None
    # sold-out items are hidden when asked
    assert [s.item_name for s in catalog.options(CATEGORY_CURTAINS, in_stock_only=True)] == ["Velvet Red"]


def test_reset_creates_rows_per_category(catalog):
    c = OrderComposer(catalog, rows_per_category=1)
    assert all(len(c.rows(cat)) == 1 for cat in (CATEGORY_CURTAINS, CATEGORY_POLES, CATEGORY_ACCESSORIES))
    q = OrderComposer(catalog)
    assert q.rows(CATEGORY_CURTAINS) == []


def test_velvet_red_example(composer):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    applied, msg = composer.set_quantity(CATEGORY_CURTAINS, 0, "3")
    assert applied and msg == ""

    line = composer.rows(CATEGORY_CURTAINS)[0]
    assert line.line_total == 4500

    composer.set_discount("10")
    composer.set_payment("4050")
    t = composer.compute_totals()
    assert t.sub_total == 4500
    assert t.discount_amount == 450
    assert t.grand_total == 4050
    assert t.balance == 0

    items, msg = composer.build_submission_items()
    assert msg == ""
    assert items == [{
        "itemName": "Velvet Red",
        "itemQuantity": 3,
        "itemRate": 1500,
        "costPrice": 900,
        "total": 4500,
    }]


def test_select_item_snapshots_rate_and_resets_quantity(composer):
    composer.select_item(CATEGORY_POLES, 0, "Brass Pole")
    composer.set_quantity(CATEGORY_POLES, 0, 4)
    composer.select_item(CATEGORY_POLES, 0, "Brass Pole")
    line = composer.rows(CATEGORY_POLES)[0]
    assert (line.rate, line.quantity) == (2000, 1)

    # unknown name -> rate 0
    composer.select_item(CATEGORY_POLES, 0, "Ghost")
    assert composer.rows(CATEGORY_POLES)[0].rate == 0


def test_discount_is_stored_raw_but_clamped_in_math(composer):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    composer.set_discount("150")
    assert composer.discount == 150
    t = composer.compute_totals()
    assert t.discount_percent == 100
    assert t.discount_amount == t.sub_total
    assert t.grand_total == 0

    composer.set_discount("-5")
    assert composer.discount == -5
    assert composer.compute_totals().discount_amount == 0


@pytest.mark.parametrize("raw", ["abc", "", None, "%5"])
def test_bad_discount_becomes_zero(composer, raw):
    composer.set_discount(raw)
    assert composer.discount == 0


@pytest.mark.parametrize("raw, expected", [("2.5", 2), ("12.5", 12), (" 7%", 7), ("-3.9", -3), (12.9, 12)])
def test_discount_keeps_the_leading_integer(composer, raw, expected):
    composer.set_discount(raw)
    assert composer.discount == expected


def test_decimal_discount_is_truncated_in_totals(composer):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    composer.set_quantity(CATEGORY_CURTAINS, 0, "2")
    composer.set_discount("12.5")
    t = composer.compute_totals()
    assert t.discount_amount == 360
    assert t.grand_total == 2640


@pytest.mark.parametrize("raw", ["abc", "", "-100", "nan", "inf"])
def test_bad_payment_becomes_zero(composer, raw):
    composer.set_payment(raw)
    assert composer.payment == 0.0


def test_balance_is_not_clamped(composer):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    composer.set_payment("2000")
    assert composer.compute_totals().balance == -500


@pytest.mark.parametrize("raw", ["0", "-2", "abc", "", "1.5"])
def test_invalid_quantity_leaves_line_unchanged(composer, raw):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    composer.set_quantity(CATEGORY_CURTAINS, 0, "2")
    applied, msg = composer.set_quantity(CATEGORY_CURTAINS, 0, raw)
    assert (applied, msg) == (False, "")
    assert composer.rows(CATEGORY_CURTAINS)[0].quantity == 2


def test_order_mode_allows_quantity_above_stock(composer):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    applied, _ = composer.set_quantity(CATEGORY_CURTAINS, 0, "50")
    assert applied
    assert composer.rows(CATEGORY_CURTAINS)[0].quantity == 50


def test_quick_sell_rejects_quantity_above_stock(quick):
    quick.add_row(CATEGORY_CURTAINS)
    quick.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    applied, msg = quick.set_quantity(CATEGORY_CURTAINS, 0, "6")
    assert not applied
    assert msg == "Cannot sell more than available stock (5)"
    assert quick.rows(CATEGORY_CURTAINS)[0].quantity == 1

    applied, msg = quick.set_quantity(CATEGORY_CURTAINS, 0, "5")
    assert applied and msg == ""


def test_edits_on_missing_rows_are_ignored(composer):
    composer.select_item(CATEGORY_CURTAINS, 7, "Velvet Red")
    assert composer.set_quantity(CATEGORY_CURTAINS, 7, "2") == (False, "")
    composer.remove_row(CATEGORY_CURTAINS, 7)
    assert len(composer.rows(CATEGORY_CURTAINS)) == 1


def test_remove_row_updates_totals(composer):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    composer.add_row(CATEGORY_CURTAINS)
    composer.select_item(CATEGORY_CURTAINS, 1, "Blue Sheer")
    assert composer.compute_totals().sub_total == 2300
    composer.remove_row(CATEGORY_CURTAINS, 0)
    assert composer.compute_totals().sub_total == 800


def test_submission_items_skip_empty_rows_across_categories(composer):
    composer.add_row(CATEGORY_CURTAINS)
    composer.select_item(CATEGORY_CURTAINS, 1, "Velvet Red")
    composer.select_item(CATEGORY_ACCESSORIES, 0, "Hooks")
    composer.set_quantity(CATEGORY_ACCESSORIES, 0, "20")

    items, _ = composer.build_submission_items()
    assert [i["itemName"] for i in items] == ["Velvet Red", "Hooks"]
    assert items[1]["total"] == 300
    assert items[1]["costPrice"] == 5


def test_no_items_message_when_every_row_is_empty(composer):
    assert composer.build_submission_items() == (None, NO_ITEMS_MESSAGE)


def test_cost_price_defaults_to_zero_when_item_left_catalog(composer, catalog):
    composer.select_item(CATEGORY_CURTAINS, 0, "Velvet Red")
    catalog.replace([])
    items, _ = composer.build_submission_items()
    assert items[0]["costPrice"] == 0
    assert items[0]["itemRate"] == 1500


def test_compute_totals_helpers():
    assert clamp_discount(-1) == 0
    assert clamp_discount(101) == 100
    t = compute_totals([100.0, 50.0, 25.0], 20, 100.0)
    assert (t.sub_total, t.discount_amount, t.grand_total, t.balance) == (175.0, 35.0, 140.0, 40.0)


def test_decrement_mirror(catalog):
    catalog.decrement(CATEGORY_CURTAINS, "Velvet Red", 2)
    assert catalog.find(CATEGORY_CURTAINS, "Velvet Red").quantity == 3
    # unknown names are ignored
    catalog.decrement(CATEGORY_CURTAINS, "Nope", 2)
    assert [s.quantity for s in catalog.options(CATEGORY_CURTAINS)] == [3, 0]
