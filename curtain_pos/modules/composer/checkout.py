"""
Submission policies over an OrderComposer.

FullOrderCheckout  : customer-identified order, partial payment allowed,
                     fixing date, no client-side stock check.
QuickSellCheckout  : immediate sale, payment must cover the grand total,
                     local stock mirror decremented after success.

Both follow the same contract:
  validate(...)      -> (ok, message)   local rules only; no network
  build_request(...) -> dict            JSON body for the backend
  submit(...)        -> SubmissionResult

A failed validation never issues a request. A backend failure leaves the
composer untouched so the operator can retry.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from ...api.errors import ApiError
from ...api.print_service import PrintService
from ...api.repositories.orders_repo import OrdersRepo
from ...api.repositories.stock_repo import StockRepo
from ...constants import ORDER_STATUS_PENDING, PAYMENT_TYPE_CASH
from ...utils.helpers import today_str
from ...utils.validators import non_empty
from .composer import OrderComposer

logger = logging.getLogger(__name__)

MISSING_CUSTOMER_MESSAGE = "Please enter customer name and mobile number!"


@dataclass
class Customer:
    name: str = ""
    mobile1: str = ""
    mobile2: str = ""
    address: str = ""
    description: str = ""
    fixing_date: str = ""    # ISO yyyy-mm-dd, optional

    def to_api(self) -> dict:
        d = asdict(self)
        d["fixingDate"] = d.pop("fixing_date")
        return d


@dataclass
class SubmissionResult:
    ok: bool
    message: str = ""
    data: dict = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


def insufficient_payment_message(grand_total: float) -> str:
    return f"Payment must be at least LKR {grand_total:.2f}"


class FullOrderCheckout:
    def __init__(self, composer: OrderComposer, orders: OrdersRepo):
        self.composer = composer
        self.orders = orders

    def validate(self, customer: Customer) -> tuple[bool, str]:
        if not non_empty(customer.name) or not non_empty(customer.mobile1):
            return False, MISSING_CUSTOMER_MESSAGE
        items, msg = self.composer.build_submission_items()
        if items is None:
            return False, msg
        return True, ""

    def build_request(self, customer: Customer, items: list[dict]) -> dict:
        totals = self.composer.compute_totals()
        payment = self.composer.payment
        return {
            "customer": customer.to_api(),
            "orderDetails": {
                "fixingDate": customer.fixing_date or today_str(),
                "orderStatus": ORDER_STATUS_PENDING,
            },
            "items": items,
            "billDetails": {
                "billTotal": totals.grand_total,
                "discount": totals.discount_percent,
                # nothing tendered means paid in full
                "paidAmount": payment or totals.grand_total,
                "paymentType": PAYMENT_TYPE_CASH,
            },
        }

    def submit(self, customer: Customer) -> SubmissionResult:
        ok, msg = self.validate(customer)
        if not ok:
            return SubmissionResult(False, msg)
        items, _ = self.composer.build_submission_items()
        body = self.build_request(customer, items)
        try:
            data = self.orders.create_full_order(body)
        except ApiError as e:
            logger.warning("Full order for %r rejected: %s", customer.name, e)
            return SubmissionResult(False, str(e))

        logger.info(
            "Created order for %s: %d item(s), total %.2f",
            customer.name, len(items), body["billDetails"]["billTotal"],
        )
        self.composer.reset()
        return SubmissionResult(True, "Order created successfully!", data=data)


class QuickSellCheckout:
    def __init__(
        self,
        composer: OrderComposer,
        orders: OrdersRepo,
        *,
        print_service: Optional[PrintService] = None,
        stock: Optional[StockRepo] = None,
    ):
        self.composer = composer
        self.orders = orders
        self.print_service = print_service
        self.stock = stock

    def validate(self) -> tuple[bool, str]:
        totals = self.composer.compute_totals()
        if self.composer.payment < totals.grand_total:
            return False, insufficient_payment_message(totals.grand_total)
        items, msg = self.composer.build_submission_items()
        if items is None:
            return False, msg
        return True, ""

    def build_request(self, items: list[dict]) -> dict:
        totals = self.composer.compute_totals()
        return {
            "items": items,
            "billTotal": totals.grand_total,
            "discount": totals.discount_percent,
            "paidAmount": self.composer.payment,
            "paymentType": PAYMENT_TYPE_CASH,
        }

    def submit(self) -> SubmissionResult:
        ok, msg = self.validate()
        if not ok:
            return SubmissionResult(False, msg)
        items, _ = self.composer.build_submission_items()
        body = self.build_request(items)
        try:
            data = self.orders.create_quick_sell(body)
        except ApiError as e:
            logger.warning("Quick sell rejected: %s", e)
            return SubmissionResult(False, str(e))

        bill_no = (data.get("bill") or {}).get("billNo") if isinstance(data, dict) else None
        logger.info("Quick sell saved as bill %s (total %.2f)", bill_no, body["billTotal"])
        result = SubmissionResult(True, "Quick sell saved.", data=data or {})

        self._decrement_mirror()
        self._print(bill_no, items, body["billTotal"], result)
        self._refresh_catalog()
        self.composer.reset()
        return result

    # ---- post-sale steps --------------------------------------------------

    def _decrement_mirror(self) -> None:
        for category, line in self.composer.selected_lines():
            self.composer.catalog.decrement(category, line.item_name, line.quantity)

    def _print(self, bill_no: Any, items: list[dict], grand_total: float, result: SubmissionResult) -> None:
        if self.print_service is None:
            return
        try:
            self.print_service.print_bill(bill_no, items, grand_total)
        except ApiError as e:
            logger.warning("Printing bill %s failed: %s", bill_no, e)
            result.warnings.append(f"Sale saved, but the bill could not be printed: {e}")

    def _refresh_catalog(self) -> None:
        if self.stock is None:
            return
        try:
            self.composer.catalog.replace(self.stock.list_stock())
        except ApiError as e:
            # keep the locally decremented counts
            logger.warning("Stock refresh after quick sell failed: %s", e)
