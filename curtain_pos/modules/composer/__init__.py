"""
Order composer: line items per category, discount/payment entry, derived
totals and the two submission policies (full order, quick sell).

No Qt imports here; everything runs headless.
"""

from .calculations import Totals, allocate_discount, clamp_discount, compute_totals, status_from_paid
from .catalog import Catalog
from .checkout import (
    Customer,
    FullOrderCheckout,
    QuickSellCheckout,
    SubmissionResult,
    MISSING_CUSTOMER_MESSAGE,
    insufficient_payment_message,
)
from .composer import LineItem, OrderComposer, NO_ITEMS_MESSAGE

__all__ = [
    "Catalog",
    "Customer",
    "FullOrderCheckout",
    "LineItem",
    "MISSING_CUSTOMER_MESSAGE",
    "NO_ITEMS_MESSAGE",
    "OrderComposer",
    "QuickSellCheckout",
    "SubmissionResult",
    "Totals",
    "allocate_discount",
    "clamp_discount",
    "compute_totals",
    "insufficient_payment_message",
    "status_from_paid",
]
