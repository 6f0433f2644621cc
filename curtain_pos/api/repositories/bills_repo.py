from __future__ import annotations

from ..client import ApiClient
from ...constants import PAYMENT_TYPE_CASH


class BillsRepo:
    def __init__(self, client: ApiClient):
        self.client = client

    def list_bills(self) -> list[dict]:
        return self.client.get("/bills", fallback="Failed to fetch bills") or []

    def list_order_items(self) -> list[dict]:
        return self.client.get("/order-items", fallback="Failed to fetch order items") or []

    def add_payment(
        self,
        order_id: str,
        paid_amount: float,
        bill_total: float,
        payment_type: str = PAYMENT_TYPE_CASH,
    ) -> dict:
        """
        Record a follow-up payment against an order. The backend responds
        with ``{"order": {...balance, paymentStatus}, "bill": {...}}``.
        """
        body = {
            "orderId": order_id,
            "paidAmount": float(paid_amount),
            "billTotal": bill_total,
            "discount": 0,
            "paymentType": payment_type,
        }
        return self.client.post("/bills/payment", body, fallback="Failed to add payment") or {}

    def cancel_bill(self, bill_id: str) -> dict:
        return self.client.delete(f"/bills/cancel/{bill_id}", fallback="Failed to delete bill") or {}
