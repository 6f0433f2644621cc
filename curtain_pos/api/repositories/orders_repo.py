from __future__ import annotations

from ..client import ApiClient


class OrdersRepo:
    """
    Orders endpoints.

    Create:
      - full order  -> POST /orders/full        (customer + fixing date + first bill)
      - quick sell  -> POST /orders/quick-sell  (bill only; response carries bill.billNo)

    Read / lifecycle:
      - list / get  -> GET /orders/details[/<id>]
      - status      -> PUT /orders/update-status/<id>
      - cancel      -> DELETE /orders/<id>/cancel
    """

    def __init__(self, client: ApiClient):
        self.client = client

    # ---- create -----------------------------------------------------------

    def create_full_order(self, body: dict) -> dict:
        return self.client.post("/orders/full", body, fallback="Failed to create order") or {}

    def create_quick_sell(self, body: dict) -> dict:
        return self.client.post("/orders/quick-sell", body, fallback="Failed to save quick sell") or {}

    # ---- read -------------------------------------------------------------

    def list_orders(self) -> list[dict]:
        return self.client.get("/orders/details", fallback="Failed to fetch orders") or []

    def get_order(self, order_id: str) -> dict:
        return self.client.get(f"/orders/details/{order_id}", fallback="Failed to fetch order") or {}

    # ---- lifecycle --------------------------------------------------------

    def update_status(self, order_id: str, status: str) -> dict:
        return self.client.put(
            f"/orders/update-status/{order_id}",
            {"status": status},
            fallback="Failed to update status",
        ) or {}

    def cancel_order(self, order_id: str) -> dict:
        return self.client.delete(f"/orders/{order_id}/cancel", fallback="Failed to cancel order") or {}
