from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..client import ApiClient
from ...utils.validators import try_parse_float


def _num(value, default: float = 0.0) -> float:
    ok, val = try_parse_float(value)
    return val if ok else default


@dataclass
class StockItem:
    item_id: str
    item_name: str
    item_type: str
    quantity: float
    cost: float
    sell_price: float
    item_color: str = ""

    @classmethod
    def from_api(cls, row: dict) -> "StockItem":
        return cls(
            item_id=str(row.get("_id") or row.get("id") or ""),
            item_name=str(row.get("itemName") or ""),
            item_type=str(row.get("itemType") or ""),
            quantity=max(0.0, _num(row.get("quantity"))),
            cost=_num(row.get("cost")),
            sell_price=_num(row.get("sellPrice")),
            item_color=str(row.get("itemColor") or ""),
        )


class StockRepo:
    """Backend stock list: GET /stock (optionally by itemType), DELETE /stock/{id}."""

    def __init__(self, client: ApiClient):
        self.client = client

    def list_stock(self, item_type: Optional[str] = None) -> list[StockItem]:
        params = {"itemType": item_type} if item_type else None
        rows = self.client.get("/stock", params=params, fallback="Failed to fetch stock") or []
        return [StockItem.from_api(r) for r in rows if isinstance(r, dict)]

    def delete_stock(self, item_id: str) -> dict:
        return self.client.delete(f"/stock/{item_id}", fallback="Failed to delete item") or {}
