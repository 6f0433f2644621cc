from __future__ import annotations

from ..client import ApiClient
from ...utils.validators import try_parse_float


class ExpensesRepo:
    def __init__(self, client: ApiClient):
        self.client = client

    def today(self) -> tuple[list[dict], float]:
        """
        GET /expenses/today -> (rows, total).
        A response with ``success`` false counts as no expenses.
        """
        data = self.client.get("/expenses/today", fallback="Failed to fetch expenses") or {}
        if not isinstance(data, dict) or not data.get("success"):
            return [], 0.0
        ok, total = try_parse_float(data.get("total"))
        return list(data.get("data") or []), (total if ok else 0.0)
