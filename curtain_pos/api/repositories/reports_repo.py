from __future__ import annotations

from ..client import ApiClient


class ReportsRepo:
    def __init__(self, client: ApiClient):
        self.client = client

    def for_date(self, day: str) -> dict:
        """
        GET /report/{YYYY-MM-DD}. The backend answers with the day's
        ``bills``, ``orderItems``, ``orders`` and ``expenses`` (plus staff
        sections this client does not show). Missing lists come back empty.
        """
        data = self.client.get(f"/report/{day}", fallback="Failed to fetch report for this date")
        if not isinstance(data, dict):
            data = {}
        report = dict(data)
        for key in ("bills", "orderItems", "orders", "expenses"):
            rows = data.get(key)
            report[key] = [r for r in rows if isinstance(r, dict)] if isinstance(rows, list) else []
        report.setdefault("date", day)
        return report
