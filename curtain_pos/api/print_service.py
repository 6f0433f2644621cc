from __future__ import annotations

import logging
from typing import Optional

import requests

from .errors import ApiError

logger = logging.getLogger(__name__)


class PrintService:
    """Client for the shop's local receipt-print endpoint."""

    def __init__(self, url: str, *, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def print_bill(self, bill_no, items: list[dict], grand_total: float) -> None:
        body = {"billNo": bill_no, "items": items, "grandTotal": grand_total}
        try:
            resp = self.session.post(self.url, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiError(f"Print service unreachable: {e}") from e
        if not resp.ok:
            raise ApiError(f"Print service returned {resp.status_code}", status_code=resp.status_code)
        logger.info("Sent bill %s to printer", bill_no)
