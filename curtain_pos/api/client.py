from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .errors import ApiError

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin JSON-over-HTTP wrapper around a shared ``requests.Session``.

    One call == one request: no retries, no cancellation. A timeout is
    applied only when one was configured.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    # ---- verbs ------------------------------------------------------------

    def get(self, path: str, *, params: dict | None = None, fallback: str = "Request failed") -> Any:
        return self.request("GET", path, params=params, fallback=fallback)

    def post(self, path: str, body: dict, *, fallback: str = "Request failed") -> Any:
        return self.request("POST", path, json=body, fallback=fallback)

    def put(self, path: str, body: dict, *, fallback: str = "Request failed") -> Any:
        return self.request("PUT", path, json=body, fallback=fallback)

    def delete(self, path: str, *, fallback: str = "Request failed") -> Any:
        return self.request("DELETE", path, fallback=fallback)

    # ---- core -------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict | None = None,
        json: dict | None = None,
        fallback: str = "Request failed",
    ) -> Any:
        url = self.url(path)
        logger.debug("%s %s params=%r", method, url, params)
        try:
            resp = self.session.request(method, url, params=params, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(str(e) or fallback) from e

        data = self._decode(resp)
        if not resp.ok:
            message = fallback
            if isinstance(data, dict) and data.get("message"):
                message = str(data["message"])
            logger.warning("%s %s -> %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code, payload=data)
        return data

    @staticmethod
    def _decode(resp) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return None
