from __future__ import annotations

from ..config import API_BASE_URL, HTTP_TIMEOUT, PRINT_URL
from .client import ApiClient
from .errors import ApiError
from .print_service import PrintService


def get_client() -> ApiClient:
    """
    Returns the ApiClient every screen shares:
      - base URL from CURTAIN_POS_API_BASE_URL
      - one requests.Session (connection reuse)
      - timeout only when CURTAIN_POS_HTTP_TIMEOUT is set
    """
    return ApiClient(API_BASE_URL, timeout=HTTP_TIMEOUT)


def get_print_service() -> PrintService:
    return PrintService(PRINT_URL, timeout=HTTP_TIMEOUT)


__all__ = [
    "ApiClient",
    "ApiError",
    "PrintService",
    "get_client",
    "get_print_service",
]
