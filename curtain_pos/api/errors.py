from __future__ import annotations

from typing import Any, Optional


class ApiError(Exception):
    """
    Raised for any failed backend call: a non-2xx response (message taken
    verbatim from the body's ``message`` field when present) or a transport
    error. Controllers catch this and show ``str(err)`` to the user.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self) -> str:
        return self.message
