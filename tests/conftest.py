# tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - pytest-qt owns QApplication (use qapp/qtbot fixtures)
# - No test touches the network: ApiClient runs over FakeSession, which
#   answers from a per-test route table and records every call
# - Message boxes are replaced by the `messages` recorder
# - Silence benign Qt signal warnings
# ---------------------------------------------------------------------

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

import pytest
import requests

# headless unless the caller chose a platform
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6 import QtCore  # noqa: E402

from curtain_pos.api.client import ApiClient
from curtain_pos.api.print_service import PrintService
from curtain_pos.api.repositories.stock_repo import StockItem
from curtain_pos.modules.composer import Catalog

BASE_URL = "http://api.test/api"
PRINT_URL = "http://printer.test/print"


# ---------- Qt: let pytest-qt own the app ----------
@pytest.fixture(scope="session")
def app(qapp):  # alias to match code that expects an `app` fixture
    return qapp


# ---------- Silence benign Qt warnings ----------
_BENIGN_QT_PATTERNS = [
    r"^QObject::connect: .* already connected",
    r"^QObject::disconnect: Unexpected null parameter",
    r"^QBasicTimer::stop: Failed\. Platform timer not running\.",
]

@pytest.fixture(autouse=True, scope="session")
def _silence_benign_qt():
    """Filter common harmless Qt messages during tests."""
    original = QtCore.qInstallMessageHandler(None)
    rx = [re.compile(p) for p in _BENIGN_QT_PATTERNS]

    def handler(msg_type, context, message):
        text = str(message)
        for r in rx:
            if r.search(text):
                return  # swallow benign messages
        QtCore.qInstallMessageHandler(None)
        try:
            QtCore.qDebug(message)
        finally:
            QtCore.qInstallMessageHandler(handler)

    QtCore.qInstallMessageHandler(handler)
    try:
        yield
    finally:
        QtCore.qInstallMessageHandler(original)


# ---------- Fake HTTP ----------
class FakeResponse:
    """The slice of requests.Response the client reads."""

    def __init__(self, status_code: int = 200, payload: Any = None, *, raw: Optional[str] = None):
        self.status_code = status_code
        if raw is not None:
            self.content = raw.encode("utf-8")
        elif payload is None:
            self.content = b""
        else:
            self.content = json.dumps(payload).encode("utf-8")

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        return json.loads(self.content)


@dataclass
class Call:
    method: str
    path: str
    params: Optional[dict]
    json: Any
    timeout: Optional[float]


class FakeSession:
    """
    Stands in for requests.Session.

    route(method, path, reply): reply is a FakeResponse, an exception to
    raise, or a callable(call) -> FakeResponse. Unrouted calls get a 404.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], Any] = {}
        self.calls: list[Call] = []

    def route(self, method: str, path: str, reply) -> None:
        self.routes[(method.upper(), path)] = reply

    def ok(self, method: str, path: str, payload: Any = None) -> None:
        self.route(method, path, FakeResponse(200, payload))

    def fail(self, method: str, path: str, status: int, message: str) -> None:
        self.route(method, path, FakeResponse(status, {"message": message}))

    def request(self, method, url, params=None, json=None, timeout=None):
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        call = Call(method.upper(), path, params, json, timeout)
        self.calls.append(call)
        reply = self.routes.get((call.method, path))
        if reply is None:
            return FakeResponse(404, {"message": f"no route for {call.method} {path}"})
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(call)
        return reply

    def post(self, url, json=None, timeout=None):
        return self.request("POST", url, json=json, timeout=timeout)

    def calls_to(self, method: str, path: str) -> list[Call]:
        return [c for c in self.calls if c.method == method and c.path == path]


# ---------- Stock ----------
STOCK_ROWS = [
    {"_id": "s1", "itemName": "Velvet Red", "itemType": "Curtain", "quantity": 5, "cost": 900, "sellPrice": 1500},
    {"_id": "s2", "itemName": "Blue Sheer", "itemType": "Curtain", "quantity": 0, "cost": 400, "sellPrice": 800},
    {"_id": "s3", "itemName": "Brass Pole", "itemType": "Poles", "quantity": 10, "cost": 1200, "sellPrice": 2000},
    {"_id": "s4", "itemName": "Hooks", "itemType": "Other Accessories", "quantity": 100, "cost": 5, "sellPrice": 15},
    {"_id": "s5", "itemName": "Loose Fabric", "itemType": "Fabric", "quantity": 3, "cost": 10, "sellPrice": 20},
]


@pytest.fixture()
def stock_rows() -> list[dict]:
    return [dict(r) for r in STOCK_ROWS]


@pytest.fixture()
def catalog(stock_rows) -> Catalog:
    return Catalog(StockItem.from_api(r) for r in stock_rows)


@pytest.fixture()
def session(stock_rows) -> FakeSession:
    s = FakeSession()
    s.ok("GET", "/stock", stock_rows)
    return s


@pytest.fixture()
def client(session) -> ApiClient:
    return ApiClient(BASE_URL, session=session)


@pytest.fixture()
def printer():
    s = FakeSession()
    s.ok("POST", PRINT_URL, {"ok": True})
    return PrintService(PRINT_URL, session=s), s


# ---------- Message boxes ----------
class MessageRecorder:
    def __init__(self):
        self.shown: list[tuple[str, str, str]] = []
        self.confirm_answer = True

    def _record(self, kind: str) -> Callable:
        def show(parent, title, text):
            self.shown.append((kind, title, text))
        return show

    def confirm(self, parent, title, text) -> bool:
        self.shown.append(("confirm", title, text))
        return self.confirm_answer

    def texts(self, kind: Optional[str] = None) -> list[str]:
        return [t for k, _title, t in self.shown if kind is None or k == kind]


@pytest.fixture()
def messages(monkeypatch) -> MessageRecorder:
    """Replace every QMessageBox helper with a recorder."""
    rec = MessageRecorder()
    import curtain_pos.modules.composer_screen as composer_screen
    import curtain_pos.utils.ui_helpers as ui_helpers

    for mod in (ui_helpers, composer_screen):
        monkeypatch.setattr(mod, "info", rec._record("info"), raising=False)
        monkeypatch.setattr(mod, "warn", rec._record("warn"), raising=False)
        monkeypatch.setattr(mod, "error", rec._record("error"), raising=False)
    monkeypatch.setattr(ui_helpers, "confirm", rec.confirm)
    return rec


@pytest.fixture()
def transport_error():
    return requests.ConnectionError("Connection refused")


@pytest.fixture()
def fake_response():
    return FakeResponse
