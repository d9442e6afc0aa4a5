"""
Shared fixtures: a throwaway local HTTP server standing in for api.hubapi.com.
"""

import re
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from hubspot_client import HubSpotConfig, HubSpotService


class RecordedRequest:
    def __init__(self, method: str, path: str, headers: dict[str, str], body: bytes) -> None:
        self.method = method
        self.path = path
        self.headers = headers
        self.body = body


class StubHubSpot:
    """
    Routes are (method, regex on request path+query) -> (status, body).
    Unmatched requests get 500.
    """

    def __init__(self) -> None:
        self.routes: list[tuple[str, re.Pattern[str], int, bytes]] = []
        self.requests: list[RecordedRequest] = []
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self._handler_class())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}"

    def route(self, method: str, pattern: str, status: int, body: bytes | str = b"") -> None:
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.routes.append((method, re.compile(pattern), status, body))

    def start(self) -> None:
        self._thread.start()

    def close(self) -> None:
        self._server.shutdown()
        self._server.server_close()

    def _handler_class(self) -> type[BaseHTTPRequestHandler]:
        stub = self

        class Handler(BaseHTTPRequestHandler):
            def _handle(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length else b""
                stub.requests.append(
                    RecordedRequest(self.command, self.path, dict(self.headers.items()), body)
                )
                status, payload = 500, b""
                for method, pattern, route_status, route_body in stub.routes:
                    if method == self.command and pattern.match(self.path):
                        status, payload = route_status, route_body
                        break
                self.send_response(status)
                if status != 204:
                    self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                if payload and status != 204:
                    self.wfile.write(payload)

            do_POST = _handle
            do_DELETE = _handle
            do_GET = _handle

            def log_message(self, format: str, *args: object) -> None:
                pass

        return Handler


@pytest.fixture
def stub():
    server = StubHubSpot()
    server.start()
    yield server
    server.close()


@pytest.fixture
def client(stub):
    """Bearer-token client pointed at the stub."""
    return HubSpotService(HubSpotConfig(base_url=stub.url, access_token="my-api-key"))


@pytest.fixture
def key_client(stub):
    """hapikey client pointed at the stub."""
    return HubSpotService(HubSpotConfig(base_url=stub.url, api_key="my-api-key"))
