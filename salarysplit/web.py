"""Tiny HTTP plumbing shared by the services."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable

log = logging.getLogger(__name__)


@dataclass
class Response:
    """An HTTP response produced by a service handler."""

    status: int = 200
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


App = Callable[[str, bytes], Response]


def error_response(message: str, status: int) -> Response:
    """A plain-text error response."""
    return Response(status, (message + "\n").encode("utf-8"), {"Content-Type": "text/plain; charset=utf-8"})


def make_server(app: App, host: str, port: int) -> ThreadingHTTPServer:
    """Create an HTTP server that passes every request's method and body to app."""

    class _Handler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length > 0 else b""
            try:
                response = app(self.command, body)
            except Exception:
                log.exception("request handler failed")
                response = error_response("Internal Server Error", 500)
            self.send_response(response.status)
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(response.body)))
            self.end_headers()
            self.wfile.write(response.body)

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _dispatch

        def log_message(self, format: str, *args: object) -> None:
            log.debug(format, *args)

    return ThreadingHTTPServer((host, port), _Handler)