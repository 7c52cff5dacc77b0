"""HTTP service that turns a monthly division into a base64-encoded PDF report."""

from __future__ import annotations

import argparse
import contextlib
import json

from .models import MonthlyExpenseDivision
from .pdfreport import encode_report
from .web import Response, error_response, make_server


def handle(method: str, body: bytes) -> Response:
    """Answer one request: POSTed division rows yield the report as base64 text."""
    if method != "POST":
        return error_response("Invalid request method", 405)
    try:
        data = json.loads(body) or []
        if not isinstance(data, list):
            raise ValueError("expected a list of divisions")
        divisions = [MonthlyExpenseDivision.from_dict(item) for item in data]
    except ValueError:
        return error_response("Invalid request payload", 400)
    try:
        encoded = encode_report(divisions)
    except (ValueError, OverflowError):
        return error_response("Error generating report", 500)
    return Response(200, encoded.encode("ascii"), {"Content-Type": "text/plain; charset=utf-8"})


def main(argv: list[str] | None = None) -> int:
    """Run the report service."""
    parser = argparse.ArgumentParser(description="Serve the monthly finance PDF report.")
    parser.add_argument("--host", default="report_generator")
    parser.add_argument("--port", type=int, default=8003)
    args = parser.parse_args(argv)
    with make_server(handle, args.host, args.port) as server, contextlib.suppress(KeyboardInterrupt):
        server.serve_forever()
    return 0