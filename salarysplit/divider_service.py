"""HTTP service that divides a posted salary configuration between expenses."""

from __future__ import annotations

import argparse
import contextlib
import json

from .divider import IncomeBelowCapError, divide_expenses
from .models import FinancialConfig
from .web import Response, error_response, make_server


def handle(method: str, body: bytes) -> Response:
    """Answer one request: a POSTed FinancialConfig yields the monthly division as JSON."""
    if method != "POST":
        return error_response("Only POST method is allowed", 405)
    try:
        data = json.loads(body)
        config = FinancialConfig.from_dict({} if data is None else data)
    except ValueError:
        return error_response("Invalid payload", 400)
    try:
        divisions = divide_expenses(config)
    except IncomeBelowCapError:
        return error_response("Failed to generate monthly expenses", 500)
    try:
        payload = json.dumps([row.to_dict() for row in divisions], allow_nan=False)
    except ValueError:
        return error_response("Failed to marshal response", 500)
    return Response(200, payload.encode("utf-8"), {"Content-Type": "application/json"})


def main(argv: list[str] | None = None) -> int:
    """Run the expense divider service."""
    parser = argparse.ArgumentParser(description="Serve the monthly expense divider.")
    parser.add_argument("--host", default="expenses_divider")
    parser.add_argument("--port", type=int, default=8001)
    args = parser.parse_args(argv)
    with make_server(handle, args.host, args.port) as server, contextlib.suppress(KeyboardInterrupt):
        server.serve_forever()
    return 0