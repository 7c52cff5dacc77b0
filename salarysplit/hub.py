"""Front service chaining preferences, division and report into one PDF."""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import urllib.error
import urllib.request

from .models import FinancialConfig, MonthlyExpenseDivision
from .web import App, Response, error_response, make_server

DEFAULT_HOST = "hub"
DEFAULT_PORT = 8000
BUILDER_URL = "http://json_builder:8002/"
DIVIDER_URL = "http://expenses_divider:8001/"
REPORT_URL = "http://report_generator:8003/"

_TIMEOUT = 30.0


class HubError(Exception):
    """A step of building the finance report failed."""


def _exchange(request: urllib.request.Request, service: str) -> bytes:
    """Send request and return the response body whatever its status."""
    try:
        with urllib.request.urlopen(request, timeout=_TIMEOUT) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        with exc:
            return exc.read()
    except OSError as exc:
        raise HubError(f"Error calling {service}: {exc}") from exc


def _post_json(url: str, payload: bytes, service: str) -> bytes:
    request = urllib.request.Request(
        url, data=payload, headers={"Content-Type": "application/json"}, method="POST"
    )
    return _exchange(request, service)


def _decode_config(payload: bytes) -> FinancialConfig:
    data = json.loads(payload)
    return FinancialConfig() if data is None else FinancialConfig.from_dict(data)


def _decode_divisions(payload: bytes) -> list[MonthlyExpenseDivision]:
    data = json.loads(payload)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("expected a list of divisions")
    return [MonthlyExpenseDivision.from_dict(item) for item in data]


def generate_finance(
    builder_url: str = BUILDER_URL,
    divider_url: str = DIVIDER_URL,
    report_url: str = REPORT_URL,
) -> bytes:
    """Fetch the preferences, divide the salary and return the report PDF."""
    raw_config = _exchange(urllib.request.Request(builder_url, method="GET"), "json_builder")
    try:
        config = _decode_config(raw_config)
    except ValueError as exc:
        raise HubError(
            f"Error unmarshalling response from json_builder: {exc}; resp1:{raw_config!r}"
        ) from exc
    try:
        config_payload = json.dumps(config.to_dict(), allow_nan=False).encode("utf-8")
    except ValueError as exc:
        raise HubError(f"Error marshalling FinancialConfig: {exc}") from exc

    raw_divisions = _post_json(divider_url, config_payload, "expenses_divider")
    try:
        divisions = _decode_divisions(raw_divisions)
    except ValueError as exc:
        raise HubError(
            f"Error unmarshalling response from expenses_divider: {exc} -- "
            f"resp2:{raw_divisions!r} -- resp1:{config_payload!r}"
        ) from exc
    try:
        divisions_payload = json.dumps(
            [row.to_dict() for row in divisions], allow_nan=False
        ).encode("utf-8")
    except ValueError as exc:
        raise HubError(f"Error marshalling MonthlyExpenseDivision: {exc}") from exc

    encoded = _post_json(report_url, divisions_payload, "report_generator")
    try:
        return base64.b64decode(encoded.replace(b"\r", b"").replace(b"\n", b""), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise HubError(f"Error decoding base64 PDF content: {exc}; payload3:{encoded!r}") from exc


def make_app(
    builder_url: str = BUILDER_URL,
    divider_url: str = DIVIDER_URL,
    report_url: str = REPORT_URL,
) -> App:
    """Build a handler that answers GET with the generated report PDF."""

    def app(method: str, body: bytes) -> Response:
        if method != "GET":
            return Response(
                status=404,
                body=b"404 page not found",
                headers={"Content-Type": "text/plain"},
            )
        try:
            pdf = generate_finance(builder_url, divider_url, report_url)
        except HubError as exc:
            return error_response(str(exc), 500)
        return Response(
            status=200,
            body=pdf,
            headers={
                "Content-Type": "application/pdf",
                "Content-Disposition": "inline; filename=report.pdf",
            },
        )

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the hub service."""
    parser = argparse.ArgumentParser(description="Serve the monthly finance report.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--builder-url", default=BUILDER_URL)
    parser.add_argument("--divider-url", default=DIVIDER_URL)
    parser.add_argument("--report-url", default=REPORT_URL)
    args = parser.parse_args(argv)
    app = make_app(args.builder_url, args.divider_url, args.report_url)
    with make_server(app, args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0