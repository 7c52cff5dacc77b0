"""HTTP service that serves the financial preferences as JSON."""

from __future__ import annotations

import argparse
import contextlib
import json
from pathlib import Path

from .config_loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from .web import App, Response, error_response, make_server


def make_app(config_path: str | Path = DEFAULT_CONFIG_PATH) -> App:
    """Build a handler that answers GET with the preferences at config_path."""

    def app(method: str, body: bytes) -> Response:
        if method != "GET":
            return error_response("Method not allowed", 405)
        try:
            payload = json.dumps(load_config(config_path).to_dict(), allow_nan=False)
        except ConfigError as exc:
            return error_response(str(exc), 500)
        except ValueError:
            return error_response("Failed to encode response", 500)
        headers = {"Content-Type": "application/json", "Access-Control-Allow-Origin": "*"}
        return Response(200, payload.encode("utf-8"), headers)

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the preferences service."""
    parser = argparse.ArgumentParser(description="Serve the financial preferences as JSON.")
    parser.add_argument("--host", default="json_builder")
    parser.add_argument("--port", type=int, default=8002)
    parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH))
    args = parser.parse_args(argv)
    with make_server(make_app(args.config), args.host, args.port) as server, contextlib.suppress(KeyboardInterrupt):
        server.serve_forever()
    return 0