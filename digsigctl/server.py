"""HTTP server that controls the digital signage system."""

from __future__ import annotations

import argparse
import json
import sys
import threading
from http import HTTPStatus
from typing import Any, Optional, Sequence

from flask import Flask, Response, abort, request

from . import portal
from .config import Config
from .net import discover_address_or_exit
from .preferences import ConfigError
from .rpc import Command
from .screenshot import ScreenshotResponse
from .sysinfo.system_information import SystemInformation

DEFAULT_NETWORK = "fd56:1dda:8794:cb90::/64"
DEFAULT_PORT = 5000

JSON = "application/json"
TEXT = "text/plain; charset=utf-8"

CONFIG_APPLIED = "Configuration applied."
PORTAL_MATCHES = "Portal URL matches Chromium startup page"
PORTAL_DIFFERS = "Portal URL does not match Chromium startup page"
STARTUP_APPLIED = "Portal configuration applied on startup - URL mismatch detected"
STARTUP_NOT_NEEDED = "Portal configuration not needed - URL already matches"

_FAILURES = (OSError, ValueError, ConfigError)


def _text(body: str, status: HTTPStatus = HTTPStatus.OK) -> Response:
    return Response(body, status=int(status), content_type=TEXT)


def _json_body() -> Any:
    """Decode the JSON request body, aborting on the wrong format."""
    if not request.is_json:
        abort(HTTPStatus.NOT_FOUND)
    try:
        return json.loads(request.get_data(as_text=True))
    except ValueError:
        abort(HTTPStatus.BAD_REQUEST)


def create_app() -> Flask:
    """Create the web application serving the control endpoints."""
    app = Flask(__name__)

    @app.post("/configure")
    def configure() -> Response:
        data = _json_body()
        try:
            config = Config.from_dict(data)
        except ValueError:
            abort(HTTPStatus.UNPROCESSABLE_ENTITY)
        try:
            config.apply()
        except _FAILURES as error:
            return _text(str(error))
        return _text(CONFIG_APPLIED)

    @app.get("/screenshot")
    def screenshot() -> Response:
        status, content_type, body = ScreenshotResponse.capture().to_response()
        return Response(body, status=int(status), content_type=content_type)

    @app.get("/sysinfo")
    def sysinfo() -> Response:
        body = json.dumps(SystemInformation.collect().to_dict())
        return Response(body, status=int(HTTPStatus.OK), content_type=JSON)

    @app.post("/rpc")
    def rpc() -> Response:
        data = _json_body()
        try:
            command = Command.from_json(data)
        except ValueError:
            abort(HTTPStatus.UNPROCESSABLE_ENTITY)
        status, body = command.run().to_response()
        return Response(body, status=int(status), content_type=JSON)

    @app.get("/verify-portal")
    def verify_portal() -> Response:
        try:
            matches = portal.verify_startup_page()
        except _FAILURES as error:
            return _text(f"Error verifying portal: {error}")
        return _text(PORTAL_MATCHES if matches else PORTAL_DIFFERS)

    @app.get("/portal-url")
    def get_portal_url() -> Response:
        try:
            hostname = portal.get_hostname()
        except _FAILURES as error:
            return _text(f"Error getting hostname: {error}")
        try:
            return _text(portal.fetch_portal_url(hostname))
        except _FAILURES as error:
            return _text(f"Error fetching portal URL: {error}")

    return app


def run_startup_check() -> str:
    """Apply the portal configuration if it differs from the startup page.

    The outcome is reported on standard error and returned.
    """
    try:
        matches = portal.verify_startup_page()
    except _FAILURES as error:
        message = f"Failed to verify startup page on startup: {error}"
    else:
        if matches:
            message = STARTUP_NOT_NEEDED
        else:
            try:
                applied = portal.apply_portal_config_if_needed()
            except _FAILURES as error:
                message = f"Failed to apply portal config on startup: {error}"
            else:
                message = STARTUP_APPLIED if applied else STARTUP_NOT_NEEDED

    print(message, file=sys.stderr)
    return message


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 <= port <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"port out of range: {value!r}")
    return port


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="digsigctl", description="Digital signage system controller."
    )
    parser.add_argument("-n", "--network", default=DEFAULT_NETWORK)
    parser.add_argument("-p", "--port", type=_port, default=DEFAULT_PORT)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the controller on the local address within the given network."""
    args = _parser().parse_args(argv)
    address = discover_address_or_exit(args.network)
    threading.Thread(target=run_startup_check, daemon=True).start()
    create_app().run(host=str(address), port=args.port)


if __name__ == "__main__":
    main()