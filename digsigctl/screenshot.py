"""Screenshots of the browser shown on the display."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from pathlib import Path
from typing import Optional

from . import systemctl

SCREENSHOT_SERVICE = "screenshot.service"
SCREENSHOT_FILE = "/tmp/screenshot.png"

PNG = "image/png"
TEXT = "text/plain; charset=utf-8"


def take_screenshot() -> bytes:
    """Take a screenshot of the browser and return it as PNG data.

    Raises ``OSError`` if the screenshot service cannot be run or the
    image cannot be read.
    """
    systemctl.start(SCREENSHOT_SERVICE)

    while True:
        try:
            if systemctl.is_active(SCREENSHOT_SERVICE) != 0:
                break
        except OSError:
            break

    return Path(SCREENSHOT_FILE).read_bytes()


@dataclass(frozen=True)
class ScreenshotResponse:
    """Either a screenshot image or the error that prevented it."""

    image: Optional[bytes] = None
    error: Optional[str] = None

    @classmethod
    def capture(cls) -> "ScreenshotResponse":
        """Take a screenshot, keeping the error if it fails."""
        try:
            return cls(image=take_screenshot())
        except OSError as error:
            return cls(error=str(error))

    def to_response(self) -> tuple[HTTPStatus, str, bytes]:
        """Return the HTTP status, content type and body."""
        if self.image is not None:
            return HTTPStatus.OK, PNG, self.image
        return HTTPStatus.INTERNAL_SERVER_ERROR, TEXT, (self.error or "").encode("utf-8")