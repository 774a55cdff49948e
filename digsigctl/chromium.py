"""Control of the Chromium web browser running as a systemd service."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from . import systemctl
from .systemctl import CHROMIUM_SERVICE

CHROMIUM_DEFAULT_PREFERENCES = ".config/chromium/Default/Preferences"


def _succeeds(action, service: str) -> bool:
    try:
        return action(service) == 0
    except OSError:
        return False


def default_preferences_file() -> Optional[Path]:
    """Return the path of the default Chromium preferences file.

    Returns ``None`` if the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    return home / CHROMIUM_DEFAULT_PREFERENCES


def stop() -> bool:
    """Stop the Chromium service."""
    return _succeeds(systemctl.stop, CHROMIUM_SERVICE)


def is_running() -> bool:
    """Tell whether the Chromium service is running."""
    return _succeeds(systemctl.status, CHROMIUM_SERVICE)


def start() -> bool:
    """Start the Chromium service."""
    return _succeeds(systemctl.start, CHROMIUM_SERVICE)


def await_shutdown() -> None:
    """Stop Chromium and wait until it is no longer running."""
    stop()
    while is_running():
        pass


def restart() -> bool:
    """Stop Chromium, wait for it to shut down and start it again."""
    await_shutdown()
    return start()