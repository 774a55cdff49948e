"""S.M.A.R.T. health status of the storage devices."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from ..pacman import decode_output
from ..systemctl import sudo

SMARTCTL = "/usr/bin/smartctl"
SMART_STATUS_PREFIX = "SMART overall-health self-assessment test result:"

_log = logging.getLogger(__name__)


def smartctl(*args: str) -> subprocess.CompletedProcess:
    """Run ``smartctl`` with ``sudo``; raises ``OSError`` if it cannot start."""
    return subprocess.run(
        sudo(SMARTCTL, *args),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=False,
    )


def get_devices_from_text(text: str) -> list[str]:
    """Return the device names listed in ``smartctl --scan-open`` output."""
    return [line.split()[0] for line in text.splitlines() if line.strip()]


def get_devices() -> list[str]:
    """Return the devices found by scanning the system."""
    return get_devices_from_text(decode_output(smartctl("--scan-open").stdout))


def check_device_from_text(text: str) -> Optional[str]:
    """Return the health status from ``smartctl -H`` output, if present."""
    for line in text.splitlines():
        if line.strip().startswith(SMART_STATUS_PREFIX):
            parts = line.split(":")
            if len(parts) > 1:
                return parts[1].strip()
    return None


def check_device(device: str) -> Optional[str]:
    """Return the health status of the given device."""
    return check_device_from_text(decode_output(smartctl("-H", device).stdout))


def device_states() -> dict[str, Optional[str]]:
    """Map each scanned device to its health status.

    Devices that cannot be checked are left out.
    """
    states: dict[str, Optional[str]] = {}
    for device in get_devices():
        try:
            states[device] = check_device(device)
        except (OSError, ValueError) as error:
            _log.error("%s", error)
    return states