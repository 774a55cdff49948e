"""Readings of the local hardware sensors."""

from __future__ import annotations

import json
import subprocess
from typing import Any

SENSORS = "/usr/bin/sensors"
JSON = "-j"


def sensors() -> Any:
    """Return the sensor readings as decoded JSON.

    Raises ``OSError`` if the command cannot be run and ``ValueError`` if
    its output is not valid JSON.
    """
    completed = subprocess.run(
        [SENSORS, JSON],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return json.loads(completed.stdout)