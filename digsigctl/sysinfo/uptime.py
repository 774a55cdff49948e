"""Uptime and load of the system."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Any

import psutil

_NANOS_PER_SEC = 1_000_000_000


def _load_average() -> tuple[float, float, float]:
    try:
        return os.getloadavg()
    except (OSError, AttributeError):
        return (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Uptime:
    """Current time, uptime in seconds, users and load averages."""

    time_ns: int
    uptime: int
    users: tuple[Any, ...] = field(default_factory=tuple)
    load_avg: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @classmethod
    def collect(cls) -> "Uptime":
        """Read the uptime and load of the running system.

        The user list is reported empty, as it is not gathered.
        """
        now = time.time_ns()
        uptime = max(0, int(now / _NANOS_PER_SEC - psutil.boot_time()))
        return cls(now, uptime, (), _load_average())

    def to_dict(self) -> dict[str, Any]:
        """Return the information as a JSON-ready mapping."""
        one, five, fifteen = self.load_avg
        secs, nanos = divmod(self.time_ns, _NANOS_PER_SEC)
        return {
            "time": {"secs_since_epoch": secs, "nanos_since_epoch": nanos},
            "uptime": {"secs": self.uptime, "nanos": 0},
            "users": list(self.users),
            "load_avg": {"one": one, "five": five, "fifteen": fifteen},
        }