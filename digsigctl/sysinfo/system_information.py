"""Collected information about the local digital signage system."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from . import application
from .application import Metadata
from .cmdline import cmdline
from .cpuinfo import CpuInfo
from .df import Entry, disk_entries
from .efi import Efi
from .meminfo import meminfo
from .mount import root_mounted_ro
from .sensors import sensors
from .smart import device_states
from .uptime import Uptime

T = TypeVar("T")


class Os(str, Enum):
    """Operating system family."""

    UNIX = "Unix"
    WINDOWS = "Windows"


def _optional(read: Callable[[], T]) -> Optional[T]:
    try:
        return read()
    except (OSError, ValueError):
        return None


@dataclass
class SystemInformation:
    """Snapshot of the system's state."""

    os: Os
    application: Metadata
    efi: Efi
    uptime: Uptime
    baytrail: Optional[bool] = None
    cmd_line: Optional[dict[str, Optional[str]]] = None
    cpu_info: Optional[CpuInfo] = None
    df: list[Entry] = field(default_factory=list)
    mem_info: Optional[dict[str, int]] = None
    root_ro: Optional[bool] = None
    sensors: Any = None
    smartctl: Optional[dict[str, Optional[str]]] = None

    @classmethod
    def collect(cls) -> "SystemInformation":
        """Gather the information; parts that cannot be read are ``None``."""
        cpu_info = _optional(CpuInfo.read)
        return cls(
            os=Os.WINDOWS if os.name == "nt" else Os.UNIX,
            application=application.status(),
            efi=Efi.detect(),
            uptime=Uptime.collect(),
            baytrail=None if cpu_info is None else cpu_info.is_bay_trail,
            cmd_line=_optional(cmdline),
            cpu_info=cpu_info,
            df=disk_entries(),
            mem_info=_optional(meminfo),
            root_ro=_optional(root_mounted_ro),
            sensors=_optional(sensors),
            smartctl=_optional(device_states),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the information as a JSON-ready mapping."""
        return {
            "os": self.os.value,
            "application": self.application.to_dict(),
            "baytrail": self.baytrail,
            "efi": self.efi.to_dict(),
            "cmdline": self.cmd_line,
            "cpuinfo": None if self.cpu_info is None else self.cpu_info.to_dict(),
            "df": [entry.to_dict() for entry in self.df],
            "meminfo": self.mem_info,
            "root_ro": self.root_ro,
            "sensors": self.sensors,
            "uptime": self.uptime.to_dict(),
            "smartctl": self.smartctl,
        }