"""Free disk space of the mounted file systems."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import psutil

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """Disk usage of one mounted file system."""

    filesystem: str
    used: int
    available: int
    use_pct: int
    mountpoint: Path

    @classmethod
    def from_usage(
        cls,
        filesystem: str,
        mountpoint: Union[str, Path],
        total: int,
        available: int,
    ) -> "Entry":
        """Build an entry from the total and available space in bytes.

        Raises ``ValueError`` if the sizes cannot describe a file system.
        """
        if total <= 0:
            raise ValueError("file system has no capacity")
        if available > total:
            raise ValueError("available space exceeds total space")
        used = total - available
        return cls(filesystem, used, available, used * 100 // total, Path(mountpoint))

    def to_dict(self) -> dict[str, Any]:
        """Return the entry as a JSON-ready mapping."""
        return {
            "filesystem": self.filesystem,
            "used": self.used,
            "available": self.available,
            "use_pct": self.use_pct,
            "mountpoint": str(self.mountpoint),
        }


def disk_entries() -> list[Entry]:
    """Return the usage of every mounted disk, skipping invalid ones."""
    entries = []
    for partition in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
            entries.append(
                Entry.from_usage(
                    partition.fstype, partition.mountpoint, usage.total, usage.free
                )
            )
        except (OSError, ValueError):
            _log.warning("Invalid entry: %r", partition)
    return entries