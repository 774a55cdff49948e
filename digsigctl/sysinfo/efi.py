"""State of the EFI partition."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import psutil

EFI_PARTITION = "/dev/disk/by-label/EFI"
BOOT_MOUNTPOINT = "/boot"


@dataclass(frozen=True)
class Efi:
    """Whether the EFI partition is mounted."""

    mounted: bool

    @classmethod
    def from_mountpoints(cls, mountpoints: Iterable[str]) -> "Efi":
        """Decide from the mount points of the disks on the system."""
        boot_mounted = any(str(mountpoint) == BOOT_MOUNTPOINT for mountpoint in mountpoints)
        return cls(boot_mounted and Path(EFI_PARTITION).exists())

    @classmethod
    def detect(cls) -> "Efi":
        """Inspect the disks currently mounted on the system."""
        return cls.from_mountpoints(
            partition.mountpoint for partition in psutil.disk_partitions(all=False)
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the state as a JSON-ready mapping."""
        return {"mounted": self.mounted}