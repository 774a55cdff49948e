"""Parsing of mounted file systems from ``/proc/mounts``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

MOUNTS = "/proc/mounts"

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid digit found in string: {text!r}")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(f"number too large to fit in target type: {text!r}")
    return value


def parse_flags(flags: str) -> dict[str, Optional[str]]:
    """Split comma-separated mount options into keys and optional values."""
    result: dict[str, Optional[str]] = {}
    for flag in flags.split(","):
        key, *value = flag.split("=", 1)
        result[key] = value[0] if value else None
    return result


@dataclass(frozen=True)
class Mount:
    """A mounted file system."""

    device: str
    mountpoint: Path
    filesystem: str
    flags: dict[str, Optional[str]] = field(default_factory=dict)
    freq: int = 0
    pass_no: int = 0

    @classmethod
    def parse(cls, line: str) -> "Mount":
        """Parse a line of ``/proc/mounts``; raises ``ValueError`` if it is malformed."""
        fields = line.split()
        if len(fields) != 6:
            raise ValueError("could not convert vec to array")
        device, mountpoint, filesystem, flags, freq, pass_no = fields
        return cls(
            device,
            Path(mountpoint),
            filesystem,
            parse_flags(flags),
            _parse_u32(freq),
            _parse_u32(pass_no),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the mount as a JSON-ready mapping."""
        return {
            "what": self.device,
            "where": str(self.mountpoint),
            "type": self.filesystem,
            "flags": dict(self.flags),
            "freq": self.freq,
            "passno": self.pass_no,
        }


def parse_mounts(text: str) -> list[Mount]:
    """Parse all valid lines of mounts text, skipping malformed ones."""
    result = []
    for line in text.splitlines():
        try:
            result.append(Mount.parse(line))
        except ValueError:
            continue
    return result


def mounts() -> list[Mount]:
    """Read the mounted file systems; raises ``OSError`` if they cannot be read."""
    return parse_mounts(Path(MOUNTS).read_text(encoding="utf-8"))


def root_mounted_ro() -> bool:
    """Tell whether the root file system is mounted read-only.

    Raises ``OSError`` if the mounts cannot be read or hold no root entry.
    """
    root = Path("/")
    for mount in mounts():
        if mount.mountpoint == root:
            return "ro" in mount.flags
    raise OSError("root partition not found")