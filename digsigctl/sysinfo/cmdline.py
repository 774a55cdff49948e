"""Parsing of the kernel command line."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

PROC_CMDLINE = "/proc/cmdline"


def parse_cmdline(text: str) -> dict[str, Optional[str]]:
    """Split a kernel command line into a mapping of keys to optional values."""
    result: dict[str, Optional[str]] = {}
    for item in text.split():
        key, sep, value = item.partition("=")
        result[key] = value if sep else None
    return result


def cmdline() -> dict[str, Optional[str]]:
    """Read and parse ``/proc/cmdline``; raises ``OSError`` if it cannot be read."""
    return parse_cmdline(Path(PROC_CMDLINE).read_text(encoding="utf-8"))