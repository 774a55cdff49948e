"""Parsing of ``/proc/meminfo``."""

from __future__ import annotations

import logging
import re
from os import PathLike
from pathlib import Path
from typing import Optional, Union

PROC_MEMINFO = "/proc/meminfo"
KIB = 1024

_UNSIGNED = re.compile(r"\+?[0-9]+")

_log = logging.getLogger(__name__)


def _parse_unsigned(text: str) -> Optional[int]:
    return int(text) if _UNSIGNED.fullmatch(text) else None


def _parse_unit(unit: str) -> Optional[int]:
    unit = unit.strip()
    if unit == "kB":
        return KIB
    _log.warning("unknown unit: %s", unit)
    return None


def _parse_value(value: str) -> Optional[int]:
    value = value.strip()
    number, sep, unit = value.partition(" ")
    if not sep:
        return _parse_unsigned(value)
    parsed = _parse_unsigned(number.strip())
    if parsed is None:
        return None
    factor = _parse_unit(unit)
    return None if factor is None else parsed * factor


def meminfo_from_text(text: str) -> dict[str, int]:
    """Map each entry of meminfo text to its size in bytes."""
    result: dict[str, int] = {}
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        parsed = _parse_value(value)
        if parsed is not None:
            result[key.strip()] = parsed
    return result


def meminfo_from_file(filename: Union[str, PathLike]) -> dict[str, int]:
    """Read and parse a meminfo file; raises ``OSError`` if it cannot be read."""
    return meminfo_from_text(Path(filename).read_text(encoding="utf-8"))


def meminfo() -> dict[str, int]:
    """Read and parse ``/proc/meminfo``."""
    return meminfo_from_file(PROC_MEMINFO)