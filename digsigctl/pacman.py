"""Queries of the pacman package manager."""

from __future__ import annotations

import subprocess

PACMAN = "/usr/bin/pacman"


def decode_output(data: bytes) -> str:
    """Decode command output as UTF-8, raising ``ValueError`` on bad data."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as error:
        raise ValueError(f"encountered non-utf-8 data: {error}") from error


def pacman(*args: str) -> subprocess.CompletedProcess:
    """Run pacman with the given arguments, capturing its output."""
    return subprocess.run(
        [PACMAN, *args], stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False
    )


def parse_version(output: str) -> str:
    """Return the version field from a line of ``pacman -Q`` output."""
    fields = output.split()
    if len(fields) < 2:
        raise ValueError("missing version field")
    return fields[1]


def package_version(package: str) -> str:
    """Return the installed version of the given package."""
    return parse_version(decode_output(pacman("-Q", package).stdout))