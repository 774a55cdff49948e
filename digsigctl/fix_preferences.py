"""Repair of possibly broken Chromium preferences files."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from . import chromium
from .preferences import ChromiumPreferences, ConfigError

SESSIONS_FAILED = 1 << 2
PROFILE_FAILED = 1 << 3
SAVE_FAILED = 1 << 4


def fix_preferences(filename: Union[str, PathLike]) -> int:
    """Repair the given preferences file and return the exit code.

    A missing file is left alone. A file that cannot be parsed yields 2;
    otherwise each failed step adds its bit to the exit code.
    """
    path = Path(filename)
    if not path.exists():
        print("Preferences file not existent.", file=sys.stderr)
        return 0

    try:
        preferences = ChromiumPreferences.load(path)
    except (OSError, ValueError):
        print("Preferences file is damaged beyond repair.", file=sys.stderr)
        return 2

    exit_code = 0

    try:
        preferences.update_or_init_sessions()
    except ConfigError as error:
        print(f"Could not update or init sessions: {error}", file=sys.stderr)
        exit_code += SESSIONS_FAILED

    try:
        preferences.update_or_init_profile()
    except ConfigError as error:
        print(f"Could not update or init profile: {error}", file=sys.stderr)
        exit_code += PROFILE_FAILED

    try:
        preferences.save(path)
    except (OSError, ValueError) as error:
        print(f"Could not save file: {error}", file=sys.stderr)
        exit_code += SAVE_FAILED

    return exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Repair the named preferences file or the default one."""
    parser = argparse.ArgumentParser(
        prog="fix-chromium-preferences",
        description="Fix potentially broken Chromium preferences files.",
    )
    parser.add_argument("filename", nargs="?", type=Path)
    args = parser.parse_args(argv)

    filename = args.filename or chromium.default_preferences_file()
    if filename is None:
        print("Could not find default preferences file.", file=sys.stderr)
        return 1

    return fix_preferences(filename)


if __name__ == "__main__":
    sys.exit(main())