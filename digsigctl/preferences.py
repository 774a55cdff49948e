"""Management of the Chromium "Preferences" file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Union

StrPath = Union[str, PathLike]


class ConfigError(Exception):
    """Base class of errors raised while applying a configuration."""


class DefaultPreferencesNotFoundError(ConfigError):
    """The default preferences file could not be located."""

    def __init__(self) -> None:
        super().__init__("Default preferences not found")


class NotAJsonObjectError(ConfigError):
    """A value that must be a JSON object is something else."""

    def __init__(self, key: str) -> None:
        super().__init__(f"not a JSON object: {key}")
        self.key = key


class SubprocessFailedError(ConfigError):
    """A subprocess did not complete successfully."""

    def __init__(self) -> None:
        super().__init__("Subprocess failed")


@dataclass
class ChromiumPreferences:
    """Parsed contents of a Chrome or Chromium preferences file."""

    data: Any

    @classmethod
    def load(cls, filename: StrPath) -> "ChromiumPreferences":
        """Load preferences from a file; raises ``OSError`` or ``ValueError``."""
        return cls(json.loads(Path(filename).read_text(encoding="utf-8")))

    def save(self, filename: StrPath) -> None:
        """Write the preferences to a file, replacing its contents."""
        text = json.dumps(self.data, separators=(",", ":"), ensure_ascii=False)
        Path(filename).write_text(text, encoding="utf-8")

    def update_or_init_session(self, url: str) -> None:
        """Set the startup URL of the ``session`` object."""
        self._update_or_insert(
            "session", {"startup_urls": [url], "restore_on_startup": 4}
        )

    def update_or_init_profile(self) -> None:
        """Mark the last exit of the profile as normal."""
        self._update_or_insert("profile", {"exit_type": "Normal"})

    def update_or_init_sessions(self) -> None:
        """Set the session data status of the ``sessions`` object."""
        self._update_or_insert("sessions", {"session_data_status": 3})

    def _update_or_insert(self, key: str, values: dict[str, Any]) -> None:
        if not isinstance(self.data, dict):
            raise NotAJsonObjectError("preferences")
        current = self.data.get(key)
        if isinstance(current, dict):
            current.update(values)
        else:
            self.data[key] = dict(values)