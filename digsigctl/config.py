"""Configuration of the digital signage presentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import chromium
from .preferences import (
    ChromiumPreferences,
    DefaultPreferencesNotFoundError,
    SubprocessFailedError,
)


@dataclass(frozen=True)
class Config:
    """Configuration settings for the digital signage system."""

    url: str

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a configuration from decoded JSON; raises ``ValueError``."""
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        if "url" not in data:
            raise ValueError("missing field `url`")
        url = data["url"]
        if not isinstance(url, str):
            raise ValueError("field `url` must be a string")
        return cls(url)

    def apply(self) -> None:
        """Apply the configuration to the system.

        Raises a ``ConfigError``, ``OSError`` or ``ValueError`` on failure.
        """
        chromium.await_shutdown()
        self._update_chromium_preferences()
        if not chromium.start():
            raise SubprocessFailedError()

    def _update_chromium_preferences(self) -> None:
        filename = chromium.default_preferences_file()
        if filename is None:
            raise DefaultPreferencesNotFoundError()
        preferences = ChromiumPreferences.load(filename)
        preferences.update_or_init_session(self.url)
        preferences.update_or_init_profile()
        preferences.update_or_init_sessions()
        preferences.save(filename)