"""Operation modes that decide what the display of the system shows."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from . import systemctl
from .systemctl import (
    CHROMIUM_SERVICE,
    CONFLICTING_SERVICES,
    INSTALLATION_INSTRUCTIONS_SERVICE,
    UNCONFIGURED_WARNING_SERVICE,
)


class OperationMode(str, Enum):
    """What is shown on the system's display."""

    CHROMIUM = "chromium"
    INSTALLATION_INSTRUCTIONS = "installationInstructions"
    UNCONFIGURED_WARNING = "unconfiguredWarning"
    BLACK_SCREEN = "blackScreen"

    @classmethod
    def current(cls) -> "OperationMode":
        """Determine the operation mode the system is currently in."""
        for mode in (
            cls.CHROMIUM,
            cls.INSTALLATION_INSTRUCTIONS,
            cls.UNCONFIGURED_WARNING,
        ):
            if systemctl.is_enabled_or_active(_SERVICES[mode]):
                return mode
        return cls.BLACK_SCREEN

    def set(self) -> bool:
        """Switch the system to this operation mode."""
        return activate_exclusive(_SERVICES[self])


_SERVICES: dict[OperationMode, Optional[str]] = {
    OperationMode.CHROMIUM: CHROMIUM_SERVICE,
    OperationMode.INSTALLATION_INSTRUCTIONS: INSTALLATION_INSTRUCTIONS_SERVICE,
    OperationMode.UNCONFIGURED_WARNING: UNCONFIGURED_WARNING_SERVICE,
    OperationMode.BLACK_SCREEN: None,
}


def activate_exclusive(service: Optional[str]) -> bool:
    """Disable all conflicting services, then enable and start ``service``.

    With ``service`` set to ``None`` only the conflicting services are stopped.
    """
    for conflicting in CONFLICTING_SERVICES:
        try:
            systemctl.stop_and_disable(conflicting)
        except OSError:
            pass

    if service is None:
        return True

    try:
        return systemctl.enable_and_start(service) == 0
    except OSError:
        return False