"""Detection of the application shown on the digital signage system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from .. import systemctl
from ..pacman import package_version

SERVICES_DIR = "/usr/lib/systemd/system"


class Mode(str, Enum):
    """Application mode as reported in the system information."""

    PRODUCTIVE = "PRODUCTIVE"
    INSTALLATION_INSTRUCTIONS = "INSTALLATION_INSTRUCTIONS"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    OFF = "OFF"


class Application(Enum):
    """Applications that may run on the system."""

    HTML = "html"
    AIR = "air"
    NOT_CONFIGURED_WARNING = "not configured"
    INSTALLATION_INSTRUCTIONS = "installation instructions"
    OFF = "off"


# Order in which the applications are checked when determining the status.
APPLICATION_PREFERENCE = (
    Application.HTML,
    Application.AIR,
    Application.NOT_CONFIGURED_WARNING,
    Application.INSTALLATION_INSTRUCTIONS,
    Application.OFF,
)

# application -> (mode, unit, package)
_SPECS: dict[Application, tuple[Mode, Optional[str], Optional[str]]] = {
    Application.HTML: (Mode.PRODUCTIVE, "html5ds.service", "application-html"),
    Application.AIR: (Mode.PRODUCTIVE, "application.service", "application-air"),
    Application.NOT_CONFIGURED_WARNING: (
        Mode.NOT_CONFIGURED,
        "unconfigured-warning.service",
        None,
    ),
    Application.INSTALLATION_INSTRUCTIONS: (
        Mode.INSTALLATION_INSTRUCTIONS,
        "installation-instructions.service",
        None,
    ),
    Application.OFF: (Mode.OFF, None, None),
}


def _version_of(package: Optional[str]) -> Optional[str]:
    if package is None:
        return None
    try:
        return package_version(package)
    except (OSError, ValueError):
        return None


@dataclass(frozen=True)
class Metadata:
    """Description of an application and its installed version."""

    name: str
    mode: Mode
    unit: Optional[str] = None
    package: Optional[str] = None
    version: Optional[str] = None

    @classmethod
    def from_application(cls, application: Application) -> "Metadata":
        """Describe the given application, querying its package version."""
        mode, unit, package = _SPECS[application]
        return cls(application.value, mode, unit, package, _version_of(package))

    def is_productive(self) -> bool:
        """Tell whether the application is a productive one."""
        return self.mode is Mode.PRODUCTIVE

    def to_dict(self) -> dict[str, Any]:
        """Return the metadata as a JSON-ready mapping."""
        return {
            "name": self.name,
            "mode": self.mode.value,
            "unit": self.unit,
            "package": self.package,
            "version": self.version,
        }


def application_for_mode(mode: Mode) -> Optional[Application]:
    """Return the application that provides the given mode."""
    if mode is Mode.PRODUCTIVE:
        return get_preferred()
    if mode is Mode.INSTALLATION_INSTRUCTIONS:
        return Application.INSTALLATION_INSTRUCTIONS
    if mode is Mode.NOT_CONFIGURED:
        return Application.NOT_CONFIGURED_WARNING
    return Application.OFF


def get_preferred() -> Optional[Application]:
    """Return the first preferred productive application installed on the system."""
    services = Path(SERVICES_DIR)
    for application in APPLICATION_PREFERENCE:
        mode, unit, _ = _SPECS[application]
        if mode is Mode.PRODUCTIVE and unit is not None and (services / unit).is_file():
            return application
    return None


def _succeeds(check: Callable[[str], int], unit: str) -> bool:
    try:
        return check(unit) == 0
    except OSError:
        return False


def status() -> Metadata:
    """Return the application currently enabled and active on the system."""
    for application in APPLICATION_PREFERENCE:
        _, unit, _ = _SPECS[application]
        if unit is None:
            continue
        if _succeeds(systemctl.is_enabled, unit) and _succeeds(systemctl.is_active, unit):
            return Metadata.from_application(application)
    return Metadata.from_application(Application.OFF)