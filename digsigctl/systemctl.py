"""Control of systemd units through ``systemctl``."""

from __future__ import annotations

import subprocess

SUDO = "/usr/bin/sudo"

CHROMIUM_SERVICE = "chromium.service"
INSTALLATION_INSTRUCTIONS_SERVICE = "installation-instructions.service"
UNCONFIGURED_WARNING_SERVICE = "unconfigured-warning.service"
CONFLICTING_SERVICES = (
    CHROMIUM_SERVICE,
    INSTALLATION_INSTRUCTIONS_SERVICE,
    UNCONFIGURED_WARNING_SERVICE,
)


def sudo(command: str, *args: str) -> list[str]:
    """Return the argument vector that runs ``command`` with ``sudo``."""
    return [SUDO, command, *args]


def _run(argv: list[str]) -> int:
    """Run a command with its output captured and return its exit code.

    Raises ``OSError`` if the command cannot be started.
    """
    completed = subprocess.run(
        argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False
    )
    return completed.returncode


def _systemctl_adm(*command: str) -> int:
    return _run(["sudo", "systemctl", *command])


def _systemctl(*command: str) -> int:
    return _run(["systemctl", *command])


def start(service: str) -> int:
    """Start the given service and return the exit code of systemctl."""
    return _systemctl_adm("start", service)


def stop(service: str) -> int:
    """Stop the given service and return the exit code of systemctl."""
    return _systemctl_adm("stop", service)


def stop_and_disable(service: str) -> int:
    """Stop and disable the given service."""
    return _systemctl_adm("disable", "--now", service)


def enable_and_start(service: str) -> int:
    """Enable and start the given service."""
    return _systemctl_adm("enable", "--now", service)


def is_enabled(service: str) -> int:
    """Return the exit code of ``systemctl is-enabled`` for the service."""
    return _systemctl("is-enabled", service)


def is_active(service: str) -> int:
    """Return the exit code of ``systemctl is-active`` for the service."""
    return _systemctl("is-active", service)


def status(service: str) -> int:
    """Return the exit code of ``systemctl status`` for the service."""
    return _systemctl("status", service)


def is_enabled_or_active(service: str) -> bool:
    """Tell whether the given service is enabled or active."""
    for check in (is_enabled, is_active):
        try:
            if check(service) == 0:
                return True
        except OSError:
            continue
    return False