"""RPC commands accepted by the controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from . import actions, chromium
from .operation_mode import OperationMode
from .rpc_result import RpcResult, Success, failure

_U64_MAX = 2**64 - 1


class CommandKind(Enum):
    """Names of the available RPC commands."""

    BEEP = "beep"
    REBOOT = "reboot"
    IDENTIFY = "identify"
    CONFIG_FILE = "configFile"
    RESTART_WEB_BROWSER = "restartWebBrowser"
    OPERATION_MODE = "operationMode"


_UNIT_KINDS = frozenset(
    {
        CommandKind.BEEP,
        CommandKind.IDENTIFY,
        CommandKind.CONFIG_FILE,
        CommandKind.RESTART_WEB_BROWSER,
    }
)


def _kind(name: Any) -> CommandKind:
    try:
        return CommandKind(name)
    except ValueError:
        raise ValueError(f"unknown command: {name!r}") from None


def _reboot_delay(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("reboot delay must be an unsigned integer")
    if not 0 <= value <= _U64_MAX:
        raise ValueError("reboot delay out of range")
    return value


def _operation_mode(value: Any) -> Optional[OperationMode]:
    if value is None:
        return None
    try:
        return OperationMode(value)
    except ValueError:
        raise ValueError(f"unknown operation mode: {value!r}") from None


@dataclass(frozen=True)
class Command:
    """An RPC command with its optional argument.

    ``argument`` is the reboot delay in seconds for ``REBOOT`` and the
    operation mode to set for ``OPERATION_MODE``.
    """

    kind: CommandKind
    argument: Union[int, OperationMode, None] = None

    @classmethod
    def from_json(cls, data: Any) -> "Command":
        """Build a command from decoded JSON; raises ``ValueError``."""
        if isinstance(data, str):
            kind = _kind(data)
            if kind not in _UNIT_KINDS:
                raise ValueError(f"command {data!r} requires a value")
            return cls(kind)

        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError("command must be a string or an object with one key")

        ((name, value),) = data.items()
        kind = _kind(name)
        if kind in _UNIT_KINDS:
            if value is not None:
                raise ValueError(f"command {name!r} takes no value")
            return cls(kind)
        if kind is CommandKind.REBOOT:
            return cls(kind, _reboot_delay(value))
        return cls(kind, _operation_mode(value))

    def run(self) -> RpcResult:
        """Run the command and return its result."""
        if self.kind is CommandKind.BEEP:
            return actions.beep(None)
        if self.kind is CommandKind.REBOOT:
            return actions.reboot(self.argument)
        if self.kind is CommandKind.IDENTIFY:
            return actions.identify()
        if self.kind is CommandKind.CONFIG_FILE:
            path = chromium.default_preferences_file()
            return Success(None if path is None else str(path))
        if self.kind is CommandKind.RESTART_WEB_BROWSER:
            if chromium.restart():
                return Success("Web browser restarted.")
            return failure("Could not restart web browser.")

        mode = self.argument
        if mode is None:
            return Success(OperationMode.current())
        if mode.set():
            return Success("Operation mode set")
        return failure("Could not set operation mode.")