"""Actions run on the system on behalf of RPC commands."""

from __future__ import annotations

import os
import struct
import subprocess
import sys
import threading
import time
from pathlib import Path
from typing import Iterable, Optional

from .rpc_result import RpcResult, Success, failure

_PCSPKR = "/dev/input/by-path/platform-pcspkr-event-spkr"
_EV_SND = 0x12
_SND_TONE = 0x02
_INPUT_EVENT = "llHHi"
# (frequency in Hz, length in ms, delay in ms)
_DEFAULT_MELODY = ((440, 200, 100),)

_ETC_HOSTNAME = "/etc/hostname"
_X_MESSAGE_TIMEOUT_SEC = 15

_REBOOT_COMMAND = ["systemctl", "reboot"]


def _tone(fd: int, frequency: int) -> None:
    os.write(fd, struct.pack(_INPUT_EVENT, 0, 0, _EV_SND, _SND_TONE, frequency))


def beep(melody: Optional[Iterable[tuple[int, int, int]]] = None) -> RpcResult:
    """Play a melody of ``(frequency, length_ms, delay_ms)`` on the PC speaker."""
    notes = list(_DEFAULT_MELODY if melody is None else melody)
    try:
        fd = os.open(_PCSPKR, os.O_WRONLY)
        try:
            for position, (frequency, length, delay) in enumerate(notes):
                _tone(fd, frequency)
                time.sleep(length / 1000)
                _tone(fd, 0)
                if position < len(notes) - 1:
                    time.sleep(delay / 1000)
        finally:
            os.close(fd)
    except OSError as error:
        return failure(error)
    return Success(None)


def display_hostname() -> RpcResult:
    """Show the system's hostname in a message window on the screen."""
    try:
        hostname = Path(_ETC_HOSTNAME).read_text(encoding="utf-8")
    except OSError as error:
        return failure(error)

    try:
        subprocess.Popen(
            [
                "xmessage",
                "-center",
                "-timeout",
                str(_X_MESSAGE_TIMEOUT_SEC),
                hostname.strip(),
            ],
            start_new_session=True,
        )
    except OSError as error:
        return failure(error)
    return Success(None)


def identify() -> RpcResult:
    """Beep and display the hostname so that technicians can find the system."""
    return beep(None) + display_hostname()


def _reboot_after(delay: Optional[float]) -> None:
    if delay is not None:
        time.sleep(delay)
    try:
        completed = subprocess.run(
            _REBOOT_COMMAND,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as error:
        print(f"Could not reboot: {error}", file=sys.stderr)
        return
    if completed.returncode != 0:
        print(f"Could not reboot: exit code {completed.returncode}", file=sys.stderr)


def reboot(delay: Optional[float] = None) -> RpcResult:
    """Reboot the system in the background, after ``delay`` seconds if given."""
    threading.Thread(target=_reboot_after, args=(delay,), daemon=True).start()
    return Success(None)