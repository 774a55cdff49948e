import struct
import subprocess
import threading
from unittest.mock import patch

from digsigctl import actions
from digsigctl.rpc_result import Failure, Success


def _events(writes):
    return [struct.unpack("llHHi", data) for data in writes]


def test_beep_writes_tone_events():
    writes = []
    with patch("os.open", return_value=42) as opened, patch(
        "os.write", side_effect=lambda fd, data: writes.append(data) or len(data)
    ), patch("os.close") as closed, patch("time.sleep"):
        result = actions.beep([(440, 200, 100)])
    assert result == Success(None)
    assert [event[2:] for event in _events(writes)] == [(0x12, 2, 440), (0x12, 2, 0)]
    assert opened.call_args[0][0] == "/dev/input/by-path/platform-pcspkr-event-spkr"
    closed.assert_called_once_with(42)


def test_beep_default_melody_plays_one_note():
    writes = []
    with patch("os.open", return_value=3), patch(
        "os.write", side_effect=lambda fd, data: writes.append(data) or len(data)
    ), patch("os.close"), patch("time.sleep"):
        result = actions.beep(None)
    assert result == Success(None)
    assert len(writes) == 2
    assert _events(writes)[-1][4] == 0


def test_beep_plays_every_note():
    writes = []
    melody = [(440, 10, 10), (880, 10, 10), (220, 10, 10)]
    with patch("os.open", return_value=3), patch(
        "os.write", side_effect=lambda fd, data: writes.append(data) or len(data)
    ), patch("os.close"), patch("time.sleep"):
        result = actions.beep(melody)
    assert result == Success(None)
    assert [event[4] for event in _events(writes)] == [440, 0, 880, 0, 220, 0]


def test_beep_reports_missing_device():
    with patch("os.open", side_effect=PermissionError("denied")):
        result = actions.beep(None)
    assert isinstance(result, Failure)
    assert result.errors.errors[0].message == "denied"


def test_display_hostname_starts_xmessage():
    with patch("pathlib.Path.read_text", return_value="kiosk-01\n"), patch(
        "subprocess.Popen"
    ) as popen:
        result = actions.display_hostname()
    assert result == Success(None)
    assert popen.call_args[0][0] == [
        "xmessage",
        "-center",
        "-timeout",
        "15",
        "kiosk-01",
    ]


def test_display_hostname_reports_unreadable_hostname():
    with patch("pathlib.Path.read_text", side_effect=FileNotFoundError("nope")):
        result = actions.display_hostname()
    assert isinstance(result, Failure)
    assert result.errors.errors[0].message == "nope"


def test_identify_collects_all_errors():
    with patch("os.open", side_effect=PermissionError("denied")), patch(
        "pathlib.Path.read_text", side_effect=FileNotFoundError("nope")
    ):
        result = actions.identify()
    assert isinstance(result, Failure)
    assert [error.message for error in result.errors.errors] == ["denied", "nope"]


def test_identify_succeeds_when_both_succeed():
    with patch("os.open", return_value=3), patch(
        "os.write", side_effect=lambda fd, data: len(data)
    ), patch("os.close"), patch("time.sleep"), patch(
        "pathlib.Path.read_text", return_value="kiosk-01"
    ), patch("subprocess.Popen"):
        assert actions.identify() == Success(None)


def test_reboot_runs_reboot_command_in_background():
    ran = threading.Event()
    calls = []

    def run(argv, **kwargs):
        calls.append(list(argv))
        ran.set()
        return subprocess.CompletedProcess(argv, 0, b"", b"")

    with patch("subprocess.run", side_effect=run):
        result = actions.reboot(None)
        assert ran.wait(5)
    assert result == Success(None)
    assert calls == [["systemctl", "reboot"]]