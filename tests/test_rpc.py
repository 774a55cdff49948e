import json
import subprocess
from http import HTTPStatus
from unittest.mock import patch

import pytest

from digsigctl.operation_mode import OperationMode
from digsigctl.rpc import Command, CommandKind
from digsigctl.rpc_result import Failure, Success


def _recorder(codes):
    calls = []

    def run(argv, **kwargs):
        calls.append(list(argv))
        return subprocess.CompletedProcess(argv, codes(list(argv)), b"", b"")

    return run, calls


@pytest.mark.parametrize(
    "data, expected",
    [
        ("beep", Command(CommandKind.BEEP)),
        ("identify", Command(CommandKind.IDENTIFY)),
        ("configFile", Command(CommandKind.CONFIG_FILE)),
        ("restartWebBrowser", Command(CommandKind.RESTART_WEB_BROWSER)),
        ({"beep": None}, Command(CommandKind.BEEP)),
        ({"reboot": 5}, Command(CommandKind.REBOOT, 5)),
        ({"reboot": None}, Command(CommandKind.REBOOT)),
        ({"operationMode": None}, Command(CommandKind.OPERATION_MODE)),
        (
            {"operationMode": "blackScreen"},
            Command(CommandKind.OPERATION_MODE, OperationMode.BLACK_SCREEN),
        ),
    ],
)
def test_from_json(data, expected):
    assert Command.from_json(data) == expected


@pytest.mark.parametrize(
    "data",
    [
        "reboot",
        "operationMode",
        "unknown",
        {"reboot": -1},
        {"reboot": True},
        {"reboot": "5"},
        {"beep": 1},
        {"operationMode": "off"},
        {"beep": None, "identify": None},
        42,
    ],
)
def test_from_json_rejects_invalid(data):
    with pytest.raises(ValueError):
        Command.from_json(data)


def test_config_file_returns_path(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    result = Command(CommandKind.CONFIG_FILE).run()
    assert result == Success(str(tmp_path / ".config/chromium/Default/Preferences"))


def test_restart_web_browser_success():
    run, calls = _recorder(lambda argv: 3 if argv[1] == "status" else 0)
    with patch("subprocess.run", side_effect=run):
        result = Command.from_json("restartWebBrowser").run()
    assert result == Success("Web browser restarted.")
    assert calls[-1] == ["sudo", "systemctl", "start", "chromium.service"]


def test_restart_web_browser_failure():
    run, _ = _recorder(lambda argv: 0 if argv[-2] == "stop" else 1)
    with patch("subprocess.run", side_effect=run):
        result = Command.from_json("restartWebBrowser").run()
    assert isinstance(result, Failure)
    status, body = result.to_response()
    assert status == HTTPStatus.BAD_REQUEST
    assert json.loads(body)[0]["message"] == "Could not restart web browser."


def test_operation_mode_query():
    run, _ = _recorder(lambda argv: 1)
    with patch("subprocess.run", side_effect=run):
        result = Command.from_json({"operationMode": None}).run()
    assert result == Success(OperationMode.BLACK_SCREEN)
    assert result.to_response() == (HTTPStatus.OK, '"blackScreen"')


def test_operation_mode_set():
    run, calls = _recorder(lambda argv: 0)
    with patch("subprocess.run", side_effect=run):
        result = Command.from_json({"operationMode": "chromium"}).run()
    assert result == Success("Operation mode set")
    assert calls[-1] == ["sudo", "systemctl", "enable", "--now", "chromium.service"]


def test_operation_mode_set_failure():
    run, _ = _recorder(lambda argv: 0 if argv[2] == "disable" else 1)
    with patch("subprocess.run", side_effect=run):
        result = Command.from_json({"operationMode": "chromium"}).run()
    assert isinstance(result, Failure)
    assert result.errors.errors[0].message == "Could not set operation mode."


def test_beep_failure_is_reported():
    with patch("os.open", side_effect=PermissionError("denied")):
        result = Command.from_json("beep").run()
    assert isinstance(result, Failure)
    assert result.errors.errors[0].message == "denied"