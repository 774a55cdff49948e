import subprocess
from unittest import mock

import pytest

from digsigctl import systemctl


def _completed(code):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_sudo_builds_argv():
    assert systemctl.sudo("/usr/bin/smartctl", "-H", "/dev/sda") == [
        "/usr/bin/sudo",
        "/usr/bin/smartctl",
        "-H",
        "/dev/sda",
    ]


@pytest.mark.parametrize(
    "function, argv",
    [
        (systemctl.start, ["sudo", "systemctl", "start", "x.service"]),
        (systemctl.stop, ["sudo", "systemctl", "stop", "x.service"]),
        (
            systemctl.stop_and_disable,
            ["sudo", "systemctl", "disable", "--now", "x.service"],
        ),
        (
            systemctl.enable_and_start,
            ["sudo", "systemctl", "enable", "--now", "x.service"],
        ),
        (systemctl.is_enabled, ["systemctl", "is-enabled", "x.service"]),
        (systemctl.is_active, ["systemctl", "is-active", "x.service"]),
        (systemctl.status, ["systemctl", "status", "x.service"]),
    ],
)
def test_commands_run_expected_argv(function, argv):
    with mock.patch("subprocess.run", return_value=_completed(3)) as run:
        assert function("x.service") == 3
    assert run.call_args.args[0] == argv


def test_is_enabled_or_active_enabled():
    with mock.patch("subprocess.run", return_value=_completed(0)) as run:
        assert systemctl.is_enabled_or_active("x.service") is True
    assert run.call_count == 1


def test_is_enabled_or_active_only_active():
    with mock.patch(
        "subprocess.run", side_effect=[_completed(1), _completed(0)]
    ) as run:
        assert systemctl.is_enabled_or_active("x.service") is True
    assert run.call_args.args[0] == ["systemctl", "is-active", "x.service"]


def test_is_enabled_or_active_neither():
    with mock.patch("subprocess.run", return_value=_completed(4)):
        assert systemctl.is_enabled_or_active("x.service") is False


def test_is_enabled_or_active_spawn_failure():
    with mock.patch("subprocess.run", side_effect=OSError("no systemctl")):
        assert systemctl.is_enabled_or_active("x.service") is False


def test_start_spawn_failure_raises():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("sudo")):
        with pytest.raises(FileNotFoundError):
            systemctl.start("x.service")