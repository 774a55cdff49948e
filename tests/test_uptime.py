import json
import time

from digsigctl.sysinfo.uptime import Uptime


def test_to_dict_layout():
    uptime = Uptime(1_500_000_000_250_000_000, 3600, (), (0.5, 0.25, 0.125))
    assert uptime.to_dict() == {
        "time": {"secs_since_epoch": 1_500_000_000, "nanos_since_epoch": 250_000_000},
        "uptime": {"secs": 3600, "nanos": 0},
        "users": [],
        "load_avg": {"one": 0.5, "five": 0.25, "fifteen": 0.125},
    }


def test_collect_is_sane():
    before = time.time_ns()
    uptime = Uptime.collect()
    after = time.time_ns()
    assert before <= uptime.time_ns <= after
    assert uptime.uptime >= 0
    assert len(uptime.load_avg) == 3
    assert uptime.users == ()


def test_collect_serializes():
    data = Uptime.collect().to_dict()
    decoded = json.loads(json.dumps(data))
    assert set(decoded) == {"time", "uptime", "users", "load_avg"}
    assert 0 <= decoded["time"]["nanos_since_epoch"] < 1_000_000_000