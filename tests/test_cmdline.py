import pytest

from digsigctl.sysinfo import cmdline as cmdline_module
from digsigctl.sysinfo.cmdline import cmdline, parse_cmdline


def test_parse_keys_and_values():
    result = parse_cmdline("root=/dev/sda2 rw quiet loglevel=3\n")
    assert result == {"root": "/dev/sda2", "rw": None, "quiet": None, "loglevel": "3"}


def test_value_containing_equals_sign():
    result = parse_cmdline("root=UUID=abcd")
    assert result == {"root": "UUID=abcd"}


def test_empty_value_is_kept():
    assert parse_cmdline("foo=") == {"foo": ""}


def test_empty_text():
    assert parse_cmdline("   \n") == {}


def test_later_duplicate_wins():
    assert parse_cmdline("a=1 a=2") == {"a": "2"}


def test_cmdline_reads_file(monkeypatch, tmp_path):
    path = tmp_path / "cmdline"
    path.write_text("initrd=boot.img ro\n")
    monkeypatch.setattr(cmdline_module, "PROC_CMDLINE", str(path))
    assert cmdline() == {"initrd": "boot.img", "ro": None}


def test_cmdline_missing_file(monkeypatch, tmp_path):
    monkeypatch.setattr(cmdline_module, "PROC_CMDLINE", str(tmp_path / "missing"))
    with pytest.raises(OSError):
        cmdline()