import json

from digsigctl.fix_preferences import fix_preferences, main


def test_missing_file_is_left_alone(tmp_path, capsys):
    path = tmp_path / "Preferences"
    assert fix_preferences(path) == 0
    assert not path.exists()
    assert "Preferences file not existent." in capsys.readouterr().err


def test_damaged_file_yields_two(tmp_path, capsys):
    path = tmp_path / "Preferences"
    path.write_text("{broken", encoding="utf-8")
    assert fix_preferences(path) == 2
    assert "damaged beyond repair" in capsys.readouterr().err
    assert path.read_text(encoding="utf-8") == "{broken"


def test_empty_object_is_initialised(tmp_path):
    path = tmp_path / "Preferences"
    path.write_text("{}", encoding="utf-8")
    assert fix_preferences(path) == 0
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "sessions": {"session_data_status": 3},
        "profile": {"exit_type": "Normal"},
    }


def test_existing_values_are_preserved(tmp_path):
    path = tmp_path / "Preferences"
    original = {
        "profile": {"exit_type": "Crashed", "name": "Person 1"},
        "sessions": {"other": True},
        "session": {"startup_urls": ["https://example.com/"]},
    }
    path.write_text(json.dumps(original), encoding="utf-8")

    assert fix_preferences(path) == 0

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["profile"] == {"exit_type": "Normal", "name": "Person 1"}
    assert data["sessions"] == {"other": True, "session_data_status": 3}
    assert data["session"] == original["session"]


def test_non_object_sets_sessions_and_profile_bits(tmp_path, capsys):
    path = tmp_path / "Preferences"
    path.write_text("[1]", encoding="utf-8")
    assert fix_preferences(path) == 12
    err = capsys.readouterr().err
    assert "Could not update or init sessions: not a JSON object: preferences" in err
    assert "Could not update or init profile: not a JSON object: preferences" in err
    assert json.loads(path.read_text(encoding="utf-8")) == [1]


def test_fix_is_idempotent(tmp_path):
    path = tmp_path / "Preferences"
    path.write_text('{"a": 1}', encoding="utf-8")
    assert fix_preferences(path) == 0
    first = json.loads(path.read_text(encoding="utf-8"))
    assert fix_preferences(path) == 0
    assert json.loads(path.read_text(encoding="utf-8")) == first


def test_main_with_filename(tmp_path):
    path = tmp_path / "Preferences"
    path.write_text("{}", encoding="utf-8")
    assert main([str(path)]) == 0
    assert json.loads(path.read_text(encoding="utf-8"))["profile"] == {
        "exit_type": "Normal"
    }


def test_main_uses_default_file(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / ".config" / "chromium" / "Default" / "Preferences"
    path.parent.mkdir(parents=True)
    path.write_text("{}", encoding="utf-8")
    assert main([]) == 0
    assert json.loads(path.read_text(encoding="utf-8"))["sessions"] == {
        "session_data_status": 3
    }


def test_main_default_file_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main([]) == 0
    assert "Preferences file not existent." in capsys.readouterr().err