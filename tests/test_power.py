import pytest

from utools import power


@pytest.fixture
def battery(tmp_path, monkeypatch):
    status = tmp_path / "status"
    capacity = tmp_path / "capacity"
    status.write_text("Discharging\n")
    capacity.write_text("87\n")
    monkeypatch.setattr(power, "STATUS_PATH", str(status))
    monkeypatch.setattr(power, "CAPACITY_PATH", str(capacity))
    return status, capacity


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Discharging\n", False),
        ("Charging\n", True),
        ("Full\n", True),
        ("Not charging\n", True),
    ],
)
def test_is_connected(tmp_path, text, expected):
    path = tmp_path / "status"
    path.write_text(text)
    assert power.is_connected(path) is expected


def test_get_percent(tmp_path):
    path = tmp_path / "capacity"
    path.write_text("87\n")
    assert power.get_percent(path) == 87.0


def test_get_percent_full(tmp_path):
    path = tmp_path / "capacity"
    path.write_text("100\n")
    assert power.get_percent(path) == 100.0


def test_get_percent_rejects_garbage(tmp_path):
    path = tmp_path / "capacity"
    path.write_text("ab\n")
    with pytest.raises(ValueError):
        power.get_percent(path)


def test_get_percent_rejects_empty(tmp_path):
    path = tmp_path / "capacity"
    path.write_text("\n")
    with pytest.raises(ValueError):
        power.get_percent(path)


def test_main_default_prints_percent(battery, capsys):
    assert power.main([]) == 0
    assert capsys.readouterr().out == "87.00%\n"


def test_main_connected_no(battery, capsys):
    assert power.main(["-c"]) == 0
    assert capsys.readouterr().out == "no\n"


def test_main_connected_yes(battery, capsys):
    status, _ = battery
    status.write_text("Full\n")
    assert power.main(["-c"]) == 0
    assert capsys.readouterr().out == "yes\n"


def test_main_percent_and_connected(battery, capsys):
    assert power.main(["-pc"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("%")
    assert lines[1] == "no"


def test_main_invalid_option(battery, capsys):
    assert power.main(["-z"]) == 1
    assert "usage: power" in capsys.readouterr().err


def test_main_help(battery, capsys):
    assert power.main(["-h"]) == 0
    assert "[-cph]" in capsys.readouterr().err