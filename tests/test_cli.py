# tests/test_cli.py

import pytest

from litcal.cli import main


def test_easter_command(capsys):
    assert main(["easter", "2025", "--anchors"]) == 0
    out = capsys.readouterr().out
    assert "Easter 2025: 2025-04-20" in out
    assert "Pentecost      = 2025-06-08" in out


def test_week_command_and_shorthand(capsys):
    assert main(["week", "2024-12-25"]) == 0
    assert main(["2024-12-25"]) == 0
    out = capsys.readouterr().out
    assert out.count("week=Christmas-1") == 2
    assert "sunday=2024-12-22" in out


def test_day_command(capsys, data_dir):
    assert main(["day", "2024-01-25", "--data", str(data_dir)]) == 0
    out = capsys.readouterr().out
    assert "color=white" in out
    assert "Title: The Conversion of St. Paul" in out
    assert "Gospel:" in out


def test_month_command(capsys, data_dir):
    assert main(["month", "2024", "2", "--data", str(data_dir)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("2024-02")
    assert len(lines) == 1 + 29
    assert any("Lent-1" in line and "violet" in line for line in lines)


def test_easter_table_command(capsys):
    assert main(["easter-table", "--from-year", "2023", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "03-31" in out
    assert "2024-03-31" in out  # listed under March occurrences


def test_engine_errors_exit_nonzero():
    with pytest.raises(SystemExit) as exc:
        main(["easter", "1500"])
    assert "1500" in str(exc.value)


def test_day_command_hides_title_rows(capsys, data_dir):
    assert main(["day", "2024-02-14", "--data", str(data_dir)]) == 0
    out = capsys.readouterr().out
    assert "  Title:" not in out
    assert "Daily (Valentine, Martyr):" in out
    assert "Collect:" in out


def test_missing_types_table_exits_cleanly(data_dir):
    (data_dir / "types.json").unlink()
    with pytest.raises(SystemExit) as exc:
        main(["day", "2024-01-25", "--data", str(data_dir)])
    assert "types.json" in str(exc.value)
