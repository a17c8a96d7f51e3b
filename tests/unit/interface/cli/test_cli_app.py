from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process with a frozen clock and checks exit codes, stream
output and the written artifact.
"""

import json
from datetime import datetime
from unittest.mock import patch

import pytest

from sqlmerge.interface.cli.app import main

EXPECTED = "-- [2020-01-01 00:00:00]\n\nSELECT * FROM table1;\nSELECT * FROM table2;"


@pytest.fixture
def frozen_now():
    with patch("sqlmerge.interface.cli.app.datetime") as mock_dt:
        mock_dt.now.return_value = datetime(2020, 1, 1, 0, 0, 0)
        yield mock_dt


@pytest.fixture
def sql_dir(make_sql_dir):
    return make_sql_dir({
        "2.sql": "SELECT * FROM table2;",
        "1.sql": "SELECT * FROM table1;",
        "exec_cleanup.sql": "DELETE FROM table1;",
    })


def test_main_writes_merged_output(tmp_path, sql_dir, frozen_now):
    out = tmp_path / "merged.sql"

    code = main(["-d", str(sql_dir), "-o", str(out), "--use-defaults"])

    assert code == 0
    assert out.read_bytes() == EXPECTED.encode("utf-8")


def test_main_overwrites_existing_output(tmp_path, sql_dir, frozen_now):
    out = tmp_path / "merged.sql"
    out.write_text("stale", encoding="utf-8")

    assert main(["-d", str(sql_dir), "-o", str(out), "--use-defaults"]) == 0
    assert out.read_text(encoding="utf-8") == EXPECTED


def test_main_dry_run_prints_without_writing(tmp_path, sql_dir, frozen_now, capsysbinary):
    out = tmp_path / "merged.sql"

    code = main(["-d", str(sql_dir), "-o", str(out), "--use-defaults", "--dry-run"])

    assert code == 0
    assert capsysbinary.readouterr().out == EXPECTED.encode("utf-8")
    assert not out.exists()


def test_main_dry_run_emits_exact_utf8_bytes(tmp_path, make_sql_dir, frozen_now, capsysbinary):
    root = make_sql_dir({"1.sql": "SELECT 'ñandú';\r\n", "2.sql": "SELECT '東京';"})

    code = main(["-d", str(root), "--use-defaults", "--dry-run"])

    assert code == 0
    assert capsysbinary.readouterr().out == (
        "-- [2020-01-01 00:00:00]\n\nSELECT 'ñandú';\r\n\nSELECT '東京';"
    ).encode("utf-8")


def test_main_interrupt_returns_130(tmp_path, sql_dir, capsys):
    out = tmp_path / "merged.sql"

    with patch("sqlmerge.interface.cli.app.merge_sql_files", side_effect=KeyboardInterrupt):
        code = main(["-d", str(sql_dir), "-o", str(out), "--use-defaults"])

    assert code == 130
    assert not out.exists()
    assert "Interrupted" in capsys.readouterr().err


def test_main_encoding_error_writes_nothing(tmp_path, make_sql_dir, frozen_now, capsys):
    root = make_sql_dir({"1.sql": "SELECT 1;", "2.sql": bytes([0xFF, 0xFE, 0x41, 0x00])})
    out = tmp_path / "merged.sql"

    code = main(["-d", str(root), "-o", str(out), "--use-defaults"])

    assert code == 1
    assert not out.exists()
    err = capsys.readouterr().err
    assert "Error merging files" in err
    assert str(root / "2.sql") in err


def test_main_missing_directory(tmp_path, capsys):
    code = main(["-d", str(tmp_path / "nope"), "-o", str(tmp_path / "o.sql"), "--use-defaults"])

    assert code == 2
    assert "Directory does not exist" in capsys.readouterr().err


def test_main_output_write_failure(tmp_path, sql_dir, frozen_now, capsys):
    blocked = tmp_path / "blocked"
    blocked.mkdir()

    code = main(["-d", str(sql_dir), "-o", str(blocked), "--use-defaults"])

    assert code == 1
    assert "Cannot write output file" in capsys.readouterr().err


def test_main_reads_config_file(tmp_path, sql_dir, frozen_now):
    out = tmp_path / "from_config.sql"
    config = tmp_path / "config.json"
    config.write_text(json.dumps({
        "directory": str(sql_dir),
        "output_file_path": str(out),
    }), encoding="utf-8")

    assert main(["--config", str(config)]) == 0
    assert out.read_text(encoding="utf-8") == EXPECTED


def test_main_cli_overrides_config_file(tmp_path, sql_dir, frozen_now):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"output_file_path": str(tmp_path / "ignored.sql")}), encoding="utf-8")
    out = tmp_path / "cli.sql"

    assert main(["--config", str(config), "-d", str(sql_dir), "-o", str(out)]) == 0
    assert out.exists()
    assert not (tmp_path / "ignored.sql").exists()


def test_main_dump_config(tmp_path, capsys):
    code = main(["-d", str(tmp_path), "-o", "out.sql", "--use-defaults", "--dump-config"])

    assert code == 0
    dumped = json.loads(capsys.readouterr().out)
    assert dumped["directory"] == str(tmp_path)
    assert dumped["logging_level"] == "INFO"
