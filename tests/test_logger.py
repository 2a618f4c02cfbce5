"""Tests for the CSV export log."""

import pandas as pd

import client_settings as cs
from logger import LOG_COLUMNS, load_logs, log_export


def test_log_export_appends_rows_with_single_header(tmp_path):
    log_file = tmp_path / "exports.csv"

    assert log_export("Answer", "Answer.txt", "Download", log_file=str(log_file)) == (True, "Logged")
    log_export("Interrogatories", "Interrogatories.txt", "Download", log_file=str(log_file))

    df = load_logs(str(log_file))
    assert list(df.columns) == LOG_COLUMNS
    assert df["Document"].tolist() == ["Answer", "Interrogatories"]
    assert df["Filename"].tolist() == ["Answer.txt", "Interrogatories.txt"]
    assert log_file.read_text().count("Timestamp") == 1


def test_log_export_uses_configured_file(tmp_path, monkeypatch):
    log_file = tmp_path / "configured.csv"
    monkeypatch.setattr(cs, "EXPORT_LOG_FILE", str(log_file))

    log_export("Counterclaim", "Counterclaim.txt", "Download")

    assert log_file.exists()
    assert load_logs()["Action"].tolist() == ["Download"]


def test_log_export_reports_unwritable_path(tmp_path):
    missing_dir = tmp_path / "nope" / "exports.csv"

    ok, msg = log_export("Answer", "Answer.txt", "Download", log_file=str(missing_dir))

    assert ok is False
    assert msg


def test_load_logs_missing_file_is_empty(tmp_path):
    df = load_logs(str(tmp_path / "missing.csv"))
    assert isinstance(df, pd.DataFrame)
    assert df.empty
    assert list(df.columns) == LOG_COLUMNS


def test_load_logs_empty_file_is_empty(tmp_path):
    log_file = tmp_path / "empty.csv"
    log_file.write_text("")

    df = load_logs(str(log_file))
    assert df.empty
    assert list(df.columns) == LOG_COLUMNS


def test_log_export_into_empty_file_writes_header(tmp_path):
    log_file = tmp_path / "empty.csv"
    log_file.write_text("")

    log_export("Answer", "Answer.txt", "Download", log_file=str(log_file))

    df = load_logs(str(log_file))
    assert list(df.columns) == LOG_COLUMNS
    assert df["Document"].tolist() == ["Answer"]
