"""Tests for the download/clipboard export helpers."""

import pytest

import dispatcher
from logger import load_logs


@pytest.fixture
def toasts(monkeypatch):
    shown = []
    monkeypatch.setattr(dispatcher.st, "toast", lambda msg, **kwargs: shown.append(msg))
    return shown


def test_record_logs_download(tmp_path, toasts):
    log_file = tmp_path / "exports.csv"

    assert dispatcher._record("Answer", "Answer.txt", "Download", log_file=str(log_file)) is True

    df = load_logs(str(log_file))
    assert df[["Document", "Filename", "Action"]].values.tolist() == [["Answer", "Answer.txt", "Download"]]
    assert toasts == []


def test_record_warns_when_log_unwritable(tmp_path, toasts):
    log_file = tmp_path / "missing_dir" / "exports.csv"

    assert dispatcher._record("Answer", "Answer.txt", "Download", log_file=str(log_file)) is False

    assert not log_file.exists()
    assert len(toasts) == 1
    assert toasts[0].startswith("⚠️ Export not logged:")


def test_offer_download_sends_plain_text(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(dispatcher.st, "download_button", lambda label, **kwargs: calls.append(kwargs))
    log_file = str(tmp_path / "exports.csv")

    dispatcher.offer_download("Requests_for_Admission.txt", "RFA 1: Admit…", "Requests for Admission",
                              key="dl", log_file=log_file)

    kwargs = calls[0]
    assert kwargs["file_name"] == "Requests_for_Admission.txt"
    assert kwargs["mime"] == "text/plain"
    assert kwargs["data"].decode("utf-8") == "RFA 1: Admit…"
    assert kwargs["on_click"] is dispatcher._record
    assert kwargs["args"] == ("Requests for Admission", "Requests_for_Admission.txt", "Download", log_file)


def test_copy_to_clipboard_renders_body_verbatim(monkeypatch):
    rendered = []
    monkeypatch.setattr(dispatcher.st, "code", lambda body, **kwargs: rendered.append((body, kwargs)))

    dispatcher.copy_to_clipboard("line one\n\nline two")

    body, kwargs = rendered[0]
    assert body == "line one\n\nline two"
    assert kwargs["language"] is None
