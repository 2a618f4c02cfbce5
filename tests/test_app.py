"""Smoke tests for the Streamlit page, driven through AppTest."""

import pytest
from streamlit.testing.v1 import AppTest


@pytest.fixture
def app(tmp_path):
    at = AppTest.from_file("../app.py", default_timeout=30)
    at.secrets["EXPORT_LOG_FILE"] = str(tmp_path / "exports.csv")
    return at.run()


def tab_labels(at):
    return [tab.label for tab in at.tabs]


def test_initial_render_shows_pre_suit_letters(app):
    assert not app.exception
    assert tab_labels(app) == ["Debt Validation Letter", "Debt Verification Letter"]
    assert app.code[0].value.startswith("RE: Debt Validation Letter")


def test_sued_toggle_switches_to_pleadings(app):
    app.toggle(key="has_been_sued").set_value(True).run()
    assert tab_labels(app) == ["Answer", "Requests for Admission", "Requests for Production", "Interrogatories"]

    app.toggle(key="include_counterclaim").set_value(True).run()
    assert tab_labels(app)[-1] == "Counterclaim"


def test_form_fields_flow_into_documents(app):
    app.text_input(key="atty_name").input("Jane Lawyer, Esq.")
    app.text_input(key="atty_address").input("123 Main St")
    app.text_input(key="atty_phone").input("555-0000")
    app.toggle(key="reported_1099c").set_value(True)
    app.run()

    body = app.code[0].value
    assert "To: Jane Lawyer, Esq. | 123 Main St | 555-0000" in body
    assert "Debt Closure Doctrine:" in body


def test_caption_reaches_answer_header(app):
    app.toggle(key="has_been_sued").set_value(True)
    app.text_input(key="case_number").input("2025-CA-000123")
    app.run()

    answer = app.code[0].value
    assert "Case No.: 2025-CA-000123" in answer
    assert "Filed: [TBD]" in answer
