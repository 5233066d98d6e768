"""Tests for the form collaborator and configuration."""

import logging
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from formhandler.config import configure_logging
from formhandler.fields import TextField
from formhandler.form import Form
from formhandler.formatters import PlainFormatter
from formhandler.validators import EmailValidator, NumberValidator


def test_submitted_follows_data():
    assert Form().is_submitted() is False
    assert Form({"name": "Piet"}).is_submitted() is True
    assert Form({}, submitted=True).is_submitted() is True


def test_default_formatter():
    assert isinstance(Form().get_formatter(), PlainFormatter)


def test_fields_register_themselves():
    form = Form()
    field = TextField(form, "name")
    button = form.submit_button("send")
    assert form.get_fields() == [field, button]
    assert form.get_field("name") is field
    assert form.get_field("missing") is None


def test_field_value_lookup():
    form = Form({"tags": ["a", "b"], "name": "Piet"})
    assert form.get_field_value("name") == "Piet"
    assert form.get_field_value("tags[]") == ["a", "b"]
    assert form.get_field_value("unknown") is None
    assert form.get_field_value("") is None


def test_aggregated_validity():
    form = Form({"email": "broken", "age": "200"})
    form.text_field("email").add_validator(EmailValidator(message="bad email"))
    form.text_field("age").add_validator(NumberValidator(min=0, max=120, message="bad age"))
    form.text_field("note")

    assert form.is_valid() is False
    assert form.get_error_messages() == {"email": ["bad email"], "age": ["bad age"]}


def test_disabled_fields_are_skipped():
    form = Form({"email": "broken"})
    form.text_field("email").add_validator(EmailValidator()).set_disabled(True)
    assert form.is_valid() is True
    assert form.get_error_messages() == {}


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging("debug")
    assert calls[0]["level"] == logging.DEBUG
