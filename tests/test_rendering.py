"""Tests for field markup and formatters."""

import html
import re
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from formhandler.fields import AbstractFormField, ElementKind
from formhandler.formatters import ErrorAsTitleFormatter, PlainFormatter, get_formatter
from formhandler.form import Form
from formhandler.validators import EmailValidator, StringValidator


class TestFieldMarkup:
    def test_text_field_attribute_order(self, form):
        field = form.text_field("name")
        field.set_value("Piet").set_size(20).set_disabled(True).set_maxlength(10)
        field.set_readonly(True).set_placeholder("Your name")

        assert field.render() == (
            '<input type="text" name="name" value="Piet" size="20" disabled="disabled" '
            'maxlength="10" readonly="readonly" placeholder="Your name" />'
        )

    def test_empty_value_is_omitted(self, form):
        assert form.text_field("name").render() == '<input type="text" name="name" />'

    def test_escaping_round_trip(self, form):
        original = 'Say "hi" <b> & leave'
        field = form.text_field("quote").set_value(original)

        markup = field.render()
        assert "<b>" not in markup
        assert "&lt;b&gt;" in markup and "&amp;" in markup

        rendered = re.search(r'value="([^"]*)"', markup).group(1)
        assert html.unescape(rendered) == original

    def test_required_marker(self, form):
        field = form.text_field("email").add_validator(EmailValidator())
        assert field.render() == '<input type="text" name="email" required="required" />'

    def test_generic_attributes(self, form):
        field = form.text_field("city")
        field.set_id("city").add_class("wide").add_class("big").set_attribute("data-country", "nl")
        assert field.render() == (
            '<input type="text" name="city" id="city" class="wide big" data-country="nl" />'
        )

    def test_pass_field(self, form):
        field = form.pass_field("password")
        field.set_value("Piet").set_size(2).set_disabled(True).set_maxlength(10)
        field.set_readonly(True).set_placeholder("Enter your password").set_title("Set your pwd")

        assert field.get_value() == "Piet"
        assert str(field) == (
            '<input type="password" name="password" size="2" disabled="disabled" maxlength="10" '
            'readonly="readonly" placeholder="Enter your password" title="Set your pwd" />'
        )

    def test_text_area(self, form):
        field = form.text_area("msg")
        field.set_cols(10).set_rows(10).set_disabled(True).set_maxlength(500)
        field.set_readonly(True).set_placeholder("Enter a message").set_value("Piet & co")

        assert [field.get_rows(), field.get_cols()] == [10, 10]
        assert str(field) == (
            '<textarea cols="10" rows="10" name="msg" disabled="disabled" maxlength="500" '
            'readonly="readonly" placeholder="Enter a message">Piet &amp; co</textarea>'
        )

    def test_checkbox(self, submitted_form):
        form = submitted_form({"agree": "1"})
        box = form.check_box("agree").set_disabled(True)
        assert box.render() == '<input type="checkbox" name="agree" checked="checked" value="1" disabled="disabled" />'

    def test_radio_button(self, form):
        radio = form.radio_button("size", "M")
        assert radio.render() == '<input type="radio" name="size" value="M" />'

    def test_upload_field(self, form):
        field = form.upload_field("photos").set_size(30).set_accept("image/png").set_multiple(True)
        assert field.render() == (
            '<input type="file" name="photos[]" size="30" accept="image/png" multiple="multiple" />'
        )

    def test_upload_name_not_doubled(self, form):
        field = form.upload_field("photos[]").set_multiple(True)
        assert field.render() == '<input type="file" name="photos[]" multiple="multiple" />'


class TestPlainFormatter:
    def test_str_goes_through_formatter(self, form):
        field = form.text_field("name")
        assert str(field) == field.render()

    def test_label_after_checkbox(self, form):
        box = form.check_box("agree").set_id("agree-1").set_label("I agree")
        assert str(box) == (
            '<input type="checkbox" name="agree" value="1" id="agree-1" />'
            '<label for="agree-1">I agree</label>'
        )

    def test_help_text(self, form):
        field = form.text_field("name").set_help_text("Use <your> name")
        assert str(field) == '<input type="text" name="name" /> <span class="help">Use &lt;your&gt; name</span>'

    def test_element_renders_itself(self, form):
        button = form.submit_button("send", "Go")
        assert str(button) == '<input type="submit" name="send" value="Go" />'

    def test_generic_field_fallback(self, form):
        class HiddenField(AbstractFormField):
            def render(self):
                return f'<input type="hidden" name="{self.name}"{super().render()} />'

        field = HiddenField(form, "token")
        assert field.kind is ElementKind.GENERIC
        assert str(field) == '<input type="hidden" name="token" />'

    def test_register_replaces_routine(self, form):
        formatter = PlainFormatter().register(ElementKind.TEXT, lambda element: "<custom />")
        form.set_formatter(formatter)
        assert str(form.text_field("name")) == "<custom />"


class TestErrorAsTitleFormatter:
    def _field(self, form):
        field = form.text_field("email")
        field.add_validator(EmailValidator(message="Invalid email address."))
        field.add_validator(StringValidator(max_length=20, message="Too long"))
        return field

    def test_errors_in_title_after_submit(self, submitted_form):
        form = submitted_form({"email": "this-is-not-an-email-address"}, formatter=ErrorAsTitleFormatter())
        field = self._field(form)

        markup = str(field)
        assert 'title="Invalid email address.&lt;br /&gt;\nToo long"' in markup
        assert field.get_title() == "Invalid email address.<br />\nToo long"

    def test_formatting_keeps_validity(self, submitted_form):
        form = submitted_form({"email": "this-is-not-an-email-address"}, formatter=ErrorAsTitleFormatter())
        field = self._field(form)

        str(field)
        str(field)
        assert field.is_valid() is False
        assert field.get_error_messages() == ["Invalid email address.", "Too long"]

    def test_no_title_before_submit(self):
        form = Form(formatter=ErrorAsTitleFormatter())
        field = self._field(form)
        field.set_value("not-an-email")
        assert "title=" not in str(field)

    def test_no_title_when_valid(self, submitted_form):
        form = submitted_form({"email": "a@b.nl"}, formatter=ErrorAsTitleFormatter())
        assert "title=" not in str(self._field(form))

    def test_title_cleared_once_corrected(self, submitted_form):
        form = submitted_form({"email": "bad"}, formatter=ErrorAsTitleFormatter())
        field = form.text_field("email").add_validator(EmailValidator(message="bad email"))

        assert 'title="bad email"' in str(field)

        field.set_value("ok@example.com")
        markup = str(field)
        assert field.is_valid() is True
        assert "title=" not in markup
        assert field.get_title() is None

    def test_own_title_restored(self, submitted_form):
        form = submitted_form({"email": "bad"}, formatter=ErrorAsTitleFormatter())
        field = form.text_field("email").set_title("Your e-mail address")
        field.add_validator(EmailValidator(message="bad email"))

        assert 'title="bad email"' in str(field)

        field.set_value("ok@example.com")
        assert 'title="Your e-mail address"' in str(field)


class TestGetFormatter:
    def test_by_name(self):
        assert isinstance(get_formatter("plain"), PlainFormatter)
        assert isinstance(get_formatter("error_as_title"), ErrorAsTitleFormatter)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_formatter("fancy")
