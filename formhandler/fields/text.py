"""Text Fields"""

from markupsafe import escape

from formhandler.fields.base import AbstractFormField, ElementKind, attribute, flag


class TextField(AbstractFormField):
    """Single line input. HTML5 input types can be set through set_type()."""

    kind = ElementKind.TEXT

    TYPE_COLOR = "color"
    TYPE_DATE = "date"
    TYPE_DATETIME = "datetime"
    TYPE_DATETIME_LOCAL = "datetime-local"
    TYPE_EMAIL = "email"
    TYPE_MONTH = "month"
    TYPE_NUMBER = "number"
    TYPE_RANGE = "range"
    TYPE_SEARCH = "search"
    TYPE_TEL = "tel"
    TYPE_TEXT = "text"
    TYPE_TIME = "time"
    TYPE_URL = "url"
    TYPE_WEEK = "week"

    # Whether the current value is written back into the markup
    render_value = True

    def __init__(self, form, name: str = ""):
        self.type = self.TYPE_TEXT
        self.size = None
        self.maxlength = None
        self.readonly = False
        self.placeholder = None
        super().__init__(form, name)

    def set_name(self, name: str):
        super().set_name(name)
        self.set_value(self.form.get_field_value(name))
        return self

    def set_type(self, value: str):
        self.type = value
        return self

    def get_type(self) -> str:
        return self.type

    def set_size(self, size: int):
        self.size = size
        return self

    def get_size(self):
        return self.size

    def set_maxlength(self, maxlength: int):
        self.maxlength = int(maxlength)
        return self

    def get_maxlength(self):
        return self.maxlength

    def set_readonly(self, readonly: bool):
        self.readonly = bool(readonly)
        return self

    def is_readonly(self) -> bool:
        return self.readonly

    def set_placeholder(self, value: str):
        self.placeholder = value
        return self

    def get_placeholder(self):
        return self.placeholder

    def render(self) -> str:
        html = f'<input type="{escape(self.type)}"'

        if self.name:
            html += attribute("name", self.name)
        if self.render_value and self.value not in (None, ""):
            html += attribute("value", self.value)
        if self.size:
            html += attribute("size", self.size)
        if self.disabled:
            html += flag("disabled")
        if self.maxlength:
            html += attribute("maxlength", self.maxlength)
        if self.readonly:
            html += flag("readonly")
        if self.placeholder:
            html += attribute("placeholder", self.placeholder)

        html += super().render()
        html += " />"
        return html


class PassField(TextField):
    """Password input; the value is never sent back to the browser."""

    kind = ElementKind.PASSWORD
    render_value = False

    def __init__(self, form, name: str = ""):
        super().__init__(form, name)
        self.type = "password"
