"""Text Area"""

from markupsafe import escape

from formhandler.fields.base import AbstractFormField, ElementKind, attribute, flag


class TextArea(AbstractFormField):
    """Multi line text input."""

    kind = ElementKind.TEXTAREA

    def __init__(self, form, name: str = "", cols: int = 40, rows: int = 7):
        self.cols = cols
        self.rows = rows
        self.maxlength = None
        self.readonly = False
        self.placeholder = None
        super().__init__(form, name)

    def set_name(self, name: str):
        super().set_name(name)
        self.set_value(self.form.get_field_value(name))
        return self

    def set_cols(self, cols: int):
        self.cols = cols
        return self

    def get_cols(self):
        return self.cols

    def set_rows(self, rows: int):
        self.rows = rows
        return self

    def get_rows(self):
        return self.rows

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
        html = "<textarea"

        if self.cols:
            html += attribute("cols", self.cols)
        if self.rows:
            html += attribute("rows", self.rows)
        if self.name:
            html += attribute("name", self.name)
        if self.disabled:
            html += flag("disabled")
        if self.maxlength:
            html += attribute("maxlength", self.maxlength)
        if self.readonly:
            html += flag("readonly")
        if self.placeholder:
            html += attribute("placeholder", self.placeholder)

        html += super().render()
        html += ">"
        if self.value is not None:
            html += str(escape(self.value))
        html += "</textarea>"
        return html
