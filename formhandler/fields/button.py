"""Submit Button"""

from formhandler.fields.base import Element, ElementKind, attribute, flag


class SubmitButton(Element):
    """A submit button. Not a field: it has no validators and renders itself."""

    kind = ElementKind.SUBMIT

    def __init__(self, form, name: str = "", value: str = "Submit"):
        super().__init__()
        self.form = form
        self.name = name
        self.value = value
        self.disabled = False
        self.form.add_field(self)

    def set_name(self, name: str):
        self.name = name
        return self

    def get_name(self) -> str:
        return self.name

    def set_value(self, value: str):
        self.value = value
        return self

    def get_value(self) -> str:
        return self.value

    def set_disabled(self, disabled: bool):
        self.disabled = bool(disabled)
        return self

    def is_disabled(self) -> bool:
        return self.disabled

    def render(self) -> str:
        html = '<input type="submit"'
        if self.name:
            html += attribute("name", self.name)
        if self.value:
            html += attribute("value", self.value)
        if self.disabled:
            html += flag("disabled")
        html += super().render()
        html += " />"
        return html
