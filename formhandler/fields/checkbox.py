"""Checkbox"""

from formhandler.fields.base import (
    AbstractFormField,
    ElementKind,
    attribute,
    flag,
    values_match,
)


class CheckBox(AbstractFormField):
    """
    Checkbox input.

    The checked state follows the submitted data: it is recomputed whenever
    the name or the value of the box changes. The label is only a container
    for the formatter and is not escaped.
    """

    kind = ElementKind.CHECKBOX
    input_type = "checkbox"

    def __init__(self, form, name: str = "", value="1"):
        self.checked = False
        self.label = None
        super().__init__(form)

        if value not in (None, ""):
            self.set_value(value)
        if name:
            self.set_name(name)

    def set_name(self, name: str):
        super().set_name(name)
        self._set_checked_based_on_value()
        return self

    def set_value(self, value):
        super().set_value(value)
        self._set_checked_based_on_value()
        return self

    def set_checked(self, checked: bool):
        self.clear_cache()
        self.checked = bool(checked)
        return self

    def is_checked(self) -> bool:
        return self.checked

    def set_label(self, label: str):
        self.label = label
        return self

    def get_label(self):
        return self.label

    def _set_checked_based_on_value(self):
        submitted = self.form.get_field_value(self.name) if self.name else None
        self.set_checked(values_match(submitted, self.value))

    def render(self) -> str:
        html = f'<input type="{self.input_type}"'

        if self.name:
            html += attribute("name", self.name)
        if self.checked:
            html += flag("checked")
        if self.value not in (None, ""):
            html += attribute("value", self.value)
        if self.disabled:
            html += flag("disabled")

        html += super().render()
        html += " />"
        return html
