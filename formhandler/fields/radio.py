"""Radio Button"""

from formhandler.fields.base import ElementKind
from formhandler.fields.checkbox import CheckBox


class RadioButton(CheckBox):
    """One option of a radio group; checked when the submitted value equals its own."""

    kind = ElementKind.RADIO
    input_type = "radio"

    def __init__(self, form, name: str = "", value=None):
        super().__init__(form, name, value)
