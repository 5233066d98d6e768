"""Form fields and renderable elements."""

from formhandler.fields.base import (
    Element,
    ElementKind,
    ValidityState,
    AbstractFormField,
)
from formhandler.fields.text import TextField, PassField
from formhandler.fields.textarea import TextArea
from formhandler.fields.checkbox import CheckBox
from formhandler.fields.radio import RadioButton
from formhandler.fields.upload import UploadField
from formhandler.fields.button import SubmitButton

__all__ = [
    "Element",
    "ElementKind",
    "ValidityState",
    "AbstractFormField",
    "TextField",
    "PassField",
    "TextArea",
    "CheckBox",
    "RadioButton",
    "UploadField",
    "SubmitButton",
]
