"""
formhandler

Server-side HTML form fields with lazily evaluated, cached validation and
pluggable rendering strategies.
"""

from formhandler.form import Form
from formhandler.fields import (
    Element,
    ElementKind,
    ValidityState,
    AbstractFormField,
    TextField,
    PassField,
    TextArea,
    CheckBox,
    RadioButton,
    UploadField,
    SubmitButton,
)
from formhandler.validators import (
    AbstractValidator,
    UserFunctionValidator,
    UserMethodValidator,
    EmailValidator,
    BankNumberValidator,
    DateValidator,
    SelectFieldValidator,
    NumberValidator,
    StringValidator,
    RegexValidator,
    get_validator,
    register_validator,
)
from formhandler.formatters import (
    Formatter,
    PlainFormatter,
    ErrorAsTitleFormatter,
    get_formatter,
)
from formhandler.models import UploadedFile

__all__ = [
    "Form",
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
    "AbstractValidator",
    "UserFunctionValidator",
    "UserMethodValidator",
    "EmailValidator",
    "BankNumberValidator",
    "DateValidator",
    "SelectFieldValidator",
    "NumberValidator",
    "StringValidator",
    "RegexValidator",
    "get_validator",
    "register_validator",
    "Formatter",
    "PlainFormatter",
    "ErrorAsTitleFormatter",
    "get_formatter",
    "UploadedFile",
]
