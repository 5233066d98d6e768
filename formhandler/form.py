"""
Form

Minimal form container the fields collaborate with: it holds the submitted
data, registers fields and hands out the formatter they render through.
"""

import logging
from typing import Any, Dict, List, Optional

from formhandler.config.settings import DEFAULT_FORMATTER
from formhandler.fields import (
    AbstractFormField,
    CheckBox,
    Element,
    PassField,
    RadioButton,
    SubmitButton,
    TextArea,
    TextField,
    UploadField,
)
from formhandler.formatters import Formatter, get_formatter

logger = logging.getLogger(__name__)


class Form:
    """
    A form and the data submitted to it.

    Usage:
        form = Form(request_data)
        email = form.text_field("email").add_validator("email")
        if form.is_valid():
            ...
        html = str(email)
    """

    def __init__(
        self,
        data: Optional[Dict[str, Any]] = None,
        submitted: Optional[bool] = None,
        formatter: Optional[Formatter] = None,
    ):
        self.data: Dict[str, Any] = dict(data or {})
        self.submitted = bool(self.data) if submitted is None else bool(submitted)
        self.formatter = formatter or get_formatter(DEFAULT_FORMATTER)
        self.fields: List[Element] = []

    # =========================================================================
    # Collaborator interface used by the fields
    # =========================================================================

    def add_field(self, field: Element):
        self.fields.append(field)
        return self

    def get_field_value(self, name: str) -> Any:
        """Raw submitted value for a field name; "name[]" also finds "name"."""
        if not name:
            return None
        if name in self.data:
            return self.data[name]
        if name.endswith("[]"):
            return self.data.get(name[:-2])
        return None

    def is_submitted(self) -> bool:
        return self.submitted

    def get_formatter(self) -> Formatter:
        return self.formatter

    def set_formatter(self, formatter: Formatter):
        self.formatter = formatter
        return self

    # =========================================================================
    # Field access
    # =========================================================================

    def get_fields(self) -> List[Element]:
        return list(self.fields)

    def get_field(self, name: str) -> Optional[Element]:
        for field in self.fields:
            if getattr(field, "name", None) == name:
                return field
        return None

    def text_field(self, name: str = "") -> TextField:
        return TextField(self, name)

    def pass_field(self, name: str = "") -> PassField:
        return PassField(self, name)

    def text_area(self, name: str = "", cols: int = 40, rows: int = 7) -> TextArea:
        return TextArea(self, name, cols, rows)

    def check_box(self, name: str = "", value="1") -> CheckBox:
        return CheckBox(self, name, value)

    def radio_button(self, name: str = "", value=None) -> RadioButton:
        return RadioButton(self, name, value)

    def upload_field(self, name: str = "") -> UploadField:
        return UploadField(self, name)

    def submit_button(self, name: str = "", value: str = "Submit") -> SubmitButton:
        return SubmitButton(self, name, value)

    # =========================================================================
    # Aggregated validity
    # =========================================================================

    def _enabled_fields(self) -> List[AbstractFormField]:
        return [
            field for field in self.fields
            if isinstance(field, AbstractFormField) and not field.is_disabled()
        ]

    def is_valid(self) -> bool:
        """Evaluate every enabled field; all of them, so every error surfaces."""
        valid = True
        for field in self._enabled_fields():
            if not field.is_valid():
                valid = False

        logger.debug(f"Form evaluated: {'valid' if valid else 'invalid'} ({len(self.fields)} elements)")
        return valid

    def get_error_messages(self) -> Dict[str, List[str]]:
        """Error messages per invalid field name."""
        return {
            field.get_name(): field.get_error_messages()
            for field in self._enabled_fields()
            if not field.is_valid()
        }
