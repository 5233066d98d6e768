"""
Base Field Classes

Element carries the generic HTML attributes every renderable object has.
AbstractFormField adds the value, the attached validators and the
memoized validity result of a single form input.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from markupsafe import escape

from formhandler.validators import to_validator

logger = logging.getLogger(__name__)


class ElementKind(Enum):
    """Concrete kind tag; formatters dispatch on it."""
    TEXT = "text"
    PASSWORD = "password"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    UPLOAD = "upload"
    SUBMIT = "submit"
    GENERIC = "generic"


class ValidityState(Enum):
    """Memoized result of AbstractFormField.is_valid()."""
    UNKNOWN = "unknown"
    VALID = "valid"
    INVALID = "invalid"


def attribute(name: str, value: Any) -> str:
    """Render ` name="value"` with the value HTML-escaped."""
    return f' {name}="{escape(value)}"'


def flag(name: str) -> str:
    """Render a boolean attribute in the name="name" form."""
    return f' {name}="{name}"'


def values_match(submitted: Any, value: Any) -> bool:
    """Compare submitted form data with a field value the way browsers send it (as text)."""
    if submitted is None or value is None:
        return False
    if isinstance(submitted, (list, tuple)):
        return any(values_match(item, value) for item in submitted)
    return str(submitted) == str(value)


class Element:
    """
    Anything that can be rendered on a form.

    render() returns the generic attribute fragment; concrete elements wrap
    it into their own tag.
    """

    kind = ElementKind.GENERIC

    def __init__(self):
        self.id: Optional[str] = None
        self.style: Optional[str] = None
        self.title: Optional[str] = None
        self.tabindex: Optional[int] = None
        self.accesskey: Optional[str] = None
        self._classes: List[str] = []
        self._attributes: Dict[str, Any] = {}

    def set_id(self, value):
        self.id = value
        return self

    def get_id(self):
        return self.id

    def set_style(self, value):
        self.style = value
        return self

    def get_style(self):
        return self.style

    def set_title(self, value):
        self.title = value
        return self

    def get_title(self):
        return self.title

    def set_tabindex(self, value):
        self.tabindex = value
        return self

    def get_tabindex(self):
        return self.tabindex

    def set_accesskey(self, value):
        self.accesskey = value
        return self

    def get_accesskey(self):
        return self.accesskey

    def add_class(self, name: str):
        if name not in self._classes:
            self._classes.append(name)
        return self

    def remove_class(self, name: str):
        if name in self._classes:
            self._classes.remove(name)
        return self

    def get_class(self) -> str:
        return " ".join(self._classes)

    def set_attribute(self, name: str, value: Any):
        """Set an arbitrary attribute such as data-* or aria-*."""
        self._attributes[name] = value
        return self

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def render(self) -> str:
        html = ""
        if self.id:
            html += attribute("id", self.id)
        if self._classes:
            html += attribute("class", self.get_class())
        if self.style:
            html += attribute("style", self.style)
        if self.title:
            html += attribute("title", self.title)
        if self.tabindex is not None:
            html += attribute("tabindex", self.tabindex)
        if self.accesskey:
            html += attribute("accesskey", self.accesskey)
        for name, value in self._attributes.items():
            html += attribute(name, value)
        return html

    def __str__(self):
        form = getattr(self, "form", None)
        if form is None:
            return self.render()
        return form.get_formatter()(self)


class AbstractFormField(Element):
    """
    Base class for all form fields.

    The validity of a field is computed lazily by running every attached
    validator, and cached until the value or the validator list changes.
    """

    def __init__(self, form, name: str = ""):
        super().__init__()
        self.form = form
        self.name = ""
        self.value: Any = None
        self.disabled = False
        self.help_text = ""
        self.validators: List = []
        self.errors: List[str] = []
        self.validity = ValidityState.UNKNOWN

        self.form.add_field(self)

        if name:
            self.set_name(name)

    # =========================================================================
    # Value
    # =========================================================================

    def set_value(self, value):
        """Store the value (text is stripped) and drop the cached validity."""
        if isinstance(value, str):
            value = value.strip()
        self.value = value
        self.clear_cache()
        return self

    def get_value(self):
        return self.value

    def set_name(self, name: str):
        self.name = name
        return self

    def get_name(self) -> str:
        return self.name

    def get_form(self):
        return self.form

    def set_disabled(self, disabled: bool):
        self.disabled = bool(disabled)
        return self

    def is_disabled(self) -> bool:
        return self.disabled

    def set_help_text(self, text: str):
        """Advisory text; only shown if the formatter uses it."""
        self.help_text = text
        return self

    def get_help_text(self) -> str:
        return self.help_text

    # =========================================================================
    # Validators
    # =========================================================================

    def add_validator(self, validator):
        """
        Attach a validator to this field.

        Accepts a validator instance (attached as a copy), the name of a
        registered validator, a bound method or (object, "method") pair, or
        any other callable taking the field and returning True, False or an
        error message.

        Raises:
            TypeError: if the object cannot be used as a validator.
        """
        validator = to_validator(validator)
        validator.set_field(self)
        self.validators.append(validator)
        self.clear_cache()
        logger.debug(f"Attached {type(validator).__name__} to field '{self.name}'")
        return self

    def set_validator(self, validator):
        """Replace all current validators with the given one."""
        self.clear_validators()
        return self.add_validator(validator)

    def clear_validators(self):
        self.validators = []
        self.clear_cache()
        return self

    def get_validators(self) -> List:
        return list(self.validators)

    def is_required(self) -> bool:
        return any(validator.is_required() for validator in self.validators)

    # =========================================================================
    # Validity
    # =========================================================================

    def clear_cache(self):
        """Forget the cached validity and the messages it produced."""
        self.validity = ValidityState.UNKNOWN
        self.errors = []
        return self

    def set_valid(self, valid: bool):
        self.validity = ValidityState.VALID if valid else ValidityState.INVALID
        return self

    def add_error_message(self, message: str, set_invalid: bool = True):
        self.errors.append(message)
        if set_invalid:
            self.set_valid(False)
        return self

    def is_valid(self) -> bool:
        """
        Run all validators once and cache the outcome.

        Messages are committed only when every validator has run, so an
        evaluation aborted by an exception leaves no partial errors behind.
        """
        if self.validity is ValidityState.UNKNOWN:
            errors = []
            for validator in self.validators:
                if not validator.is_valid():
                    errors.append(validator.get_error_message())

            self.errors = errors
            self.validity = ValidityState.INVALID if errors else ValidityState.VALID
            logger.debug(
                f"Field '{self.name}' evaluated: {self.validity.value} "
                f"({len(self.validators)} validators, {len(self.errors)} errors)"
            )

        return self.validity is ValidityState.VALID

    def get_error_messages(self) -> List[str]:
        return list(self.errors)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self) -> str:
        html = super().render()
        if self.is_required():
            html += flag("required")
        return html
