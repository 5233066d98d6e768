"""
Base Validator

Abstract base classes for all field validators.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Optional

from formhandler.config.constants import DEFAULT_ERROR_MESSAGE


def is_empty(value: Any) -> bool:
    """True for None, empty strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float))


class AbstractValidator(ABC):
    """
    Abstract base class for field validators.

    A validator judges the current value of the one field it is bound to.
    Fields attach a deep copy of the instance they are given, so a configured
    validator can be reused as a prototype on any number of fields.
    """

    # Attributes a copy shares with its original instead of duplicating
    _shared_attributes = ("field",)

    def __init__(self, required: bool = True, message: Optional[str] = None):
        self.field = None
        self.required = bool(required)
        self.message = message if message is not None else DEFAULT_ERROR_MESSAGE

    def __deepcopy__(self, memo):
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            if key in self._shared_attributes:
                setattr(clone, key, value)
            else:
                setattr(clone, key, copy.deepcopy(value, memo))
        clone.field = None
        return clone

    def set_field(self, field):
        """Bind this validator to its field. A validator is bound only once."""
        if self.field is not None and self.field is not field:
            raise ValueError(f"{type(self).__name__} is already bound to field '{self.field.get_name()}'")
        self.field = field
        return self

    def get_field(self):
        return self.field

    @abstractmethod
    def is_valid(self) -> bool:
        """
        Check the value of the bound field.

        Returns:
            True if the value satisfies the rule. A failure is reported
            through the return value only, never raised.
        """
        pass

    def get_error_message(self) -> str:
        return self.message

    def set_error_message(self, message: str):
        self.message = message
        return self

    def is_required(self) -> bool:
        return self.required

    def set_required(self, required: bool):
        self.required = bool(required)
        return self


class RuleValidator(AbstractValidator):
    """
    Base for the built-in rule validators.

    An empty value is valid when the validator is not required and invalid
    when it is. Any other value goes through check().
    """

    # Reject list/dict/object values with a TypeError
    scalar_only = True

    def is_valid(self) -> bool:
        value = self.field.get_value()

        if self.scalar_only and not is_scalar(value):
            raise TypeError(f"{type(self).__name__} only works on scalar values, got {type(value).__name__}")

        value = self.prepare(value)

        if is_empty(value):
            return not self.required

        return self.check(value)

    def prepare(self, value: Any) -> Any:
        """Normalize the raw field value before the empty check."""
        return value

    @abstractmethod
    def check(self, value: Any) -> bool:
        """Apply the rule to a non-empty value."""
        pass
