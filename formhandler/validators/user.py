"""
User Validators

Adapters that turn plain callables into validators. The callable receives
the field and returns True when the value is fine, False to fail with the
default message, or a string to fail with that string as the message.
"""

import logging
from typing import Optional

from formhandler.validators.base import AbstractValidator

logger = logging.getLogger(__name__)


class UserFunctionValidator(AbstractValidator):
    """Wraps a function (or any callable) taking the field."""

    _shared_attributes = ("field", "callback")

    def __init__(self, callback, message: Optional[str] = None, required: bool = False):
        if not callable(callback):
            raise TypeError(f"Validator callback must be callable, got {type(callback).__name__}")
        super().__init__(required=required, message=message)
        self.callback = callback
        self._override: Optional[str] = None

    def is_valid(self) -> bool:
        self._override = None
        result = self.callback(self.field)

        if isinstance(result, str):
            # A returned string is the error message for this evaluation
            if result:
                self._override = result
            return False

        return bool(result)

    def get_error_message(self) -> str:
        return self._override or self.message


class UserMethodValidator(UserFunctionValidator):
    """Wraps a bound method, given directly or as an (object, "method_name") pair."""

    _shared_attributes = ("field", "callback", "target")

    def __init__(self, method, message: Optional[str] = None, required: bool = False):
        if isinstance(method, tuple):
            if len(method) != 2 or not isinstance(method[1], str):
                raise TypeError("Method validators must be given as (object, 'method_name')")
            target, name = method
            try:
                method = getattr(target, name)
            except AttributeError:
                raise TypeError(f"{type(target).__name__} has no method '{name}'")
        else:
            target = getattr(method, "__self__", None)

        super().__init__(method, message=message, required=required)
        self.target = target
        logger.debug(f"Wrapped method validator {getattr(method, '__qualname__', method)!r}")
