"""
Field Validators

Provides validation for common field types, a registry of named validator
prototypes and the conversion every attached validator goes through.
"""

import copy
import inspect

from formhandler.validators.base import AbstractValidator, RuleValidator, is_empty
from formhandler.validators.user import UserFunctionValidator, UserMethodValidator
from formhandler.validators.email import EmailValidator
from formhandler.validators.bank_number import BankNumberValidator
from formhandler.validators.date import DateValidator
from formhandler.validators.select_field import SelectFieldValidator
from formhandler.validators.number import NumberValidator
from formhandler.validators.text import StringValidator, RegexValidator

# Registry of built-in validator prototypes; fields attach copies
_VALIDATORS = {
    "email": EmailValidator(),
    "bank_number": BankNumberValidator(),
    "date": DateValidator(),
    "select": SelectFieldValidator(),
    "number": NumberValidator(),
    "text": StringValidator(),
}


def get_validator(name: str) -> AbstractValidator:
    """Get a validator prototype by name. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: AbstractValidator):
    """Register a custom validator prototype."""
    if not isinstance(validator, AbstractValidator):
        raise TypeError(f"Only AbstractValidator instances can be registered, got {type(validator).__name__}")
    _VALIDATORS[name] = validator


def to_validator(candidate) -> AbstractValidator:
    """
    Normalize anything accepted by AbstractFormField.add_validator().

    Validator instances and registered names yield a fresh unbound copy,
    bound methods and (object, "method") pairs a UserMethodValidator, and
    other callables a UserFunctionValidator.

    Raises:
        TypeError: if the candidate cannot be turned into a validator.
        ValueError: if a name is given that is not registered.
    """
    if isinstance(candidate, AbstractValidator):
        return copy.deepcopy(candidate)

    if isinstance(candidate, str):
        prototype = get_validator(candidate)
        if prototype is None:
            raise ValueError(f"Unknown validator: '{candidate}'")
        return copy.deepcopy(prototype)

    if isinstance(candidate, tuple) or inspect.ismethod(candidate):
        return UserMethodValidator(candidate)

    if callable(candidate) and not inspect.isclass(candidate):
        return UserFunctionValidator(candidate)

    raise TypeError(
        "Only validators of type AbstractValidator, validator names and callables "
        f"are allowed, got {type(candidate).__name__}"
    )


__all__ = [
    "AbstractValidator",
    "RuleValidator",
    "is_empty",
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
    "to_validator",
]
