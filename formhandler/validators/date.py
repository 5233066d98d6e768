"""Date Validator"""

from datetime import datetime
from typing import Optional

from dateutil import parser

from formhandler.validators.base import RuleValidator

# Two distinct defaults reveal which parts dateutil filled in by itself
_FIRST_DEFAULT = datetime(2000, 1, 1)
_SECOND_DEFAULT = datetime(2001, 2, 1)


class DateValidator(RuleValidator):
    """Validates that the value is a parseable date containing at least a year and a month."""

    def __init__(self, required: bool = True, message: Optional[str] = None):
        super().__init__(required, message)

    def check(self, value) -> bool:
        text = str(value)
        try:
            first = parser.parse(text, default=_FIRST_DEFAULT)
            second = parser.parse(text, default=_SECOND_DEFAULT)
        except (ValueError, OverflowError):
            return False

        return first.year == second.year and first.month == second.month
