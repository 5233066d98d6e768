"""Number Validator"""

import math
from typing import Optional

from formhandler.config.constants import NUMBER_ERROR_MESSAGE
from formhandler.validators.base import RuleValidator


class NumberValidator(RuleValidator):
    """Validates numeric values with optional inclusive min/max bounds."""

    def __init__(
        self,
        min: Optional[float] = None,
        max: Optional[float] = None,
        required: bool = True,
        message: Optional[str] = None,
    ):
        super().__init__(required, message if message is not None else NUMBER_ERROR_MESSAGE)
        self.min = min
        self.max = max

    def check(self, value) -> bool:
        if isinstance(value, bool):
            return False

        try:
            num = float(value) if isinstance(value, str) else value
        except ValueError:
            return False

        if math.isnan(num):
            return False

        if self.min is not None and num < self.min:
            return False

        if self.max is not None and num > self.max:
            return False

        return True
