"""Text Validators"""

import re
from typing import Optional, Pattern, Union

from formhandler.config.constants import STRING_ERROR_MESSAGE
from formhandler.validators.base import RuleValidator


class StringValidator(RuleValidator):
    """Validates free-text fields with optional inclusive length constraints."""

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        required: bool = True,
        message: Optional[str] = None,
    ):
        super().__init__(required, message if message is not None else STRING_ERROR_MESSAGE)
        self.min_length = min_length
        self.max_length = max_length

    def check(self, value) -> bool:
        length = len(str(value))

        if self.min_length is not None and length < self.min_length:
            return False

        if self.max_length is not None and length > self.max_length:
            return False

        return True


class RegexValidator(RuleValidator):
    """Validates that the value contains a match for the given pattern."""

    def __init__(
        self,
        pattern: Union[str, Pattern],
        required: bool = True,
        message: Optional[str] = None,
    ):
        super().__init__(required, message)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check(self, value) -> bool:
        return self.pattern.search(str(value)) is not None
