"""Bank Number Validator"""

import re
from typing import Optional

from formhandler.config.constants import (
    BANK_NUMBER_ERROR_MESSAGE,
    BANK_NUMBER_LENGTH,
    POSTBANK_MAX_LENGTH,
    POSTBANK_MIN_LENGTH,
)
from formhandler.validators.base import RuleValidator


class BankNumberValidator(RuleValidator):
    """
    Validates Dutch bank account numbers with the 11-proof.

    Each digit is weighted 9, 8, 7, ... from the left and the weighted sum
    must be divisible by 11. Short "postbank" numbers (2 to 6 digits) are
    accepted without the checksum.
    """

    DIGITS_PATTERN = re.compile(r"[0-9]+")

    def __init__(self, required: bool = True, message: Optional[str] = None):
        super().__init__(required, message if message is not None else BANK_NUMBER_ERROR_MESSAGE)

    def check(self, value) -> bool:
        value = str(value)

        if not self.DIGITS_PATTERN.fullmatch(value):
            return False

        if POSTBANK_MIN_LENGTH <= len(value) <= POSTBANK_MAX_LENGTH:
            return True

        total = sum(int(digit) * (BANK_NUMBER_LENGTH - i) for i, digit in enumerate(value))
        return total % 11 == 0
