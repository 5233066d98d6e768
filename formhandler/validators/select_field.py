"""Select Field Validator"""

from typing import Any, Optional

from formhandler.validators.base import RuleValidator

# Entries that count as "nothing selected"
_BLANK = (None, "", "0", 0, False)


class SelectFieldValidator(RuleValidator):
    """
    Validates the number of selected options.

    Works on single values as well as on lists; min and max are inclusive
    and None means unbounded.
    """

    scalar_only = False

    def __init__(
        self,
        min: Optional[int] = None,
        max: Optional[int] = None,
        required: bool = True,
        message: Optional[str] = None,
    ):
        super().__init__(required, message)
        self.min = min
        self.max = max

    def set_min(self, value: Optional[int]):
        self.min = value
        return self

    def get_min(self):
        return self.min

    def set_max(self, value: Optional[int]):
        self.max = value
        return self

    def get_max(self):
        return self.max

    def prepare(self, value: Any) -> Any:
        if isinstance(value, dict):
            value = list(value.values())
        elif isinstance(value, (list, tuple, set)):
            value = list(value)
        elif value is None or isinstance(value, (str, int, float)):
            value = [value]
        else:
            return value

        return [item for item in value if item not in _BLANK]

    def check(self, value: Any) -> bool:
        # Unknown objects are never a valid selection
        if not isinstance(value, list):
            return False

        count = len(value)

        if self.min is not None and count < self.min:
            return False

        if self.max is not None and count > self.max:
            return False

        return True
