"""Email Validator"""

import logging
import re
import socket
from typing import Callable, Optional

from formhandler.config.constants import EMAIL_ERROR_MESSAGE
from formhandler.config.settings import EMAIL_CHECK_DOMAIN
from formhandler.validators.base import RuleValidator

logger = logging.getLogger(__name__)


def domain_exists(host: str) -> bool:
    """
    Blocking DNS lookup for the given host.

    Raises:
        OSError: if the host cannot be resolved.
    """
    socket.getaddrinfo(host, None)
    return True


class EmailValidator(RuleValidator):
    """
    Validates email addresses.

    With check_domain_exists enabled, the part after the @ must also resolve.
    The lookup is synchronous; pass a different resolver to replace it.
    """

    EMAIL_PATTERN = re.compile(
        r'^[_a-z0-9-]+(\.[_a-z0-9-]+)*@[a-z0-9-]+(\.[a-z0-9-]+)*(\.[a-z]{2,4})$',
        re.IGNORECASE,
    )

    _shared_attributes = ("field", "resolver")

    def __init__(
        self,
        required: bool = True,
        message: Optional[str] = None,
        check_domain_exists: Optional[bool] = None,
        resolver: Optional[Callable[[str], bool]] = None,
    ):
        super().__init__(required, message if message is not None else EMAIL_ERROR_MESSAGE)
        if check_domain_exists is None:
            check_domain_exists = EMAIL_CHECK_DOMAIN
        self.check_domain_exists = bool(check_domain_exists)
        self.resolver = resolver or domain_exists

    def set_check_domain_exists(self, value: bool):
        self.check_domain_exists = bool(value)
        return self

    def get_check_domain_exists(self) -> bool:
        return self.check_domain_exists

    def check(self, value) -> bool:
        value = str(value)

        if not self.EMAIL_PATTERN.fullmatch(value):
            return False

        if self.check_domain_exists:
            host = value.split("@", 1)[1]
            try:
                return bool(self.resolver(host))
            except OSError as e:
                logger.warning(f"Could not resolve email domain '{host}': {e}")
                return False

        return True
