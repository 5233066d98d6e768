"""
Global formhandler settings loaded from environment variables.

All settings have sensible defaults so the library works out of the box.
Override via environment variables.
"""

import os

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

# =============================================================================
# Rendering
# =============================================================================
# Formatter used by a Form when none is given ("plain" or "error_as_title")
DEFAULT_FORMATTER = os.getenv("FORMHANDLER_FORMATTER", "plain")

# =============================================================================
# Validation
# =============================================================================
# Default for EmailValidator(check_domain_exists=None). The lookup is blocking.
EMAIL_CHECK_DOMAIN = os.getenv("FORMHANDLER_CHECK_EMAIL_DOMAIN", "false").lower() in ("true", "1", "yes")
