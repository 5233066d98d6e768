"""
Shared constants used across formhandler.

Centralizes separators, checksum bands and default messages that
would otherwise be scattered across the field and validator modules.
"""

# Separator used when merging error messages into a title attribute
ERROR_SEPARATOR = "<br />\n"

# Bank number (11-proof) validation
BANK_NUMBER_LENGTH = 9
POSTBANK_MIN_LENGTH = 2
POSTBANK_MAX_LENGTH = 6

# Upload status code for a successful upload
UPLOAD_ERR_OK = 0

# Default error messages
DEFAULT_ERROR_MESSAGE = "This value is incorrect."
EMAIL_ERROR_MESSAGE = "Invalid email address."
BANK_NUMBER_ERROR_MESSAGE = "Invalid banknumber."
NUMBER_ERROR_MESSAGE = "Please provide a valid number."
STRING_ERROR_MESSAGE = "The length of this value is incorrect."
