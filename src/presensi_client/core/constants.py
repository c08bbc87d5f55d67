"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ACCESS_TOKEN_KEY = "accessToken"

ATTENDANCES_PATH = "/attendances/"
PERMITS_PATH = "/permits"

DEFAULT_TIMEZONE = "Asia/Jakarta"
DEFAULT_REQUEST_TIMEOUT = 15.0
