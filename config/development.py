import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:8000"),
    "timeout": float(os.getenv("API_TIMEOUT", "15")),
}

# Local key/value store written by the login flow (holds accessToken)
TOKEN_STORE_PATH = os.getenv("TOKEN_STORE_PATH", ".presensi/storage.json")

# Calendar days for the Today/Yesterday filters are computed in this zone
TIMEZONE = os.getenv("APP_TIMEZONE", "Asia/Jakarta")

DEBUG = True
