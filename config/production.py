import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "https://api.example.com"),
    "timeout": float(os.getenv("API_TIMEOUT", "10")),
}

TOKEN_STORE_PATH = os.getenv("TOKEN_STORE_PATH", os.path.expanduser("~/.presensi/storage.json"))

TIMEZONE = os.getenv("APP_TIMEZONE", "Asia/Jakarta")

DEBUG = False
