import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://api.test"),
    "timeout": 2.0,
}

TOKEN_STORE_PATH = os.getenv("TOKEN_STORE_PATH", "/tmp/presensi-test/storage.json")

TIMEZONE = "Asia/Jakarta"

DEBUG = False
TESTING = True
