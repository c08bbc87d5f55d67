"""Store (or clear) the dev access token the list screens read.

Usage: python scripts/set_token.py <token>
       python scripts/set_token.py --clear
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from presensi_client.core.constants import ACCESS_TOKEN_KEY
from presensi_client.session.json_token_storage import JsonFileTokenStorage


def main(argv: list[str]) -> int:
    if len(argv) != 1:
        print(__doc__.strip())
        return 2

    settings = load_settings()
    storage = JsonFileTokenStorage(settings.TOKEN_STORE_PATH)

    if argv[0] == "--clear":
        storage.remove_item(ACCESS_TOKEN_KEY)
        print(f"OK: Cleared {ACCESS_TOKEN_KEY} -> {storage.path}")
    else:
        storage.set_item(ACCESS_TOKEN_KEY, argv[0])
        print(f"OK: Stored {ACCESS_TOKEN_KEY} -> {storage.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
