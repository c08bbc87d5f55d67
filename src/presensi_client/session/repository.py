from __future__ import annotations

from typing import Optional, Protocol


class TokenStorage(Protocol):
    """Key/value local storage holding the session credentials."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError
