from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from ..core.exceptions import ValidationError


class JsonFileTokenStorage:
    """TokenStorage persisted as a single JSON object on disk.

    Note: A missing file reads as empty storage; it is created on first write.
    """

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        value = self._load_all().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        data = self._load_all()
        data[key] = str(value)
        self._save_all(data)

    def remove_item(self, key: str) -> None:
        data = self._load_all()
        if data.pop(key, None) is not None:
            self._save_all(data)

    def _load_all(self) -> dict:
        if not self._path.exists():
            return {}
        with self._path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Token storage {self._path} is corrupt: {e}")
        if not isinstance(data, dict):
            raise ValidationError(f"Token storage {self._path} is not a JSON object")
        return data

    def _save_all(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f)
        os.replace(tmp, self._path)
