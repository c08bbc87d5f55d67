from __future__ import annotations

from typing import Protocol

from ..core.enums import RecordKind
from .model import FetchResult


class RecordFetcher(Protocol):
    kind: RecordKind

    async def fetch(self, token: str) -> FetchResult:
        """Retrieve the collection; never raises, failures come back as FetchResult.failure."""

        raise NotImplementedError
