from __future__ import annotations

import asyncio
import logging

import requests

from ..api.connection import ApiConnection
from ..core.enums import RecordKind
from ..core.exceptions import ValidationError
from .model import FetchResult, Record

logger = logging.getLogger(__name__)


class ApiRecordFetcher:
    """Fetch one record collection (attendances or permits) from the API."""

    def __init__(self, conn: ApiConnection, kind: RecordKind):
        self._conn = conn
        self.kind = kind

    async def fetch(self, token: str) -> FetchResult:
        try:
            payload = await asyncio.to_thread(self._conn.get_json, self.kind.path, token=token)
        except requests.RequestException as e:
            logger.warning("Fetching %s failed: %s", self.kind.value, e)
            return FetchResult.failure(f"request failed: {e}")
        except ValueError as e:
            logger.warning("Fetching %s returned a non-JSON body: %s", self.kind.value, e)
            return FetchResult.failure("response body is not JSON")

        try:
            records = self._parse(payload)
        except ValidationError as e:
            logger.warning("Fetching %s returned a malformed payload: %s", self.kind.value, e)
            return FetchResult.failure(f"malformed payload: {e}")

        if not records:
            logger.info("No %s returned from API", self.kind.value)
        else:
            logger.debug("Fetched %d %s", len(records), self.kind.value)
        return FetchResult.success(records)

    def _parse(self, payload) -> list[Record]:
        if not isinstance(payload, list):
            raise ValidationError("expected a JSON array")
        return [Record.from_payload(item, self.kind) for item in payload]
