from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ..core.constants import ACCESS_TOKEN_KEY
from ..core.exceptions import ValidationError
from .repository import TokenStorage

logger = logging.getLogger(__name__)


class SessionTokenProvider:
    """Reads the bearer token saved by the login flow.

    An absent token is a normal outcome (not logged in), not an error.
    """

    def __init__(self, storage: TokenStorage, *, key: str = ACCESS_TOKEN_KEY):
        self._storage = storage
        self._key = key

    async def get_token(self) -> Optional[str]:
        try:
            token = await asyncio.to_thread(self._storage.get_item, self._key)
        except (OSError, ValidationError) as e:
            logger.warning("Could not read %s from token storage: %s", self._key, e)
            return None
        token = (token or "").strip()
        return token or None
