from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_dict(cls, raw: dict) -> "ApiConfig":
        return cls(
            base_url=str(raw["base_url"]).rstrip("/"),
            timeout=float(raw.get("timeout", DEFAULT_REQUEST_TIMEOUT)),
        )


class ApiConnection:
    """Authenticated HTTP access to the remote API.

    Note: Blocking (requests); async callers run it in a worker thread.
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def url_for(self, path: str) -> str:
        return f"{self._config.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, *, token: str) -> Any:
        """GET ``path`` with a bearer token and decode the JSON body.

        Raises requests.RequestException on transport errors and non-2xx
        responses, ValueError when the body is not JSON.
        """
        url = self.url_for(path)
        response = self._session.get(
            url,
            headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
            timeout=self._config.timeout,
        )
        logger.debug("GET %s -> %s", url, response.status_code)
        response.raise_for_status()
        return response.json()
