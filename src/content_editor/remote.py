"""Client for the remote document store (Firebase Realtime Database REST API)."""
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


class RemoteUnavailableError(RuntimeError):
    """Raised when the remote store cannot be reached or rejects a request."""


class RemoteDocumentStore:
    """Reads and writes whole documents by key. No transactions, last write wins."""

    def __init__(self, base_url: str, timeout: float = 10.0, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        self._client_owner = client is None

    def _url(self, key: str) -> str:
        return f"{self.base_url}/{quote(key, safe='')}.json"

    def get(self, key: str) -> Optional[dict[str, Any]]:
        """Fetch the document stored under key, or None when there is none."""
        try:
            response = self._client.get(self._url(key))
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise RemoteUnavailableError(f"could not load {key}: {exc}") from exc
        if data is not None and not isinstance(data, dict):
            raise RemoteUnavailableError(f"unexpected document type for {key}: {type(data).__name__}")
        return data

    def put(self, key: str, record: dict[str, Any]) -> None:
        """Overwrite the document stored under key."""
        try:
            response = self._client.put(self._url(key), json=record)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RemoteUnavailableError(f"could not save {key}: {exc}") from exc
        logger.info("Saved %s to remote store", key)

    def close(self) -> None:
        if self._client_owner:
            self._client.close()
