import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx

from src.config import settings
from src.store.exceptions import TransportError

logger = logging.getLogger(__name__)


class BillsResource:
    """
    The ``/bills`` collection of the Billed store.

    Mirrors the calls the employee pages make: ``list`` for the bills page,
    ``create`` for the proof upload and ``update`` for the final submission.
    """

    def __init__(self, store: "StoreService", key: str = "bills"):
        self.store = store
        self.key = key

    async def list(self) -> list[Any]:
        data = await self.store.request("GET", f"/{self.key}")
        if not isinstance(data, list):
            raise TransportError(f"Réponse inattendue pour /{self.key} : liste attendue")
        return data

    async def create(
        self,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Create a bill. With ``files`` the request is sent as multipart form
        data (proof upload), otherwise as JSON.

        Returns:
            The store's answer, ``{"fileUrl": ..., "key": ...}`` for uploads
        """
        if files:
            return await self.store.request("POST", f"/{self.key}", data=dict(data or {}), files=dict(files))
        return await self.store.request("POST", f"/{self.key}", json=dict(data or {}))

    async def update(self, data: Union[str, Mapping[str, Any]], selector: str) -> dict[str, Any]:
        """
        Patch bill ``selector``. ``data`` may be an already serialized JSON body.
        """
        body = data if isinstance(data, str) else json.dumps(data)
        return await self.store.request(
            "PATCH",
            f"/{self.key}/{selector}",
            content=body,
            headers={"Content-Type": "application/json"},
        )


class StoreService:
    """
    Async client for the Billed REST store.

    Every failure (network error or non-2xx answer) is raised as
    TransportError, with the backend's ``message`` when it sends one and
    ``Erreur <status>`` otherwise.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url or settings.STORE_API_URL
        self.token = token if token is not None else settings.STORE_API_TOKEN
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.STORE_TIMEOUT,
        )
        logger.info(f"Store client initialized for {self.base_url}")

    def bills(self) -> BillsResource:
        return BillsResource(self)

    def _headers(self, extra: Optional[Mapping[str, str]] = None) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if extra:
            headers.update(extra)
        return headers

    async def request(self, method: str, url: str, headers: Optional[Mapping[str, str]] = None, **kwargs: Any) -> Any:
        try:
            response = await self.client.request(method, url, headers=self._headers(headers), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Store request {method} {url} failed: {e}", exc_info=True)
            raise TransportError(f"Erreur réseau : {e}") from e

        if response.is_error:
            message = self._error_message(response)
            logger.error(
                f"Store request {method} {url} rejected",
                extra={"status_code": response.status_code, "error": message},
            )
            raise TransportError(message, status_code=response.status_code)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Réponse illisible du serveur ({response.status_code})", status_code=response.status_code) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"Erreur {response.status_code}"

    async def aclose(self) -> None:
        await self.client.aclose()


_store_service: Optional[StoreService] = None

def get_store_service() -> StoreService:
    global _store_service
    if _store_service is None:
        _store_service = StoreService()
    return _store_service

async def close_store_service() -> None:
    global _store_service
    if _store_service is not None:
        await _store_service.aclose()
        _store_service = None
