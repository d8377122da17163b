from typing import Any, Dict, Optional
import asyncio
import logging

import httpx

from .exceptions import ApiError, HTTPStatusError, RequestFailedError, UnauthorizedError
from .settings import TransportSettings

logger = logging.getLogger(__name__)


class Transport:
    """Shared async HTTP client for the backend's REST API"""

    def __init__(
        self,
        settings: Optional[TransportSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Wrap an ``httpx.AsyncClient``.

        When ``client`` is given it is used as is and left open by ``aclose()``;
        otherwise a client is created lazily from ``settings`` on first use.
        """
        self.settings = settings or TransportSettings()
        self._client = client
        self._owns_client = client is None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """
        The underlying client.

        An owned client is rebuilt when called from a different event loop
        than the one it was created on; its pool cannot outlive that loop.
        """
        if self._owns_client:
            loop = _running_loop()
            if self._client is not None and None not in (loop, self._loop) and loop is not self._loop:
                logger.debug("Event loop changed, rebuilding HTTP client")
                self._client = None
            if self._client is None or self._loop is None:
                self._loop = loop
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.base_url,
                headers=self.settings.headers(),
                timeout=self.settings.timeout,
            )
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        params: Any = None,
        data: Any = None,
    ) -> Any:
        """
        Send one request and resolve to the unwrapped result.

        ``params`` is encoded into the query string and ``data`` into a JSON
        body; no body is sent when ``data`` is None. A ``{"code", "msg", "data"}``
        envelope resolves to its ``data`` when ``code`` is 0 and raises
        ``ApiError`` otherwise.
        """
        method = method.upper()
        kwargs: Dict[str, Any] = {}
        if params is not None:
            kwargs["params"] = params
        if data is not None:
            kwargs["json"] = data

        logger.debug("%s %s", method, url)
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            logger.error("Request error for %s %s: %s", method, url, exc)
            raise RequestFailedError(f"Failed to reach backend for {method} {url}: {exc}") from exc

        if response.status_code >= 400:
            detail = self._extract_detail(response)
            logger.warning(
                "Backend returned error %s for %s %s: %s",
                response.status_code,
                method,
                url,
                detail,
            )
            error_cls = UnauthorizedError if response.status_code == 401 else HTTPStatusError
            raise error_cls(
                f"{response.status_code} response for {method} {url}",
                status_code=response.status_code,
                detail=detail,
            )

        return self._unwrap(response, method, url)

    def _unwrap(self, response: httpx.Response, method: str, url: str) -> Any:
        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError:  # bad JSON or bad UTF-8
            return response.text

        # Plain JSON without the result envelope passes through
        if not isinstance(payload, dict) or "code" not in payload:
            return payload

        code = payload.get("code")
        if code == 0:
            return payload.get("data")

        msg = payload.get("msg") or "Unknown error"
        logger.warning("Backend rejected %s %s: [%s] %s", method, url, code, msg)
        raise ApiError(code, msg, status_code=response.status_code)

    @staticmethod
    def _extract_detail(response: httpx.Response) -> Any:
        try:
            payload = response.json()
            if isinstance(payload, dict):
                return payload.get("detail", payload.get("msg", payload))
            return payload
        except ValueError:  # bad JSON or bad UTF-8
            return response.text or "Request failed"

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None
