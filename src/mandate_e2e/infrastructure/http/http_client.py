from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type
from types import TracebackType

import httpx

logger = logging.getLogger(__name__)


class GatewayHttpClient:
    """Thin synchronous HTTP client for the payment gateway API.

    - Normalizes base URLs and paths.
    - Applies a default timeout and the ``api-key`` header.
    - Never raises for non-successful responses; call tests compare the status
      against the connector's expected response themselves.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if not base_url:
            raise ValueError("GatewayHttpClient requires a non-empty base_url.")
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "api-key": self._api_key,
        }

    def _log(self, resp: httpx.Response) -> httpx.Response:
        logger.info(
            "%s %s -> %s (x-request-id: %s)",
            resp.request.method,
            resp.request.url,
            resp.status_code,
            resp.headers.get("x-request-id", "-"),
        )
        return resp

    def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        resp = self._client.post(
            self._url(path), json=json, headers=self._headers(), **kwargs
        )
        return self._log(resp)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GatewayHttpClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
