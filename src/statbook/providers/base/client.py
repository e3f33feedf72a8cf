from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from statbook.core.errors import ApiStatusError, JsonDecodeError, NetworkError

logger = logging.getLogger(__name__)

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic async HTTP client wrapper.

    - Uses a single underlying httpx.AsyncClient for connection pooling; safe to
      share across concurrent calls.
    - Provides consistent error handling.
    - Makes exactly one attempt per call.
    """

    base_url: str
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BaseHttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        """
        Perform an HTTP request and return parsed JSON (dict).
        Raises NetworkError on transport issues, ApiStatusError on non-2xx and
        JsonDecodeError when the body is not a JSON object.
        """
        logger.debug("%s %s params=%s", method, path, _redact(params))
        try:
            resp = await self._client.request(
                method=method,
                url=path.lstrip("/"),
                params=params,
                headers=headers,
            )
        except httpx.TransportError as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e

        if not resp.is_success:
            raise ApiStatusError(
                resp.status_code, f"HTTP {resp.status_code} for {method} {resp.request.url.path}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise JsonDecodeError("Response was not valid JSON.") from e

        if not isinstance(data, dict):
            raise JsonDecodeError(f"Expected JSON object, got {type(data).__name__}")

        return data

    async def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        return await self.request_json("GET", path, params=params, headers=headers)


def _redact(params: Mapping[str, Any] | None) -> dict[str, Any]:
    if not params:
        return {}
    return {k: ("***" if k.lower() == "apikey" else v) for k, v in params.items()}
